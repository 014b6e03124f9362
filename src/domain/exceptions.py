"""
Domain exceptions - Semantic error types for sign-up.

This module defines domain-specific exceptions that communicate
input and configuration problems without leaking provider details.
Failures raised by the identity service itself are not wrapped.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ConfigurationError(RegistrationError):
    """Settings cannot be loaded; the process must not proceed."""

    pass


class MissingConfiguration(ConfigurationError):
    """One or more required settings are absent or empty."""

    pass


class InvalidConfiguration(ConfigurationError):
    """A setting is present but has an unusable value."""

    pass


class MissingInput(RegistrationError):
    """Email, password or confirmation code was not supplied."""

    pass


class InvalidEmail(RegistrationError):
    """Email is empty or yields no usable identifier."""

    pass


class InvalidPassword(RegistrationError):
    """Password fails the registration policy."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
