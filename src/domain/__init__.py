"""
Domain layer - Pure business logic with zero framework imports.

This package contains the password policy, credential derivation and
the sign-up orchestration. It defines its own port interface for the
identity provider, keeping provider SDKs out of the domain.
"""

from .credentials import (
    AppClient,
    DerivedCredential,
    derive_credential,
    derive_identifier,
    derive_signature,
)
from .exceptions import (
    ConfigurationError,
    InvalidConfiguration,
    InvalidEmail,
    InvalidPassword,
    MissingConfiguration,
    MissingInput,
    RegistrationError,
)
from .policy import ValidationResult, validate_password
from .ports import IdentityService
from .registration import RegistrationService

__all__ = [
    "AppClient",
    "ConfigurationError",
    "DerivedCredential",
    "IdentityService",
    "InvalidConfiguration",
    "InvalidEmail",
    "InvalidPassword",
    "MissingConfiguration",
    "MissingInput",
    "RegistrationError",
    "RegistrationService",
    "ValidationResult",
    "derive_credential",
    "derive_identifier",
    "derive_signature",
    "validate_password",
]
