"""
Registration domain service - Sign-up and confirmation flow.

Sequences password policy, credential derivation and the two
identity provider calls:

    sign_up:         inputs -> policy -> identifier/signature -> register
    confirm_sign_up: inputs -> identifier/signature -> confirm_registration

Provider failures are logged and re-raised unchanged. No retries.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .credentials import AppClient, DerivedCredential, derive_credential
from .exceptions import InvalidEmail, InvalidPassword, MissingInput
from .policy import validate_password
from .ports import IdentityService

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for hosted identity provider sign-up.

    Holds the app client credentials explicitly; nothing is read
    from the environment here.
    """

    identity_service: IdentityService
    client: AppClient

    def sign_up(self, email: str, password: str) -> Mapping[str, Any]:
        """
        Register a new user with the identity provider.

        Args:
            email: User's email address, also sent as the email attribute
            password: User's password

        Returns:
            Provider response payload

        Raises:
            MissingInput: If email or password is empty
            InvalidPassword: If the password fails the policy
            InvalidEmail: If the email yields an empty identifier
        """
        if not email or not password:
            raise MissingInput("email and password are required")

        result = validate_password(password)
        if not result.valid:
            raise InvalidPassword(result.reason)

        credential = self._derive(email)
        try:
            response = self.identity_service.register(
                self.client.client_id,
                credential.identifier,
                password,
                credential.signature,
                {"email": email},
            )
        except Exception:
            logger.exception("sign_up.failed", extra={"identifier": credential.identifier})
            raise

        logger.info(
            "sign_up.succeeded",
            extra={
                "identifier": credential.identifier,
                "email": email,
            },
        )
        return response

    def confirm_sign_up(self, email: str, code: str) -> Mapping[str, Any]:
        """
        Confirm a pending registration with the delivered code.

        Raises:
            MissingInput: If email or code is empty
            InvalidEmail: If the email yields an empty identifier
        """
        if not email or not code:
            raise MissingInput("email and confirmation code are required")

        credential = self._derive(email)
        try:
            response = self.identity_service.confirm_registration(
                self.client.client_id,
                credential.identifier,
                code,
                credential.signature,
            )
        except Exception:
            logger.exception(
                "confirm_sign_up.failed", extra={"identifier": credential.identifier}
            )
            raise

        logger.info(
            "confirm_sign_up.succeeded",
            extra={
                "identifier": credential.identifier,
                "email": email,
            },
        )
        return response

    def _derive(self, email: str) -> DerivedCredential:
        """Derive credentials, rejecting emails with no alphanumeric local part."""
        credential = derive_credential(email, self.client)
        if not credential.identifier:
            raise InvalidEmail(f"no usable username in {email!r}")
        return credential
