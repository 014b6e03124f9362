"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interface (port) that the domain requires
from the hosted identity provider. Adapters implement this protocol.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class IdentityService(Protocol):
    """Port interface for the hosted identity provider."""

    def register(
        self,
        client_id: str,
        identifier: str,
        password: str,
        signature: str,
        attributes: Mapping[str, str],
    ) -> Mapping[str, Any]:
        """
        Create a user account pending confirmation.

        Args:
            client_id: Identity provider app client id
            identifier: Derived username
            password: User's plaintext password (policy already applied)
            signature: Keyed hash binding identifier and client id
            attributes: User attributes, e.g. {"email": ...}

        Returns:
            Provider response payload, unmodified
        """
        ...

    def confirm_registration(
        self,
        client_id: str,
        identifier: str,
        confirmation_code: str,
        signature: str,
    ) -> Mapping[str, Any]:
        """
        Confirm a pending account with the code the provider delivered.

        Args:
            client_id: Identity provider app client id
            identifier: Derived username
            confirmation_code: Code received by the user
            signature: Keyed hash binding identifier and client id

        Returns:
            Provider response payload, unmodified
        """
        ...
