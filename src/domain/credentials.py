"""
Credential deriver - Provider username and secret hash.

Pure functions: no I/O, no logging, no module-level configuration.
"""

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass

from .exceptions import InvalidEmail, MissingConfiguration

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class AppClient:
    """
    Identity provider app client credentials.

    Validated on construction so a half-configured client never
    reaches the orchestrator.
    """

    client_id: str
    client_secret: str

    def __post_init__(self) -> None:
        missing = [name for name in ("client_id", "client_secret") if not getattr(self, name)]
        if missing:
            raise MissingConfiguration(", ".join(missing))


@dataclass(frozen=True)
class DerivedCredential:
    """Identifier and signature sent with every provider call."""

    identifier: str
    signature: str


def derive_identifier(email: str | None) -> str:
    """
    Derive the provider username from an email address.

    Takes the local part (before the first "@") and strips everything
    that is not an ASCII letter or digit. The result may be empty.

    Raises:
        InvalidEmail: If email is empty or None
    """
    if not email:
        raise InvalidEmail("email is required")
    local_part = email.split("@", 1)[0]
    return _NON_ALPHANUMERIC.sub("", local_part)


def derive_signature(identifier: str, client_id: str, client_secret: str) -> str:
    """Return base64(HMAC-SHA256(client_secret, identifier + client_id))."""
    message = (identifier + client_id).encode("utf-8")
    digest = hmac.new(client_secret.encode("utf-8"), message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def derive_credential(email: str | None, client: AppClient) -> DerivedCredential:
    """Derive identifier and signature for `email` under `client`."""
    identifier = derive_identifier(email)
    signature = derive_signature(identifier, client.client_id, client.client_secret)
    return DerivedCredential(identifier=identifier, signature=signature)
