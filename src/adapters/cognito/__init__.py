"""Identity provider adapters - Amazon Cognito user pools."""

from .client import CognitoIdentityService

__all__ = ["CognitoIdentityService"]
