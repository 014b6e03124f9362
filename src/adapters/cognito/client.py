"""
Cognito identity service adapter - Implements IdentityService protocol.

This module provides the Amazon Cognito user pool implementation of the
domain's identity service port using boto3.

Errors raised by botocore (ClientError for service rejections,
BotoCoreError for transport problems) are deliberately not caught:
the domain logs them and hands them to the caller as-is.
"""

import logging
from collections.abc import Mapping
from typing import Any

import boto3

logger = logging.getLogger(__name__)


class CognitoIdentityService:
    """
    Implements IdentityService protocol via the cognito-idp API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Timeouts and transport settings belong to the boto3 client.
    """

    def __init__(self, client: Any) -> None:
        """
        Initialize adapter with a boto3 cognito-idp client.

        Args:
            client: boto3 client created with boto3.client("cognito-idp")
        """
        self._client = client

    @classmethod
    def from_region(cls, region: str) -> "CognitoIdentityService":
        """Create an adapter backed by a new client for `region`."""
        return cls(boto3.client("cognito-idp", region_name=region))

    def register(
        self,
        client_id: str,
        identifier: str,
        password: str,
        signature: str,
        attributes: Mapping[str, str],
    ) -> Mapping[str, Any]:
        """Call SignUp with the derived username and secret hash."""
        logger.debug("SignUp request for %s", identifier)
        return self._client.sign_up(
            ClientId=client_id,
            Username=identifier,
            Password=password,
            SecretHash=signature,
            UserAttributes=[{"Name": name, "Value": value} for name, value in attributes.items()],
        )

    def confirm_registration(
        self,
        client_id: str,
        identifier: str,
        confirmation_code: str,
        signature: str,
    ) -> Mapping[str, Any]:
        """Call ConfirmSignUp with the delivered confirmation code."""
        logger.debug("ConfirmSignUp request for %s", identifier)
        return self._client.confirm_sign_up(
            ClientId=client_id,
            Username=identifier,
            ConfirmationCode=confirmation_code,
            SecretHash=signature,
        )
