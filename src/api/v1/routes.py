"""
API v1 routes.

Defines REST endpoints for sign-up and confirmation.
"""

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_registration_service
from src.api.models import (
    ConfirmRequest,
    ConfirmResponse,
    ErrorResponse,
    SignUpRequest,
    SignUpResponse,
)
from src.domain.credentials import derive_identifier
from src.domain.exceptions import InvalidEmail, InvalidPassword, MissingInput
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])

_INVALID_CODE_ERRORS = {"CodeMismatchException", "ExpiredCodeException"}


def _provider_error(exc: ClientError | BotoCoreError) -> HTTPException:
    """Map an identity provider failure to an HTTP error."""
    code = exc.response.get("Error", {}).get("Code") if isinstance(exc, ClientError) else None
    if code == "UsernameExistsException":
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Registration failed")
    if code in _INVALID_CODE_ERRORS:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid confirmation code"
        )
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Identity service error")


@router.post(
    "/signup",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email or password"},
        409: {"model": ErrorResponse, "description": "Username already exists"},
        422: {"description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Identity service error"},
    },
    summary="Sign up a new user",
    description="Submit email and password to register with the identity provider. "
    "A confirmation code will be sent to the provided email.",
)
def sign_up(
    request_data: SignUpRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> SignUpResponse:
    """
    Register a new user with the identity provider.

    - **email**: Email address; its local part becomes the username
    - **password**: Password satisfying the registration policy
    """
    try:
        result = service.sign_up(request_data.email, request_data.password)
    except InvalidPassword as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.reason) from None
    except (InvalidEmail, MissingInput) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None
    except (ClientError, BotoCoreError) as exc:
        raise _provider_error(exc) from None
    return SignUpResponse(
        message="Confirmation code sent",
        username=derive_identifier(request_data.email),
        user_confirmed=bool(result.get("UserConfirmed", False)),
    )


@router.post(
    "/confirm",
    response_model=ConfirmResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email or confirmation code"},
        422: {"description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Identity service error"},
    },
    summary="Confirm sign-up with confirmation code",
    description="Submit the confirmation code received via email to confirm the account.",
)
def confirm_sign_up(
    request_data: ConfirmRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> ConfirmResponse:
    """
    Confirm a pending registration.

    - **email**: Email address used at sign-up
    - **code**: Confirmation code from email
    """
    try:
        service.confirm_sign_up(request_data.email, request_data.code)
    except (InvalidEmail, MissingInput) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None
    except (ClientError, BotoCoreError) as exc:
        raise _provider_error(exc) from None
    return ConfirmResponse(message="Account confirmed", username=derive_identifier(request_data.email))
