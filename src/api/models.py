"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Password rules are enforced by the domain policy, not here, so the
client receives the specific policy reason.
"""

from pydantic import BaseModel, EmailStr, Field


class SignUpRequest(BaseModel):
    """Request model for user sign-up."""

    email: EmailStr
    password: str = Field(..., description="User password, checked against the registration policy")


class SignUpResponse(BaseModel):
    """Response model for successful sign-up."""

    message: str
    username: str
    user_confirmed: bool


class ConfirmRequest(BaseModel):
    """Request model for sign-up confirmation."""

    email: EmailStr
    code: str = Field(..., min_length=1, description="Confirmation code delivered by email")


class ConfirmResponse(BaseModel):
    """Response model for successful confirmation."""

    message: str
    username: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
