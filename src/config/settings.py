"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.credentials import AppClient
from src.domain.exceptions import InvalidConfiguration, MissingConfiguration

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# pydantic error types meaning "not provided" rather than "bad value"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity provider app client
    cognito_client_id: str = Field(min_length=1)
    cognito_client_secret: str = Field(min_length=1)
    cognito_region: str = Field(min_length=1)

    # Manual run defaults
    test_email: str = "test@example.com"
    test_password: str = "Test123!@#"

    # Logging
    log_level: LogLevel = "INFO"
    log_json: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def app_client(self) -> AppClient:
        """Build the domain's app client credentials."""
        return AppClient(
            client_id=self.cognito_client_id,
            client_secret=self.cognito_client_secret,
        )


def _field_names(errors: list) -> str:
    return ", ".join(sorted({str(error["loc"][0]).upper() for error in errors if error["loc"]}))


def load_settings() -> Settings:
    """
    Load settings from the environment, failing fast on missing or bad values.

    Raises:
        MissingConfiguration: If any required setting is absent or empty
        InvalidConfiguration: If a setting has a value outside its allowed range
    """
    try:
        return Settings()
    except ValidationError as exc:
        errors = exc.errors()
        missing = [error for error in errors if error["type"] in _MISSING_ERROR_TYPES]
        if missing:
            raise MissingConfiguration(
                "Required environment variables are not set: " + _field_names(missing)
            ) from exc
        raise InvalidConfiguration("Invalid environment variables: " + _field_names(errors)) from exc


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
