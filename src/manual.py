"""
Manual sign-up run against a real user pool.

Usage:
    python -m src.manual

Registers TEST_EMAIL / TEST_PASSWORD, then prints how to confirm the
account once the code arrives by email. Confirmation is not run here.
"""

import logging

from src.adapters.cognito import CognitoIdentityService
from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.domain.exceptions import ConfigurationError
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

CONFIRM_HINT = (
    "After receiving the confirmation code by email, confirm the account with:\n"
    "    service.confirm_sign_up({email!r}, \"CONFIRMATION_CODE\")"
)


def build_service(settings: Settings) -> RegistrationService:
    """Wire the Cognito adapter and app client into the domain service."""
    return RegistrationService(
        identity_service=CognitoIdentityService.from_region(settings.cognito_region),
        client=settings.app_client(),
    )


def main() -> int:
    """Run one sign-up attempt. Returns the process exit code."""
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    configure_logging(settings.log_level, log_json=settings.log_json)

    try:
        service = build_service(settings)
        logger.info("Starting sign-up for %s", settings.test_email)
        service.sign_up(settings.test_email, settings.test_password)
        print(CONFIRM_HINT.format(email=settings.test_email))
    except Exception as exc:
        logger.error("Sign-up run failed: %s", exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
