"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- App client credentials
- Mocked identity service ports
- Environment isolation for settings
"""

from unittest.mock import Mock

import pytest

from src.config.settings import get_settings
from src.domain.credentials import AppClient

TEST_CLIENT_ID = "test-client-id"
TEST_CLIENT_SECRET = "test-client-secret"
TEST_REGION = "ap-northeast-1"


@pytest.fixture
def app_client() -> AppClient:
    """App client credentials used across domain tests."""
    return AppClient(client_id=TEST_CLIENT_ID, client_secret=TEST_CLIENT_SECRET)


@pytest.fixture
def identity_service() -> Mock:
    """Identity service port with canned successful responses."""
    service = Mock()
    service.register.return_value = {"UserConfirmed": False, "UserSub": "sub-123"}
    service.confirm_registration.return_value = {}
    return service


@pytest.fixture
def cognito_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Required settings in the environment, no .env file in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COGNITO_CLIENT_ID", TEST_CLIENT_ID)
    monkeypatch.setenv("COGNITO_CLIENT_SECRET", TEST_CLIENT_SECRET)
    monkeypatch.setenv("COGNITO_REGION", TEST_REGION)
    for name in ("TEST_EMAIL", "TEST_PASSWORD", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
