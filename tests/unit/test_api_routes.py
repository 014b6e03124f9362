"""
Unit tests for API v1 routes.

Tests endpoint responses with mocked dependencies.
"""

import inspect
from unittest.mock import MagicMock, Mock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies import get_registration_service
from src.api.v1 import routes
from src.api.v1.routes import router
from src.domain.credentials import AppClient
from src.domain.exceptions import InvalidEmail, InvalidPassword
from src.domain.registration import RegistrationService


def client_error(code: str, operation: str = "SignUp") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def mock_service() -> MagicMock:
    service = MagicMock(spec=RegistrationService)
    service.sign_up.return_value = {"UserConfirmed": False, "UserSub": "sub-123"}
    service.confirm_sign_up.return_value = {}
    return service


@pytest.fixture
def app(mock_service: MagicMock) -> FastAPI:
    """Create test FastAPI application with the service overridden."""
    test_app = FastAPI()
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_registration_service] = lambda: mock_service
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestSignUpEndpoint:
    """Tests for POST /v1/signup endpoint."""

    def test_sign_up_success_returns_201(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        response = client.post(
            "/v1/signup",
            json={"email": "kuro.dougu1@gmail.com", "password": "Test123!@#"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "message": "Confirmation code sent",
            "username": "kurodougu1",
            "user_confirmed": False,
        }
        mock_service.sign_up.assert_called_once_with("kuro.dougu1@gmail.com", "Test123!@#")

    def test_invalid_password_returns_400_with_reason(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.sign_up.side_effect = InvalidPassword("missing symbol")

        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": "Test12345"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "missing symbol"}

    def test_invalid_email_returns_400(self, client: TestClient, mock_service: MagicMock) -> None:
        mock_service.sign_up.side_effect = InvalidEmail("no usable username")

        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": "Test123!@#"}
        )

        assert response.status_code == 400

    def test_existing_username_returns_409(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.sign_up.side_effect = client_error("UsernameExistsException")

        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": "Test123!@#"}
        )

        assert response.status_code == 409
        assert response.json() == {"detail": "Registration failed"}

    def test_other_provider_error_returns_502(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.sign_up.side_effect = client_error("InvalidParameterException")

        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": "Test123!@#"}
        )

        assert response.status_code == 502
        assert response.json() == {"detail": "Identity service error"}

    def test_transport_error_returns_502(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.sign_up.side_effect = EndpointConnectionError(endpoint_url="https://x")

        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": "Test123!@#"}
        )

        assert response.status_code == 502

    def test_sign_up_validates_email(self, client: TestClient) -> None:
        response = client.post("/v1/signup", json={"email": "invalid", "password": "Test123!@#"})
        assert response.status_code == 422

    def test_sign_up_requires_password(self, client: TestClient) -> None:
        response = client.post("/v1/signup", json={"email": "user@example.com"})
        assert response.status_code == 422


class TestSignUpPolicyThroughService:
    """Tests with a real RegistrationService and a mocked identity service."""

    @pytest.fixture
    def identity_service(self) -> Mock:
        service = Mock()
        service.register.return_value = {"UserConfirmed": False, "UserSub": "sub-123"}
        return service

    @pytest.fixture
    def app(self, identity_service: Mock) -> FastAPI:
        test_app = FastAPI()
        test_app.include_router(router, prefix="/v1")
        real_service = RegistrationService(
            identity_service=identity_service,
            client=AppClient(client_id="client-id", client_secret="secret"),
        )
        test_app.dependency_overrides[get_registration_service] = lambda: real_service
        return test_app

    @pytest.mark.parametrize(
        ("password", "reason"),
        [
            ("short1!", "too short"),
            ("testtest!", "missing uppercase"),
            ("TESTTEST1!", "missing lowercase"),
            ("Testtest!", "missing digit"),
            ("Testtest1", "missing symbol"),
        ],
    )
    def test_policy_reason_surfaces(
        self, client: TestClient, identity_service: Mock, password: str, reason: str
    ) -> None:
        response = client.post(
            "/v1/signup", json={"email": "user@example.com", "password": password}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": reason}
        identity_service.register.assert_not_called()

    def test_valid_sign_up_reaches_identity_service(
        self, client: TestClient, identity_service: Mock
    ) -> None:
        response = client.post(
            "/v1/signup", json={"email": "kuro.dougu1@gmail.com", "password": "Test123!@#"}
        )

        assert response.status_code == 201
        args = identity_service.register.call_args[0]
        assert args[0] == "client-id"
        assert args[1] == "kurodougu1"


class TestConfirmEndpoint:
    """Tests for POST /v1/confirm endpoint."""

    def test_confirm_success_returns_200(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        response = client.post(
            "/v1/confirm", json={"email": "kuro.dougu1@gmail.com", "code": "123456"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Account confirmed", "username": "kurodougu1"}
        mock_service.confirm_sign_up.assert_called_once_with("kuro.dougu1@gmail.com", "123456")

    @pytest.mark.parametrize("code", ["CodeMismatchException", "ExpiredCodeException"])
    def test_bad_code_returns_400(
        self, client: TestClient, mock_service: MagicMock, code: str
    ) -> None:
        mock_service.confirm_sign_up.side_effect = client_error(code, "ConfirmSignUp")

        response = client.post(
            "/v1/confirm", json={"email": "user@example.com", "code": "000000"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid confirmation code"}

    def test_other_provider_error_returns_502(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.confirm_sign_up.side_effect = client_error(
            "UserNotFoundException", "ConfirmSignUp"
        )

        response = client.post(
            "/v1/confirm", json={"email": "user@example.com", "code": "123456"}
        )

        assert response.status_code == 502

    def test_confirm_requires_code(self, client: TestClient) -> None:
        response = client.post("/v1/confirm", json={"email": "user@example.com"})
        assert response.status_code == 422


class TestHandlersRunInThreadpool:
    """Provider calls block, so handlers are plain functions."""

    @pytest.mark.parametrize("handler", [routes.sign_up, routes.confirm_sign_up])
    def test_handler_is_not_coroutine(self, handler) -> None:
        assert not inspect.iscoroutinefunction(handler)
