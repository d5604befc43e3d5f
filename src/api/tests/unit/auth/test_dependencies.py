"""Unit tests for the get_current_user dependency."""

from typing import Annotated
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from fastapi import Depends, FastAPI, status
from fastapi.testclient import TestClient

from auth.dependencies import (
    get_authentication_probe,
    get_current_user,
    get_jwt_validator,
)
from auth.observability import AuthenticationProbe
from auth.value_objects import CurrentUser
from shared_kernel.auth import InvalidTokenError, JWTValidator, TokenClaims


@pytest.fixture
def mock_validator() -> AsyncMock:
    validator = AsyncMock(spec=JWTValidator)
    validator.validate_token.return_value = TokenClaims(
        username="alice", subject="sub-1"
    )
    return validator


@pytest.fixture
def mock_probe() -> MagicMock:
    return create_autospec(AuthenticationProbe, instance=True)


@pytest.fixture
def test_client(mock_validator, mock_probe) -> TestClient:
    app = FastAPI()

    @app.get("/whoami")
    async def whoami(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> dict:
        return {"username": current_user.username}

    app.dependency_overrides[get_jwt_validator] = lambda: mock_validator
    app.dependency_overrides[get_authentication_probe] = lambda: mock_probe
    return TestClient(app)


class TestGetCurrentUser:
    def test_valid_token_resolves_username(
        self, test_client, mock_validator, mock_probe
    ):
        response = test_client.get(
            "/whoami", headers={"Authorization": "Bearer good-token"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"username": "alice"}
        mock_validator.validate_token.assert_awaited_once_with("good-token")
        mock_probe.user_authenticated.assert_called_once_with(username="alice")

    def test_missing_token_returns_401(self, test_client, mock_validator, mock_probe):
        response = test_client.get("/whoami")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"
        mock_validator.validate_token.assert_not_called()
        mock_probe.authentication_failed.assert_called_once()

    def test_invalid_token_returns_401(self, test_client, mock_validator, mock_probe):
        mock_validator.validate_token.side_effect = InvalidTokenError("Token expired")

        response = test_client.get(
            "/whoami", headers={"Authorization": "Bearer stale-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Token expired"
        mock_probe.authentication_failed.assert_called_once_with(
            reason="Token expired"
        )

    def test_non_bearer_scheme_is_treated_as_missing(self, test_client, mock_validator):
        response = test_client.get(
            "/whoami", headers={"Authorization": "Basic YWxpY2U6c2VjcmV0"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        mock_validator.validate_token.assert_not_called()
