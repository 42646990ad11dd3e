from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.api.core.dependencies.auth import get_current_identity
from app.api.core.domain_exceptions import DuplicateAccount, InvalidCredentials, SignupFailed
from app.api.db.database import get_db
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.auth.schemas.login import LoginResponse
from app.api.modules.v1.users.models.users_model import User, UserRole
from app.api.modules.v1.users.schemas.user_schema import UserResponse
from main import app

SIGNUP = "app.api.modules.v1.auth.service.signup_service.SignupService.signup"
LOGIN = "app.api.modules.v1.auth.service.login_service.LoginService.login"

SIGNUP_PAYLOAD = {
    "name": "Quality Partners",
    "email": "hello@qualitypartners.com",
    "password": "S3cure-pass!",
    "role": "consultant",
}


async def _mock_db():
    yield AsyncMock()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = _mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _user() -> User:
    return User(
        id=uuid4(),
        role=UserRole.CONSULTANT,
        name="Quality Partners",
        email="hello@qualitypartners.com",
        created_at=datetime.now(timezone.utc),
    )


def test_signup_success(client):
    user = _user()

    with patch(SIGNUP, new=AsyncMock(return_value=user)):
        response = client.post("/api/v1/auth/signup", json=SIGNUP_PAYLOAD)

    assert response.status_code == 201
    data = response.json()["data"]["user"]
    assert data["id"] == str(user.id)
    assert data["role"] == "consultant"
    assert "password_hash" not in data


def test_signup_duplicate_is_409(client):
    with patch(SIGNUP, new=AsyncMock(side_effect=DuplicateAccount())):
        response = client.post("/api/v1/auth/signup", json=SIGNUP_PAYLOAD)

    assert response.status_code == 409
    assert response.json()["error"] == "DUPLICATE_ACCOUNT"


def test_signup_failure_is_reported(client):
    with patch(SIGNUP, new=AsyncMock(side_effect=SignupFailed())):
        response = client.post("/api/v1/auth/signup", json=SIGNUP_PAYLOAD)

    assert response.status_code == 500
    assert response.json()["error"] == "SIGNUP_FAILED"


def test_signup_validation(client):
    response = client.post(
        "/api/v1/auth/signup", json={**SIGNUP_PAYLOAD, "role": "auditor", "password": "short"}
    )

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert "role" in errors
    assert "password" in errors


def test_login_success(client):
    user = _user()
    result = LoginResponse(
        access_token="header.payload.signature",
        expires_in=86400,
        user=UserResponse.model_validate(user),
    )

    with patch(LOGIN, new=AsyncMock(return_value=result)):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "hello@qualitypartners.com", "password": "S3cure-pass!"},
        )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["access_token"] == "header.payload.signature"
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == "hello@qualitypartners.com"


def test_login_invalid_credentials(client):
    with patch(LOGIN, new=AsyncMock(side_effect=InvalidCredentials())):
        response = client.post(
            "/api/v1/auth/login", json={"email": "hello@qualitypartners.com", "password": "nope"}
        )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


def test_me_returns_identity(client):
    identity = Identity(id=uuid4(), role=UserRole.ADMIN, name="Ops", email="ops@isoconnect.app")
    app.dependency_overrides[get_current_identity] = lambda: identity

    response = client.get("/api/v1/auth/me")

    assert response.status_code == 200
    assert response.json()["data"]["role"] == "admin"


def test_me_rejects_bad_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
