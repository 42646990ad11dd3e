from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.core.dependencies.auth import get_current_identity
from app.api.core.domain_exceptions import (
    Forbidden,
    IllegalTransition,
    InquiryNotFound,
    InvalidMode,
    InvalidStatus,
)
from app.api.db.database import get_db
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.inquiries.models.inquiry_model import Inquiry, InquiryMode, InquiryStatus
from app.api.modules.v1.users.models.users_model import UserRole
from main import app

SERVICE = "app.api.modules.v1.inquiries.service.inquiry_service.InquiryService"

COMPANY = Identity(id=uuid4(), role=UserRole.COMPANY, name="Acme", email="ops@acme.com")


async def _mock_db():
    yield AsyncMock()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = _mock_db
    app.dependency_overrides[get_current_identity] = lambda: COMPANY
    yield TestClient(app)
    app.dependency_overrides.clear()


def _inquiry(status=InquiryStatus.SENT) -> Inquiry:
    now = datetime.now(timezone.utc)
    return Inquiry(
        id=uuid4(),
        company_id=COMPANY.id,
        consultant_id=uuid4(),
        message="Need ISO 9001 help",
        timing="Q3 2026",
        mode=InquiryMode.REMOTE,
        status=status,
        created_at=now,
        updated_at=now,
    )


def test_create_inquiry_success(client):
    inquiry = _inquiry()
    payload = {
        "consultant_id": str(inquiry.consultant_id),
        "message": "Need ISO 9001 help",
        "timing": "Q3 2026",
        "mode": "remote",
    }

    with patch(f"{SERVICE}.create_inquiry", new=AsyncMock(return_value=inquiry)) as mock_create:
        response = client.post("/api/v1/inquiries", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "SUCCESS"
    assert data["data"]["id"] == str(inquiry.id)
    assert data["data"]["status"] == "sent"
    assert mock_create.await_args.args[0] == COMPANY
    assert mock_create.await_args.kwargs["mode"] == "remote"


def test_create_inquiry_invalid_mode_is_400(client):
    payload = {"consultant_id": str(uuid4()), "message": "Hi", "mode": "telepathy"}

    with patch(f"{SERVICE}.create_inquiry", new=AsyncMock(side_effect=InvalidMode())):
        response = client.post("/api/v1/inquiries", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "INVALID_MODE"
    assert "mode" in body["errors"]


def test_create_inquiry_missing_fields_is_400(client):
    response = client.post("/api/v1/inquiries", json={"message": "Hi", "mode": "remote"})

    assert response.status_code == 400
    assert response.json()["error"] == "MISSING_FIELD"


def test_create_inquiry_forbidden_for_non_company(client):
    with patch(
        f"{SERVICE}.create_inquiry",
        new=AsyncMock(side_effect=Forbidden("Only companies can send inquiries")),
    ):
        response = client.post(
            "/api/v1/inquiries",
            json={"consultant_id": str(uuid4()), "message": "Hi", "mode": "remote"},
        )

    assert response.status_code == 403
    assert response.json()["message"] == "Only companies can send inquiries"


def test_create_inquiry_database_failure(client):
    with patch(
        f"{SERVICE}.create_inquiry",
        new=AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down"))),
    ):
        response = client.post(
            "/api/v1/inquiries",
            json={"consultant_id": str(uuid4()), "message": "Hi", "mode": "remote"},
        )

    assert response.status_code == 500
    assert response.json()["error"] == "DEPENDENCY_FAILURE"


def test_list_inquiries(client):
    with patch(f"{SERVICE}.list_inquiries", new=AsyncMock(return_value=[])):
        response = client.get("/api/v1/inquiries")

    assert response.status_code == 200
    assert response.json()["data"] == {"inquiries": [], "total": 0}


@pytest.mark.parametrize(
    "error,status_code,code",
    [
        (InvalidStatus("Status must be one of: accepted, declined, closed"), 400, "INVALID_STATUS"),
        (Forbidden(), 403, "FORBIDDEN"),
        (InquiryNotFound(), 404, "NOT_FOUND"),
        (IllegalTransition(), 409, "ILLEGAL_TRANSITION"),
    ],
)
def test_update_status_errors(client, error, status_code, code):
    with patch(f"{SERVICE}.transition", new=AsyncMock(side_effect=error)):
        response = client.put(f"/api/v1/inquiries/{uuid4()}", json={"status": "accepted"})

    assert response.status_code == status_code
    assert response.json()["error"] == code


def test_update_status_success(client):
    inquiry = _inquiry(InquiryStatus.CLOSED)

    with patch(f"{SERVICE}.transition", new=AsyncMock(return_value=inquiry)) as mock_transition:
        response = client.put(f"/api/v1/inquiries/{inquiry.id}", json={"status": "closed"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "closed"
    assert mock_transition.await_args.args[2] == "closed"


def test_requires_authentication():
    app.dependency_overrides[get_db] = _mock_db
    try:
        response = TestClient(app).get("/api/v1/inquiries")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.parametrize("body", [{"status": 5}, {"status": ["closed"]}, {}])
def test_update_status_rejects_non_string_status(client, body):
    response = client.put(f"/api/v1/inquiries/{uuid4()}", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_STATUS"
    assert "status" in response.json()["errors"]
