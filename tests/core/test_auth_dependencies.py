from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.api.core.dependencies.auth import (
    get_current_identity,
    get_optional_identity,
    require_admin,
)
from app.api.core.domain_exceptions import IdentityNotFound, Unauthenticated
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.users.models.users_model import UserRole

RESOLVER = "app.api.core.dependencies.auth.IdentityResolver.authenticate"


def _identity(role=UserRole.COMPANY) -> Identity:
    return Identity(id=uuid4(), role=role, name="Someone", email="someone@example.com")


def _credentials(token="token") -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.asyncio
async def test_current_identity_resolved():
    identity = _identity()
    with patch(RESOLVER, new=AsyncMock(return_value=identity)):
        result = await get_current_identity(credentials=_credentials(), db=AsyncMock())
    assert result == identity


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [Unauthenticated(), IdentityNotFound("User not found")])
async def test_current_identity_failures_are_401(error):
    with patch(RESOLVER, new=AsyncMock(side_effect=error)):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_identity(credentials=_credentials(), db=AsyncMock())
    assert exc_info.value.status_code == 401
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


@pytest.mark.asyncio
async def test_missing_credentials_are_401():
    with pytest.raises(HTTPException) as exc_info:
        await get_current_identity(credentials=None, db=AsyncMock())
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_optional_identity_is_anonymous_on_failure():
    assert await get_optional_identity(credentials=None, db=AsyncMock()) is None
    with patch(RESOLVER, new=AsyncMock(side_effect=Unauthenticated())):
        assert await get_optional_identity(credentials=_credentials(), db=AsyncMock()) is None


@pytest.mark.asyncio
async def test_require_admin():
    admin = _identity(UserRole.ADMIN)
    assert await require_admin(identity=admin) == admin

    with pytest.raises(HTTPException) as exc_info:
        await require_admin(identity=_identity(UserRole.CONSULTANT))
    assert exc_info.value.status_code == 403
