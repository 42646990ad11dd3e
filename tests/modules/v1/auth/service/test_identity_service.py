from datetime import timedelta
from uuid import uuid4

import pytest

from app.api.core.domain_exceptions import IdentityNotFound, Unauthenticated
from app.api.modules.v1.auth.service.identity_service import IdentityResolver
from app.api.modules.v1.users.models.users_model import UserRole
from app.api.modules.v1.users.service.user import UserCRUD
from app.api.utils.jwt import create_access_token


@pytest.mark.asyncio
async def test_valid_token_resolves_identity(test_session, make_user):
    user = await make_user(UserRole.CONSULTANT, name="Quality Partners")
    token = create_access_token(str(user.id), user.role.value)

    identity = await IdentityResolver(test_session).authenticate(token)

    assert identity.id == user.id
    assert identity.role == UserRole.CONSULTANT
    assert identity.name == "Quality Partners"
    assert not identity.is_admin


@pytest.mark.asyncio
async def test_role_comes_from_the_user_record(test_session, make_user):
    user = await make_user(UserRole.COMPANY)
    token = create_access_token(str(user.id), "admin")

    identity = await IdentityResolver(test_session).authenticate(token)

    assert identity.role == UserRole.COMPANY


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
async def test_missing_or_malformed_token(test_session, token):
    with pytest.raises(Unauthenticated):
        await IdentityResolver(test_session).authenticate(token)


@pytest.mark.asyncio
async def test_expired_token(test_session, make_user):
    user = await make_user()
    token = create_access_token(str(user.id), "company", expires_delta=timedelta(seconds=-5))

    with pytest.raises(Unauthenticated):
        await IdentityResolver(test_session).authenticate(token)


@pytest.mark.asyncio
async def test_token_for_deleted_user(test_session, make_user):
    user = await make_user()
    user_id = user.id
    token = create_access_token(str(user_id), "company")
    await UserCRUD.delete_user(test_session, user_id)

    with pytest.raises(IdentityNotFound):
        await IdentityResolver(test_session).authenticate(token)


@pytest.mark.asyncio
async def test_token_for_unknown_user(test_session):
    token = create_access_token(str(uuid4()), "company")

    with pytest.raises(IdentityNotFound):
        await IdentityResolver(test_session).authenticate(token)
