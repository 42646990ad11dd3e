import uuid
from typing import List, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.api.core.config import settings
from app.api.events.publisher import EventPublisher

# Import all models to ensure they are registered with SQLAlchemy before creating tables
from app.api.modules.v1.auth.models.identity_model import AuthIdentity  # noqa: F401
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.consultants.models.profile_model import ConsultantProfile
from app.api.modules.v1.inquiries.models.inquiry_model import Inquiry  # noqa: F401
from app.api.modules.v1.users.models.users_model import User, UserRole

TEST_DATABASE_URL = "sqlite+aiosqlite://"

engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """bcrypt's minimum cost keeps signup/login tests fast."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def test_session():
    """Fresh in-memory SQLite schema per test."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with async_session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


class RecordingPublisher(EventPublisher):
    """In-memory publisher capturing events for assertions."""

    def __init__(self, fail: bool = False):
        self.events = []
        self.fail = fail

    async def publish(self, event) -> None:
        if self.fail:
            raise ConnectionError("event transport unavailable")
        self.events.append(event)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def failing_publisher():
    return RecordingPublisher(fail=True)


@pytest.fixture
def as_identity():
    """Convert a persisted user into the caller identity services expect."""

    def _as_identity(user: User) -> Identity:
        return Identity.model_validate(user)

    return _as_identity


@pytest.fixture
def make_user(test_session):
    """Factory persisting a user of the given role."""

    async def _make_user(
        role: UserRole = UserRole.COMPANY,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        suffix = uuid.uuid4().hex[:8]
        user = User(
            role=role,
            name=name or f"{role.value.title()} {suffix}",
            email=email or f"{role.value}-{suffix}@example.com",
        )
        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_consultant(test_session, make_user):
    """Factory persisting a consultant user together with their profile."""

    async def _make_consultant(
        name: Optional[str] = None,
        verified: bool = False,
        headline: Optional[str] = None,
        bio: Optional[str] = None,
        standards: Optional[List[str]] = None,
        industries: Optional[List[str]] = None,
        regions: Optional[List[str]] = None,
    ) -> User:
        user = await make_user(UserRole.CONSULTANT, name=name)
        profile = ConsultantProfile(
            user_id=user.id,
            headline=headline,
            bio=bio,
            standards=standards or [],
            industries=industries or [],
            regions=regions or [],
            verified=verified,
        )
        test_session.add(profile)
        await test_session.commit()
        await test_session.refresh(user)
        return user

    return _make_consultant
