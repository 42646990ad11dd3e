from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from app.api.core.config import settings

BASE_DIR = Path(__file__).resolve().parent


def get_db_url(test_mode: bool = False) -> str:
    """
    Build the async database URL for the configured backend.

    SQLite (used for local runs and tests) goes through aiosqlite; everything
    else is treated as PostgreSQL through asyncpg.
    """
    if settings.DB_TYPE == "sqlite" or test_mode:
        db_file = "test.db" if test_mode else "isoconnect.sqlite3"
        return f"sqlite+aiosqlite:///{BASE_DIR}/{db_file}"

    return (
        f"postgresql+asyncpg://{settings.DB_USER}:{settings.DB_PASS}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
    )


DATABASE_URL = get_db_url()

engine = create_async_engine(DATABASE_URL, echo=settings.DB_ECHO, future=True)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

Base = SQLModel


async def get_db():
    """Yield a request-scoped session, committing on success and rolling back on error."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
