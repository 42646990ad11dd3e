import os
from pathlib import Path

from decouple import Config, RepositoryEnv
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = next(p for p in Path(__file__).resolve().parents if (p / "main.py").exists())
BASE_DIR = PROJECT_ROOT

# Determine which env file to load
env_file = os.getenv("ENV_FILE", ".env")
env_path = PROJECT_ROOT / env_file

# Only use RepositoryEnv if the env file exists
if env_path.exists():
    config = Config(RepositoryEnv(env_path))
else:
    # fallback: read directly from os.environ using decouple's AutoConfig
    from decouple import AutoConfig

    config = AutoConfig(search_path=None)


class Settings(BaseSettings):
    # App general
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    APP_NAME: str = config("APP_NAME", default="ISO CONNECT")
    APP_VERSION: str = config("APP_VERSION", default="1.0.0")
    ENVIRONMENT: str = config("ENVIRONMENT", default="dev")
    APP_PORT: int = config("APP_PORT", default=8000, cast=int)
    APP_URL: str = config("APP_URL", default="https://isoconnect.app")
    DEV_URL: str = config("DEV_URL", default="http://localhost:3000")

    # Database
    DB_TYPE: str = config("DB_TYPE", default="postgresql")
    DB_HOST: str = config("DB_HOST", default="localhost")
    DB_PORT: int = config("DB_PORT", default=5432, cast=int)
    DB_USER: str = config("DB_USER", default="user")
    DB_PASS: str = config("DB_PASS", default="password")
    DB_NAME: str = config("DB_NAME", default="dbname")
    DB_ECHO: bool = config("DB_ECHO", default=False, cast=bool)

    # JWT Authentication
    JWT_SECRET: str = config("JWT_SECRET", default="your-super-secret-jwt-key-change-in-production")
    JWT_ALGORITHM: str = config("JWT_ALGORITHM", default="HS256")
    JWT_EXPIRY_HOURS: int = config("JWT_EXPIRY_HOURS", default=24, cast=int)

    # Password hashing
    BCRYPT_ROUNDS: int = config("BCRYPT_ROUNDS", default=12, cast=int)

    # Redis / realtime events
    REDIS_URL: str = config("REDIS_URL", default="redis://localhost:6379/0")
    ENABLE_REALTIME_EVENTS: bool = config("ENABLE_REALTIME_EVENTS", default=False, cast=bool)
    INQUIRY_EVENTS_CHANNEL: str = config("INQUIRY_EVENTS_CHANNEL", default="events:inquiries")

    @property
    def EVENT_CHANNEL_MAP(self) -> dict[str, str]:
        """Return topic to Redis channel mapping for published domain events.

        Returns:
            dict[str, str]: Mapping consumed by the event publisher.

        Examples:
            >>> settings.EVENT_CHANNEL_MAP["inquiries"]
            'events:inquiries'
        """

        return {"inquiries": self.INQUIRY_EVENTS_CHANNEL}

    model_config = SettingsConfigDict(extra="allow")


settings = Settings()
