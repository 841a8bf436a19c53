"""
Application Configuration

This module provides type-safe configuration loading using Pydantic settings.
Environment variables are loaded from .env file and validated.

Usage:
    from app.config import settings

    # Access settings
    db_url = settings.POSTGRES_URL
    tz = settings.TIMEZONE
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from app.enums.api import RateLimitType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Study Tracker"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Comma-separated list of allowed origins for the web client
    CORS_ORIGINS: str = "*"

    # PostgreSQL
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "studytracker"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "studytracker"

    # Create missing tables on startup (use Alembic migrations in production)
    DB_CREATE_TABLES: bool = True

    @property
    def POSTGRES_URL(self) -> str:
        """Async PostgreSQL connection URL."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def POSTGRES_URL_SYNC(self) -> str:
        """Sync PostgreSQL connection URL for Alembic migrations."""
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Calendar days (streaks, "today", goals) are computed in this timezone.
    # IANA name, e.g. "Europe/Berlin".
    TIMEZONE: str = "UTC"

    # Streak calculation
    STREAK_LOOKBACK_DAYS: int = 365

    # Smart suggestions: a subject is "lagging" when its share of the
    # windowed study time is above 0 and below this percentage.
    SUGGESTION_WINDOW_DAYS: int = 7
    SUGGESTION_SHARE_THRESHOLD: float = 20.0

    # Rate limiting (SlowAPI limit strings)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_ANALYTICS: str = "30/minute"

    def get_rate_limit(self, rate_limit_type: RateLimitType) -> str:
        """Return the SlowAPI limit string for an endpoint category."""
        if rate_limit_type == RateLimitType.ANALYTICS:
            return self.RATE_LIMIT_ANALYTICS
        return self.RATE_LIMIT_DEFAULT

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS split into a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


@lru_cache()
def load_yaml_config() -> dict[str, Any]:
    """Load application configuration from config/default.yaml."""
    config_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f)


yaml_config: dict[str, Any] = load_yaml_config()
