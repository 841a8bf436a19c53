"""
Integration Test Fixtures

Provides fixtures for integration tests that require a running PostgreSQL.
These fixtures set up real database connections and clean up after tests.

IMPORTANT: All integration tests use the TEST database only (via POSTGRES_TEST_* env vars).
The async_test_client fixture overrides get_db to ensure the application database is
never touched. When the test database cannot be reached the tests are skipped.
"""

import os
from typing import AsyncGenerator
from urllib.parse import quote_plus

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

pytestmark = pytest.mark.integration

# Tables to clean, children first
TABLES = [
    "settings",
    "playlists",
    "todos",
    "daily_goals",
    "study_sessions",
    "subjects",
]


# =============================================================================
# Safety Check - Runs before any integration tests
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def verify_test_database():
    """
    Safety check: refuse to run against something that looks like production.

    Set ALLOW_PROD_DB_TESTS=1 to skip this check (for local development only).
    """
    if os.environ.get("ALLOW_PROD_DB_TESTS", "").lower() in ("1", "true", "yes"):
        return

    db_name = get_test_db_config()["db"]
    for indicator in ["prod", "production"]:
        assert indicator not in db_name.lower(), (
            f"SAFETY CHECK FAILED: Database name '{db_name}' looks like production! "
            "Set POSTGRES_TEST_DB environment variable or ALLOW_PROD_DB_TESTS=1."
        )


# =============================================================================
# Database Configuration
# =============================================================================


def get_test_db_config() -> dict:
    """
    Get test database configuration from environment variables.

    Priority: POSTGRES_TEST_* > defaults
    """
    return {
        "host": os.environ.get("POSTGRES_TEST_HOST", os.environ.get("POSTGRES_HOST", "localhost")),
        "port": os.environ.get("POSTGRES_TEST_PORT", os.environ.get("POSTGRES_PORT", "5432")),
        "user": os.environ.get("POSTGRES_TEST_USER", "testuser"),
        "password": os.environ.get("POSTGRES_TEST_PASSWORD", "testpass"),
        "db": os.environ.get("POSTGRES_TEST_DB", "testdb"),
    }


def get_test_db_url() -> str:
    """Build the asyncpg database URL from test config environment variables."""
    config = get_test_db_config()
    # URL-encode the password to handle special characters
    encoded_password = quote_plus(config["password"])
    return (
        f"postgresql+asyncpg://{config['user']}:{encoded_password}"
        f"@{config['host']}:{config['port']}/{config['db']}"
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine bound to the test database, with the schema in place.

    Created per test so it lives on that test's event loop.
    """
    from app.db.base import Base

    engine = create_async_engine(get_test_db_url(), echo=False)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        await engine.dispose()
        pytest.skip(f"Test database unavailable: {type(e).__name__}: {e}")

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(
    test_engine: AsyncEngine,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Session factory for the test database with cleaned tables.

    WARNING: This truncates tables! Only use for integration tests.
    """
    truncate = text(f"TRUNCATE TABLE {', '.join(TABLES)} RESTART IDENTITY CASCADE")

    async with test_engine.begin() as conn:
        await conn.execute(truncate)

    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with test_engine.begin() as conn:
        await conn.execute(truncate)


@pytest_asyncio.fixture
async def clean_db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """A session on the freshly cleaned test database."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def async_test_client(session_maker):
    """
    Create an async HTTP client configured to use the test database.

    IMPORTANT: This overrides the app's get_db dependency to ensure
    tests NEVER touch the application database. Each request gets its
    own session, like get_db does.
    """
    # Import here to defer until after environment is configured
    from app.db.base import get_db
    from app.main import app

    async def get_test_db():
        """Yield a test database session instead of the application one."""
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = get_test_db

    # Use ASGITransport for httpx 0.28+ compatibility
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Clean up dependency override after test
    app.dependency_overrides.pop(get_db, None)
