"""
Social API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── test_settings:    Settings pointing at a scratch SQLite file in tmp_path
    ├── database:         Database handle with the schema created
    ├── db_session:       AsyncSession on that database (real SQL, no mocks)
    ├── mock_db_session:  AsyncMock session for service unit tests
    └── test_client:      HTTPX AsyncClient bound to a fresh app instance
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any application imports, so the
# module-level app in social_api.main never targets a real server
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["DB_CREATE_SCHEMA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from social_api.config import Settings
from social_api.database import Database


@pytest.fixture
def test_settings(tmp_path):
    """Settings bound to a per-test SQLite database file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'social_test.db'}",
        db_create_schema=True,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A Database handle with both tables created; disposed after the test."""
    db = Database(test_settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """
    A real AsyncSession for store tests.

    Usage:
        async def test_insert(db_session):
            account = await account_store.insert(db_session, "alice", "pass1")
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Services only pass the session through to their store, so unit tests
    pair this with a mocked store.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(test_settings):
    """
    Provides an async HTTP test client bound to a fresh application.

    ASGITransport does not run the lifespan, so the schema is created here.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from social_api.main import create_app

    app = create_app(test_settings)
    await app.state.database.create_schema()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    await app.state.database.dispose()
