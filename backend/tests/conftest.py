"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory database engine and sessions
- An HTTP client bound to the app with the database overridden
"""

import os
import sys
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_JSON"] = "false"
os.environ["DB_CREATE_ALL"] = "true"

# Add backend directory to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture
async def test_engine():
    """
    Provide a fresh in-memory SQLite engine with all tables created.
    """
    from app.core.database import get_async_engine
    from app.models.base import Base
    from app.models.car import Car  # noqa: F401 - Import to register model

    engine = get_async_engine("sqlite+aiosqlite:///:memory:")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    """Session factory bound to the test engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def async_session(session_maker):
    """
    Provide an async database session for repository tests.
    """
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """
    HTTP client for the FastAPI app.

    get_db is overridden so every request gets its own session on the
    test engine, with the same commit/rollback behaviour as production.
    """
    from httpx import AsyncClient, ASGITransport

    from app.core.database import get_db
    from app.main import app

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
