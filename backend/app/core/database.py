"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, session factory, and dependency
injection for database sessions in FastAPI routes.
"""

from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.models.base import Base


def get_async_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - Uses StaticPool for in-memory databases only, so the single
      database survives across sessions; file databases get the default
      pool and one connection per session
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement for every connection

    Args:
        database_url: Override for settings.database_url (used by tests)

    Returns:
        Configured AsyncEngine instance
    """
    url = database_url or settings.database_url
    parsed_url = make_url(url)
    is_sqlite = parsed_url.get_backend_name() == "sqlite"
    is_memory = is_sqlite and parsed_url.database in (None, "", ":memory:")

    # SQLite-specific connection arguments (noop for other drivers)
    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": settings.db_echo,
        "connect_args": connect_args,
    }

    # In-memory SQLite lives in a single connection; everything else gets one per session
    if is_memory:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


# Global async engine instance
engine = get_async_engine()


# Async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,
)


async def init_db() -> None:
    """
    Initialize the database.

    Creates missing tables when settings.db_create_all is enabled.
    Production deployments with managed schemas can turn it off.
    """
    # Import models to ensure metadata is populated before create_all()
    from app import models  # noqa: F401

    # aiosqlite does not create missing parent directories
    if engine.url.get_backend_name() == "sqlite" and engine.url.database not in (None, "", ":memory:"):
        Path(engine.url.database).parent.mkdir(parents=True, exist_ok=True)

    if not settings.db_create_all:
        return

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """
    Close the database connection.

    Should be called at application shutdown to cleanly close
    all database connections.
    """
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.

    Provides a database session for FastAPI route handlers.
    Commits when the request handler returns, rolls back when it raises.

    Yields:
        AsyncSession instance for database operations

    Example:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
