"""
Social API — Database Handle & Session Management
===================================================

What:  Async SQLAlchemy engine, session factory, and the FastAPI session dependency.
How:   A `Database` object owns one engine and its session factory. The app
       factory creates it, the lifespan opens it (schema creation) and disposes
       it at shutdown, and `get_db_session` hands each request its own session
       that commits on success and rolls back on error.
Who:   Route handlers receive sessions via FastAPI's Depends(); stores run their
       statements through those sessions.
When:  Engine is built once per application; sessions are created per request.

Connection Pooling:
    PostgreSQL (asyncpg):  pool_size / max_overflow / pool_pre_ping from settings,
                           connections recycled every hour.
    SQLite (aiosqlite):    pool options are not passed; SQLAlchemy picks the
                           pool class suitable for the file or memory database.
"""

from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from social_api.config import Settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object used by `Database.create_schema()` and by
    Alembic's autogenerate.
    """
    pass


def _engine_options(settings: Settings) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        # Echo SQL only in DEBUG mode
        "echo": settings.log_level == "DEBUG",
    }
    if settings.is_sqlite:
        return options
    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return options


class Database:
    """
    Storage handle with an explicit lifecycle.

    Lifecycle:
        1. Constructed by create_app() (builds the engine, no connection yet)
        2. create_schema() at startup when settings.db_create_schema is on
        3. session() per request (via get_db_session)
        4. dispose() at shutdown closes every pooled connection
    """

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url, **_engine_options(settings)
        )
        # expire_on_commit=False: entities stay readable after the request commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def create_schema(self) -> None:
        """Create the account and message tables if they do not exist."""
        # Registers the models on Base.metadata
        from social_api.models import account, message  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Run SELECT 1; raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Gracefully close all connections in the pool."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the application's Database handle
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/messages")
        async def list_messages(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
