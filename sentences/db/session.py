"""
Database Session Management
===========================

This module configures the SQLAlchemy async engine and session factory for the
local SQLite store. Uses the aiosqlite driver.

Connection Pattern:
-------------------
A caller opens one session for a unit of work (typically one edit screen or
one command) via get_db(), and hands it to the repository.

The session commits on success and rolls back on exception. Repository writes
commit on their own, so the final commit is usually a no-op.

SQLite Notes:
-------------
- Foreign keys are off by default in SQLite; they are switched on for every
  new connection so ON DELETE CASCADE on sentences works.
- ":memory:" databases live only as long as their connection, so they get a
  StaticPool (one shared connection).
"""

from typing import Any, AsyncGenerator
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sentences.config import settings
from sentences.db.base import Base


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine with SQLite-specific setup.

    In-memory URLs share a single connection, file URLs use the default pool.
    """
    options: dict[str, Any] = {"echo": echo, "future": True}
    if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
        options["poolclass"] = StaticPool

    new_engine = create_async_engine(url, **options)
    event.listen(new_engine.sync_engine, "connect", _enable_foreign_keys)
    return new_engine


def create_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit (avoid lazy loads)
        autoflush=False,  # Explicit flush/commit only
    )


# =============================================================================
# SQLAlchemy Async Engine
# =============================================================================

engine = create_engine(
    settings.database_url,
    echo=settings.debug,  # Log SQL queries in debug mode
)

# =============================================================================
# Session Factory
# =============================================================================

async_session_maker = create_session_maker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session for one unit of work.

    Usage:
        async for db in get_db():
            repository = SQLDocumentRepository(db)
            ...

    Transaction Behavior:
    - Session is created on entry
    - Commits on successful completion
    - Rolls back on any exception
    - Session is closed afterwards
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Initialize database tables.

    Creates all tables defined in the models if they don't exist.
    """
    # Register every mapper on Base.metadata before create_all.
    import sentences.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(bind: AsyncEngine | None = None) -> None:
    """
    Close all database connections.

    Disposes of the connection pool so the SQLite file is released.
    """
    await (bind or engine).dispose()
