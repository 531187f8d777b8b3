"""
Notes Backend - Database Engine Management
==========================================

What:  Async SQLAlchemy engine construction, declarative base, and schema helper.
How:   `build_engine()` turns a Settings object into an AsyncEngine with a
       connection pool. Data-access code borrows a connection per operation
       with `async with engine.begin()`, which commits on success, rolls back
       on error, and always returns the connection to the pool.
Who:   Used by the application factory, NoteService, and the health check.

Connection Pooling:
    pool_size / max_overflow:  Persistent and burst connections
    pool_pre_ping:             Validates connections before use
    pool_recycle=3600:         Recycles connections every hour

    SQLite URLs (used by the test suite) keep the dialect's default pool.
"""

import logging
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from notesapi.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register their tables on `Base.metadata`, which `create_schema`
    uses to emit CREATE TABLE statements.
    """
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by `settings`.

    Args:
        settings: Application settings (database URL, pool sizing, log level)

    Returns:
        AsyncEngine; no connection is opened until first use.
    """
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode only
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **options)


async def create_schema(engine: AsyncEngine) -> None:
    """
    Create all tables registered on `Base.metadata` if they do not exist.

    Not a migration tool: existing tables are left untouched.
    """
    # Model module must be imported so the table is registered
    from notesapi.models.note import Note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured (%s)", ", ".join(Base.metadata.tables))


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
