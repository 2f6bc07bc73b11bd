"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

The engine is a process-wide handle: created on first use (or explicitly by
init_engine() from the app lifespan), immutable afterwards, and released by
dispose_engine() on shutdown. Import does not trigger Settings validation.

Schema is managed by Alembic migrations (poms/infrastructure/persistence/migrations).
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from poms.core.config import get_settings
from poms.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)

# Set by init_engine(); read through the module (database.AsyncSessionLocal), not imported by value.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def init_engine() -> None:
    """Create engine and AsyncSessionLocal if not yet created."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine_kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if settings.is_postgres:
        engine_kwargs.update(
            pool_pre_ping=True,
            pool_size=settings.db_pool_size if settings.db_pool_size is not None else 20,
            max_overflow=(
                settings.db_max_overflow if settings.db_max_overflow is not None else 30
            ),
            pool_recycle=3600,
        )
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info("Database engine initialized (%s)", engine.url.get_backend_name())


async def dispose_engine() -> None:
    """Dispose the engine and reset the handle (shutdown, or between tests)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


def _session_factory() -> async_sessionmaker[AsyncSession]:
    init_engine()
    if AsyncSessionLocal is None:
        logger.error("SQL database not configured: set DATABASE_URL, then run: alembic upgrade head")
        raise SqlNotConfiguredException()
    return AsyncSessionLocal


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    """
    factory = _session_factory()
    async with factory() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, PATCH endpoints.
    """
    factory = _session_factory()
    async with factory() as session:
        async with session.begin():
            yield session
