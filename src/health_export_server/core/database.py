"""Database engine construction and session management.

Nothing in here is a process-wide singleton: the application factory and
the CLI build their own engine and session maker and pass them down.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from health_export_server.core.config import settings

logger = structlog.get_logger()


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the database engine.

    Args:
        database_url: Override for ``settings.database_url``

    Returns:
        Async SQLAlchemy engine
    """
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        # SQLite pools don't accept sizing arguments
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        echo=False,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=300,  # Recycle connections every 5 minutes
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_database(engine: AsyncEngine) -> None:
    """Verify the database is reachable and migrations have been applied.

    Does NOT create tables - schema creation belongs to
    ``alembic upgrade head``.
    """
    async with engine.connect() as conn:
        has_migrations = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
        )

    if not has_migrations:
        logger.warning(
            "Database migrations have not been applied. "
            "Run 'alembic upgrade head' to initialize the database schema."
        )
    else:
        logger.info("Database reachable and migrated")


@asynccontextmanager
async def get_session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open one call-scoped session.

    Writers commit as they go, so this only rolls back whatever is still
    pending when an exception escapes.

    Usage:
        async with get_session(session_maker) as session:
            await IngestService(session).ingest(payload, user_id)
    """
    async with session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def close_database(engine: AsyncEngine) -> None:
    """Close database connection pool."""
    await engine.dispose()
