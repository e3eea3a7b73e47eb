"""Litestar application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from advanced_alchemy.extensions.litestar import (
    AsyncSessionConfig,
    SQLAlchemyAsyncConfig,
    SQLAlchemyPlugin,
)
from litestar import Litestar
from litestar.openapi import OpenAPIConfig
from sqlalchemy.ext.asyncio import AsyncEngine

from health_export_server import __version__
from health_export_server.api import api_routers
from health_export_server.core.config import settings
from health_export_server.core.database import close_database, create_engine, init_database

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def create_app(engine: AsyncEngine | None = None) -> Litestar:
    """Create Litestar application.

    Args:
        engine: Engine to use instead of one built from settings. The app
            only disposes engines it created itself.

    Returns:
        Configured Litestar app instance
    """
    owns_engine = engine is None
    db_engine = engine if engine is not None else create_engine()

    @asynccontextmanager
    async def lifespan(app: Litestar) -> AsyncIterator[None]:
        """Verify the database on startup, release the pool on shutdown."""
        logger.info("Starting health-export-server", version=__version__)

        await init_database(db_engine)

        yield

        if owns_engine:
            await close_database(db_engine)
        logger.info("Shutdown complete")

    return Litestar(
        route_handlers=api_routers,
        lifespan=[lifespan],
        request_max_body_size=settings.max_request_body_size,
        openapi_config=OpenAPIConfig(
            title="health-export-server API",
            version=__version__,
            description="Stores Health Auto Export documents in per-signal tables",
        ),
        plugins=[
            SQLAlchemyPlugin(
                config=SQLAlchemyAsyncConfig(
                    engine_instance=db_engine,
                    session_dependency_key="session",
                    session_config=AsyncSessionConfig(expire_on_commit=False),
                ),
            ),
        ],
        debug=settings.log_level == "DEBUG",
    )
