"""Alembic migration environment configuration."""

from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection

from alembic import context

# this is the Alembic Config object
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Import settings for database URL
from health_export_server.core.config import settings  # noqa: E402

# Importing the package registers every table with Base.metadata
from health_export_server.models import Base  # noqa: E402

# Set target metadata for autogenerate support
target_metadata = Base.metadata


def get_sync_database_url() -> str:
    """Get synchronous database URL for migrations.

    Converts asyncpg URL to psycopg for sync operations.
    """
    url = settings.database_url

    # Replace async driver with sync driver for migrations
    if "+asyncpg" in url:
        url = url.replace("+asyncpg", "+psycopg")
    elif "+aiosqlite" in url:
        url = url.replace("+aiosqlite", "")

    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Emits the DDL as SQL script output without a live connection.
    """
    url = get_sync_database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with a connection."""
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against a live database."""
    connectable = create_engine(
        get_sync_database_url(),
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        do_run_migrations(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
