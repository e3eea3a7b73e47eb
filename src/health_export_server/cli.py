"""CLI entry point for health-export-server."""

import asyncio
import json
from pathlib import Path

import typer
import uvicorn

from health_export_server import __version__
from health_export_server.core.config import settings
from health_export_server.core.database import (
    close_database,
    create_engine,
    create_session_maker,
    get_session,
)
from health_export_server.services.ingest import IngestResult, IngestService

app = typer.Typer(
    name="health-export-server",
    help="Ingestion server for Health Auto Export documents",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (overrides config)"),
    port: int = typer.Option(None, help="Port to bind to (overrides config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server.

    Example:
        health-export-server serve
        health-export-server serve --host 0.0.0.0 --port 8080 --reload
    """
    uvicorn.run(
        "health_export_server.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _ingest_file(path: Path, user_id: str, database_url: str | None) -> IngestResult:
    engine = create_engine(database_url)
    try:
        async with get_session(create_session_maker(engine)) as session:
            return await IngestService(session).ingest(path.read_bytes(), user_id)
    finally:
        await close_database(engine)


@app.command()
def ingest(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Export JSON file"),
    user_id: str = typer.Option(None, "--user-id", help="User ID (defaults to config)"),
    database_url: str = typer.Option(None, help="Database URL (overrides config)"),
) -> None:
    """Ingest an export file from disk, bypassing the HTTP server.

    Example:
        health-export-server ingest HealthAutoExport-2024-01-01.json --user-id alice
    """
    result = asyncio.run(_ingest_file(path, user_id or settings.default_user_id, database_url))

    typer.echo(json.dumps({**result.to_response(), "rowsWritten": result.rows_written}, indent=2))
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"health-export-server v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
