"""Liveness endpoints."""

from litestar import MediaType, Router, get
from litestar.status_codes import HTTP_200_OK

from health_export_server import __version__


@get("/", media_type=MediaType.TEXT, sync_to_thread=False, include_in_schema=False)
def root() -> str:
    """Plain-text banner, kept for clients that probe the server root."""
    return "Health Auto Export Server is running!"


@get("/health", status_code=HTTP_200_OK, sync_to_thread=False)
def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status and version information
    """
    return {
        "status": "ok",
        "version": __version__,
    }


health_router = Router(path="/", route_handlers=[root, health_check])
