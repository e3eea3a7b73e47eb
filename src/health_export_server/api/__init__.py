"""API routes."""

from health_export_server.api.health import health_router
from health_export_server.api.ingest import ingest_router

# - health_router: / and /health - liveness, no database access
# - ingest_router: /api/health - export ingestion
api_routers = [health_router, ingest_router]

__all__ = ["api_routers"]
