"""Health export ingestion endpoint."""

from typing import Annotated, Any

from litestar import Request, Response, Router, post
from litestar.params import Parameter
from litestar.status_codes import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from sqlalchemy.ext.asyncio import AsyncSession

from health_export_server.core.config import settings
from health_export_server.services.ingest import IngestService


@post("/api/health")
async def ingest_health_export(
    request: Request,
    session: AsyncSession,
    user_id_param: Annotated[str | None, Parameter(query="userId", required=False)] = None,
    user_id_header: Annotated[str | None, Parameter(header="X-User-ID", required=False)] = None,
) -> Response[dict[str, Any]]:
    """Store a Health Auto Export document.

    The body is read raw and decoded by the ingestion service, so a
    malformed document is reported as a decode error rather than rejected
    by the framework.

    Args:
        request: Incoming request (body is the export JSON)
        session: Database session (injected)
        user_id_param: ``userId`` query parameter
        user_id_header: ``X-User-ID`` header, used when the query parameter is absent

    Returns:
        201 with processed counts, 400 for an undecodable document,
        500 for any other failure

    Example:
        POST /api/health?userId=alice
        {"data": {"metrics": [...], "workouts": [...]}}
    """
    user_id = user_id_param or user_id_header or settings.default_user_id
    body = await request.body()

    result = await IngestService(session).ingest(body, user_id)

    if result.ok:
        status_code = HTTP_201_CREATED
    elif result.client_error:
        status_code = HTTP_400_BAD_REQUEST
    else:
        status_code = HTTP_500_INTERNAL_SERVER_ERROR

    return Response(content=result.to_response(), status_code=status_code)


ingest_router = Router(path="/", route_handlers=[ingest_health_export])
