"""Health export ingestion service."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from health_export_server.services.classifier import (
    ClassifiedExport,
    classify_export,
    decode_export,
)
from health_export_server.services.ingest_errors import IngestErrorHandler, IngestErrorType
from health_export_server.services.persister import HealthDataPersister
from health_export_server.services.writer import RowWriter

logger = structlog.get_logger()


@dataclass
class IngestResult:
    """Outcome of one ingestion call.

    Counts are filled in as far as the call got, so a failed result still
    tells how many rows were stored before the failure. ``client_error`` is
    set when resubmitting the same document can never succeed.
    """

    metrics_processed: int = 0
    workouts_processed: int = 0
    metrics_dropped: int = 0
    rows_written: dict[str, int] = field(default_factory=dict)
    error_type: IngestErrorType | None = None
    message: str | None = None
    client_error: bool = False

    @property
    def ok(self) -> bool:
        return self.error_type is None

    @property
    def status(self) -> str:
        return "success" if self.ok else "error"

    @property
    def total_rows(self) -> int:
        return sum(self.rows_written.values())

    def to_response(self) -> dict[str, Any]:
        """Response body for the HTTP layer."""
        if not self.ok:
            return {"status": self.status, "message": self.message}
        return {
            "status": self.status,
            "metricsProcessed": self.metrics_processed,
            "workoutsProcessed": self.workouts_processed,
            "metricsDropped": self.metrics_dropped,
        }


class IngestService:
    """Decode, classify and persist one Health Auto Export document.

    One instance per ingestion call: the session is the call's single
    connection and is not shared with other calls.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize ingestion service.

        Args:
            session: Call-scoped database session
        """
        self.session = session
        self.error_handler = IngestErrorHandler()
        self.logger = logger.bind(service="ingest")

    async def ingest(
        self,
        payload: bytes | str | Mapping[str, Any],
        user_id: str,
    ) -> IngestResult:
        """Ingest one export document for ``user_id``.

        Never raises: every failure is classified and returned on the result.

        Args:
            payload: Raw JSON body or an already parsed mapping
            user_id: Opaque user identifier recorded on every parent row

        Returns:
            IngestResult with counts and, on failure, the error category
        """
        result = IngestResult()
        writer = RowWriter(self.session)

        try:
            classified = self._classify(payload, result)

            self.logger.info(
                "Received health data export",
                user_id=user_id,
                metrics=len(classified.metrics),
                workouts=len(classified.workouts),
                dropped=classified.dropped_metrics,
            )

            await HealthDataPersister(writer).store(classified, user_id)
        except Exception as e:
            error = self.error_handler.classify(
                e,
                context={"user_id": user_id, "rows_written": writer.total_rows},
            )
            result.error_type = error.error_type
            result.message = error.message
            result.client_error = error.is_client_error
        finally:
            result.rows_written = dict(writer.rows_written)

        if result.ok:
            self.logger.info(
                "Health data stored",
                user_id=user_id,
                rows=result.total_rows,
                tables=result.rows_written,
            )
        return result

    @staticmethod
    def _classify(
        payload: bytes | str | Mapping[str, Any], result: IngestResult
    ) -> ClassifiedExport:
        classified = classify_export(decode_export(payload))
        result.metrics_processed = len(classified.metrics)
        result.workouts_processed = len(classified.workouts)
        result.metrics_dropped = classified.dropped_metrics
        return classified
