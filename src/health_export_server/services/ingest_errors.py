"""Error classification for ingestion calls.

Maps whatever escaped an ingestion call to one of four categories:

    DECODE_ERROR: The document is not valid JSON / not an export. Nothing
        was written.
    TIMESTAMP_ERROR: A row carried a timestamp outside the export format.
        Rows before it are stored, rows after it were not attempted.
    STORAGE_ERROR: The database rejected a write or was unreachable. Same
        partial-write outcome as TIMESTAMP_ERROR.
    INTERNAL_ERROR: Anything else.

Nothing here retries; the caller decides whether to resubmit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError

from health_export_server.services.classifier import ExportDecodeError
from health_export_server.transformers.base import TimestampParseError

logger = structlog.get_logger()


class IngestErrorType(str, Enum):
    """Categorized ingestion failure."""

    DECODE_ERROR = "decode_error"
    TIMESTAMP_ERROR = "timestamp_error"
    STORAGE_ERROR = "storage_error"
    INTERNAL_ERROR = "internal_error"


@dataclass
class IngestError:
    """Structured ingestion error.

    Attributes:
        error_type: Categorized error type
        message: Human-readable message safe to return to the client
        details: Additional error context as dict
        original_exception: The exception that caused this error
    """

    error_type: IngestErrorType
    message: str
    details: dict[str, Any]
    original_exception: Exception | None = None

    @property
    def is_client_error(self) -> bool:
        """Whether resubmitting the same document can never succeed."""
        return self.error_type == IngestErrorType.DECODE_ERROR

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to dict for structured logging."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            **self.details,
        }


class IngestErrorHandler:
    """Classify exceptions raised while ingesting an export.

    Usage:
        handler = IngestErrorHandler()

        try:
            await persister.store(classified, user_id)
        except Exception as e:
            error = handler.classify(e, context={"user_id": user_id})
    """

    def __init__(self) -> None:
        """Initialize error handler."""
        self.logger = logger.bind(component="ingest_error_handler")

    def classify(
        self,
        exception: Exception,
        context: dict[str, Any] | None = None,
    ) -> IngestError:
        """Classify an exception into an IngestError.

        Args:
            exception: The exception to classify
            context: Additional context (user_id, rows_written, ...)

        Returns:
            IngestError with category and client-facing message
        """
        context = context or {}

        if isinstance(exception, ExportDecodeError):
            error = IngestError(
                error_type=IngestErrorType.DECODE_ERROR,
                message=str(exception),
                details=context,
                original_exception=exception,
            )
            self.logger.warning("Export decode failed", **error.to_log_dict())
            return error

        if isinstance(exception, TimestampParseError):
            error = IngestError(
                error_type=IngestErrorType.TIMESTAMP_ERROR,
                message=str(exception),
                details={"value": exception.value, **context},
                original_exception=exception,
            )
            self.logger.error("Ingestion aborted on malformed timestamp", **error.to_log_dict())
            return error

        if isinstance(exception, SQLAlchemyError):
            error = IngestError(
                error_type=IngestErrorType.STORAGE_ERROR,
                message=f"Database write failed: {type(exception).__name__}",
                details={"exception_type": type(exception).__name__, **context},
                original_exception=exception,
            )
            self.logger.error(
                "Ingestion aborted on database error",
                error=str(exception),
                **error.to_log_dict(),
            )
            return error

        error = IngestError(
            error_type=IngestErrorType.INTERNAL_ERROR,
            message=f"Unexpected error: {exception}" if str(exception) else "Unexpected error",
            details={"exception_type": type(exception).__name__, **context},
            original_exception=exception,
        )
        self.logger.exception("Unexpected ingestion error", **error.to_log_dict())
        return error
