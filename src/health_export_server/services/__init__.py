"""Business logic services."""

from health_export_server.services.classifier import (
    ClassifiedExport,
    ExportDecodeError,
    classify_export,
    classify_metric,
    decode_export,
)
from health_export_server.services.ingest import IngestResult, IngestService
from health_export_server.services.persister import HealthDataPersister
from health_export_server.services.writer import RowWriter

__all__ = [
    "ClassifiedExport",
    "ExportDecodeError",
    "HealthDataPersister",
    "IngestResult",
    "IngestService",
    "RowWriter",
    "classify_export",
    "classify_metric",
    "decode_export",
]
