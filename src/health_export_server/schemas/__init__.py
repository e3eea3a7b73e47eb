"""Pydantic schemas for the export document."""

from health_export_server.schemas.export import (
    HealthData,
    HealthExport,
    MetricKind,
    MetricRecord,
    Workout,
)

__all__ = [
    "HealthData",
    "HealthExport",
    "MetricKind",
    "MetricRecord",
    "Workout",
]
