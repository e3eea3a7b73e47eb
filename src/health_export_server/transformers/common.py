"""Common metric transformer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from health_export_server.models.common_metric import CommonMetricReading
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    PerSampleTransformer,
    Row,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import CommonMetric, CommonSample


class CommonMetricTransformer(PerSampleTransformer):
    """Transform CommonMetric samples -> common_metrics rows.

    Unlike the dedicated variants, the metric's own name and units are
    repeated on every row so one table can hold any number of signals.
    """

    model = CommonMetricReading

    @staticmethod
    def transform(
        sample: CommonSample,
        user_id: str,
        metric_name: str = "",
        units: str | None = None,
    ) -> dict[str, Any]:
        """Convert one quantity sample to a database-ready dict."""
        return {
            "user_id": user_id,
            "metric_name": metric_name,
            "units": units,
            "qty": sample.qty,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }

    @classmethod
    def rows(cls, metric: CommonMetric, user_id: str) -> Iterator[Row]:
        for sample in metric.data:
            yield cls.model, cls.transform(sample, user_id, metric.name, metric.units)
