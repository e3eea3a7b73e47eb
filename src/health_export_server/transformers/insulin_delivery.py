"""Insulin delivery transformer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.insulin_delivery import InsulinDeliveryEvent
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    PerSampleTransformer,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import InsulinDeliverySample


class InsulinDeliveryTransformer(PerSampleTransformer):
    """Transform InsulinDeliverySample -> insulin_delivery row."""

    model = InsulinDeliveryEvent

    @staticmethod
    def transform(sample: InsulinDeliverySample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "qty": sample.qty,
            "reason": sample.reason,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }
