"""Handwashing and toothbrushing transformers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.hygiene import HandwashingEvent, ToothbrushingEvent
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    PerSampleTransformer,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import HygieneSample


def _hygiene_row(sample: HygieneSample, user_id: str) -> dict[str, Any]:
    return {
        "user_id": user_id,
        "qty": sample.qty,
        "value": sample.value,
        "timestamp": parse_export_timestamp(sample.date),
        "source": INGESTION_SOURCE,
    }


class HandwashingTransformer(PerSampleTransformer):
    """Transform handwashing HygieneSample -> handwashing row."""

    model = HandwashingEvent

    @staticmethod
    def transform(sample: HygieneSample, user_id: str) -> dict[str, Any]:
        return _hygiene_row(sample, user_id)


class ToothbrushingTransformer(PerSampleTransformer):
    """Transform toothbrushing HygieneSample -> toothbrushing row."""

    model = ToothbrushingEvent

    @staticmethod
    def transform(sample: HygieneSample, user_id: str) -> dict[str, Any]:
        return _hygiene_row(sample, user_id)
