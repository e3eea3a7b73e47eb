"""Blood pressure, heart rate and blood glucose transformers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.blood_glucose import BloodGlucoseReading
from health_export_server.models.blood_pressure import BloodPressureReading
from health_export_server.models.heart_rate import HeartRateReading
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    PerSampleTransformer,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import (
        BloodGlucoseSample,
        BloodPressureSample,
        HeartRateSample,
    )


class BloodPressureTransformer(PerSampleTransformer):
    """Transform BloodPressureSample -> blood_pressure row."""

    model = BloodPressureReading

    @staticmethod
    def transform(sample: BloodPressureSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "systolic": sample.systolic,
            "diastolic": sample.diastolic,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }


class HeartRateTransformer(PerSampleTransformer):
    """Transform HeartRateSample -> heart_rate row.

    Export Fields -> Database Fields:
    - Min -> min_rate
    - Avg -> avg_rate
    - Max -> max_rate
    """

    model = HeartRateReading

    @staticmethod
    def transform(sample: HeartRateSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "min_rate": sample.min_rate,
            "avg_rate": sample.avg_rate,
            "max_rate": sample.max_rate,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }


class BloodGlucoseTransformer(PerSampleTransformer):
    """Transform BloodGlucoseSample -> blood_glucose row."""

    model = BloodGlucoseReading

    @staticmethod
    def transform(sample: BloodGlucoseSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "qty": sample.qty,
            "meal_time": sample.meal_time,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }
