"""Sleep analysis transformer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.sleep_analysis import SleepAnalysisEntry
from health_export_server.transformers.base import (
    PerSampleTransformer,
    parse_export_date,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import SleepAnalysisSample


class SleepAnalysisTransformer(PerSampleTransformer):
    """Transform SleepAnalysisSample -> sleep_analysis row.

    ``date`` keeps only its first 10 characters and is stored as a calendar
    date, separate from the sleep and in-bed window timestamps. Sleep rows
    carry their own sources, so INGESTION_SOURCE is not used here.
    """

    model = SleepAnalysisEntry

    @staticmethod
    def transform(sample: SleepAnalysisSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "date": parse_export_date(sample.date),
            "asleep": sample.asleep,
            "sleep_start": parse_export_timestamp(sample.sleep_start),
            "sleep_end": parse_export_timestamp(sample.sleep_end),
            "sleep_source": sample.sleep_source,
            "in_bed": sample.in_bed,
            "in_bed_start": parse_export_timestamp(sample.in_bed_start),
            "in_bed_end": parse_export_timestamp(sample.in_bed_end),
            "in_bed_source": sample.in_bed_source,
        }
