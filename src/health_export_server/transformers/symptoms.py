"""Symptoms transformer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.symptom import SymptomEntry
from health_export_server.transformers.base import PerSampleTransformer, parse_export_timestamp

if TYPE_CHECKING:
    from health_export_server.schemas.export import SymptomSample


class SymptomsTransformer(PerSampleTransformer):
    """Transform SymptomSample -> symptoms row.

    Export Fields -> Database Fields:
    - name -> symptom_name
    - userEntered -> user_entered (bool -> 0/1)
    - source -> source (symptoms carry their own)
    """

    model = SymptomEntry

    @staticmethod
    def transform(sample: SymptomSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "symptom_name": sample.name,
            "severity": sample.severity,
            "start_time": parse_export_timestamp(sample.start),
            "end_time": parse_export_timestamp(sample.end),
            "user_entered": 1 if sample.user_entered else 0,
            "source": sample.source,
        }
