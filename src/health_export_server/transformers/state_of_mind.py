"""State of mind transformer."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from health_export_server.models.state_of_mind import StateOfMindEntry
from health_export_server.transformers.base import PerSampleTransformer, parse_export_timestamp

if TYPE_CHECKING:
    from health_export_server.schemas.export import StateOfMindSample


class StateOfMindTransformer(PerSampleTransformer):
    """Transform StateOfMindSample -> state_of_mind row.

    Metadata stays a nested structure up to this point and is serialized to
    JSON text here; nothing upstream sees it as a string.
    """

    model = StateOfMindEntry

    @staticmethod
    def transform(sample: StateOfMindSample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "record_id": sample.id,
            "start_time": parse_export_timestamp(sample.start),
            "end_time": parse_export_timestamp(sample.end),
            "kind": sample.kind,
            "labels": list(sample.labels),
            "associations": list(sample.associations),
            "valence": sample.valence,
            "valence_classification": sample.valence_classification,
            "metadata_json": json.dumps(sample.metadata, ensure_ascii=False),
        }
