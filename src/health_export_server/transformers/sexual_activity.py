"""Sexual activity transformer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from health_export_server.models.sexual_activity import SexualActivityEntry
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    PerSampleTransformer,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import SexualActivitySample


class SexualActivityTransformer(PerSampleTransformer):
    """Transform SexualActivitySample -> sexual_activity row.

    Export Fields -> Database Fields:
    - Unspecified -> unspecified
    - Protection Used -> protection_used
    - Protection Not Used -> protection_not_used
    """

    model = SexualActivityEntry

    @staticmethod
    def transform(sample: SexualActivitySample, user_id: str) -> dict[str, Any]:
        return {
            "user_id": user_id,
            "unspecified": sample.unspecified,
            "protection_used": sample.protection_used,
            "protection_not_used": sample.protection_not_used,
            "timestamp": parse_export_timestamp(sample.date),
            "source": INGESTION_SOURCE,
        }
