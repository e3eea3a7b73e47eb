"""Shared pieces for export -> database transformers.

Every transformer exposes ``rows(metric, user_id)``: a lazy generator of
``(model, values)`` pairs. Timestamps are parsed as each row is produced,
so a malformed value only surfaces when that row is reached and rows
yielded before it can already have been written.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import date, datetime
from typing import Any, ClassVar

from health_export_server.models.base import Base

# Recorded on rows whose export shape carries no source of its own
INGESTION_SOURCE = "Health Auto Export"

EXPORT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# strptime alone also takes "+00:00", "Z" and unpadded fields
_EXPORT_TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}", re.ASCII
)

Row = tuple[type[Base], dict[str, Any]]


class TimestampParseError(ValueError):
    """A timestamp or date string did not match the export format."""

    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid timestamp {value!r}: expected format {expected!r}")


def parse_export_timestamp(value: str) -> datetime:
    """Parse ``2024-01-01 08:00:00 +0000`` into an aware datetime.

    Raises:
        TimestampParseError: If the value is not in the export format
    """
    if not isinstance(value, str) or not _EXPORT_TIMESTAMP_PATTERN.fullmatch(value):
        raise TimestampParseError(value, EXPORT_TIMESTAMP_FORMAT)

    try:
        return datetime.strptime(value, EXPORT_TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as e:
        raise TimestampParseError(value, EXPORT_TIMESTAMP_FORMAT) from e


def parse_export_date(value: str) -> date:
    """Parse the calendar date in the first 10 characters of ``value``.

    Sleep entries carry either ``2024-01-01`` or a full export timestamp;
    both reduce to the same date.

    Raises:
        TimestampParseError: If the prefix is not an ISO date
    """
    try:
        return date.fromisoformat(value[:10])
    except (TypeError, ValueError) as e:
        raise TimestampParseError(value, "%Y-%m-%d") from e


class PerSampleTransformer(ABC):
    """One database row per metric sample, no linking keys."""

    model: ClassVar[type[Base]]

    @staticmethod
    @abstractmethod
    def transform(sample: Any, user_id: str) -> dict[str, Any]:
        """Convert one sample to a database-ready dict."""

    @classmethod
    def rows(cls, metric: Any, user_id: str) -> Iterator[Row]:
        """Yield one ``(model, values)`` pair per sample, in export order."""
        for sample in metric.data:
            yield cls.model, cls.transform(sample, user_id)
