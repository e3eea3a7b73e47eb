"""Metric classification.

Health Auto Export sends every metric in one untyped list. Which variant a
record is has to be inferred from the fields it carries, using an ordered
list of structural predicates where the first match wins. Some variants
share field names, so the order matters:

    1. systolic and diastolic                  -> blood pressure
    2. Min and Avg and Max                     -> heart rate
    3. sleepStart and sleepEnd                 -> sleep analysis
    4. mealTime                                -> blood glucose
    5. Protection Used or Protection Not Used  -> sexual activity
    6. value and name == "Handwashing"         -> handwashing
    7. value and name == "Toothbrushing"       -> toothbrushing
    8. reason                                  -> insulin delivery
    9. voltageMeasurements                     -> ECG
   10. heartRate or heartRateVariation or threshold -> heart rate notifications
   11. valence                                 -> state of mind
   12. severity and userEntered                -> symptoms
   otherwise                                   -> common (qty + date samples)

A record that matches a predicate but does not decode under that variant is
dropped, not re-tried as a common metric. Drops are counted and logged.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import ValidationError

from health_export_server.schemas.export import (
    METRIC_MODELS,
    HealthExport,
    MetricKind,
    MetricRecord,
    Workout,
)

logger = structlog.get_logger()

FieldPredicate = Callable[[set[str], Mapping[str, Any]], bool]


class ExportDecodeError(ValueError):
    """The posted document is not a valid Health Auto Export payload."""


@dataclass
class ClassifiedExport:
    """Export with every metric resolved to a variant (or dropped).

    Attributes:
        metrics: Classified metrics in export order
        workouts: Decoded workouts in export order
        dropped_metrics: Records that could not be classified or decoded
    """

    metrics: list[MetricRecord] = field(default_factory=list)
    workouts: list[Workout] = field(default_factory=list)
    dropped_metrics: int = 0


def _has_all(*names: str) -> FieldPredicate:
    return lambda fields, record: all(n in fields for n in names)


def _has_any(*names: str) -> FieldPredicate:
    return lambda fields, record: any(n in fields for n in names)


def _named(name: str, *names: str) -> FieldPredicate:
    return lambda fields, record: record.get("name") == name and all(n in fields for n in names)


METRIC_PREDICATES: list[tuple[MetricKind, FieldPredicate]] = [
    (MetricKind.BLOOD_PRESSURE, _has_all("systolic", "diastolic")),
    (MetricKind.HEART_RATE, _has_all("Min", "Avg", "Max")),
    (MetricKind.SLEEP_ANALYSIS, _has_all("sleepStart", "sleepEnd")),
    (MetricKind.BLOOD_GLUCOSE, _has_all("mealTime")),
    (MetricKind.SEXUAL_ACTIVITY, _has_any("Protection Used", "Protection Not Used")),
    (MetricKind.HANDWASHING, _named("Handwashing", "value")),
    (MetricKind.TOOTHBRUSHING, _named("Toothbrushing", "value")),
    (MetricKind.INSULIN_DELIVERY, _has_all("reason")),
    (MetricKind.ECG, _has_all("voltageMeasurements")),
    (
        MetricKind.HEART_RATE_NOTIFICATIONS,
        _has_any("heartRate", "heartRateVariation", "threshold"),
    ),
    (MetricKind.STATE_OF_MIND, _has_all("valence")),
    (MetricKind.SYMPTOMS, _has_all("severity", "userEntered")),
]


def metric_fields(record: Mapping[str, Any]) -> set[str]:
    """Collect the field names a record carries.

    Variant fields can sit on the record itself or on its samples, so the
    field set is the record's keys plus the keys of every sample mapping in
    ``data``. A key holding an explicit null still counts as present.
    """
    fields = set(record.keys())
    samples = record.get("data")
    if isinstance(samples, list):
        for sample in samples:
            if isinstance(sample, Mapping):
                fields.update(sample.keys())
    return fields


def match_kind(record: Mapping[str, Any]) -> MetricKind:
    """Return the first variant whose predicate matches, else COMMON."""
    fields = metric_fields(record)
    for kind, predicate in METRIC_PREDICATES:
        if predicate(fields, record):
            return kind
    return MetricKind.COMMON


def classify_metric(record: Any) -> MetricRecord | None:
    """Classify and decode one raw metric record.

    Args:
        record: One entry of the export's ``metrics`` list

    Returns:
        The decoded variant, or None when the record is dropped
    """
    if not isinstance(record, Mapping):
        logger.warning(
            "Dropping metric record",
            reason="not an object",
            record_type=type(record).__name__,
        )
        return None

    kind = match_kind(record)
    try:
        # The tag comes from the classifier, never from the input
        return METRIC_MODELS[kind].model_validate({**record, "kind": kind})
    except ValidationError as e:
        logger.warning(
            "Dropping metric record",
            reason="does not decode as matched variant",
            metric_name=record.get("name"),
            matched_kind=kind.value,
            error_count=e.error_count(),
        )
        return None


def classify_export(export: HealthExport) -> ClassifiedExport:
    """Classify every metric of a decoded export, preserving order."""
    result = ClassifiedExport(workouts=list(export.data.workouts))

    for record in export.data.metrics:
        metric = classify_metric(record)
        if metric is None:
            result.dropped_metrics += 1
        else:
            result.metrics.append(metric)

    if result.dropped_metrics:
        logger.warning(
            "Metric records dropped during classification",
            dropped=result.dropped_metrics,
            kept=len(result.metrics),
        )

    return result


def decode_export(payload: bytes | str | Mapping[str, Any]) -> HealthExport:
    """Decode a raw export document.

    Args:
        payload: JSON text/bytes, or an already parsed mapping

    Raises:
        ExportDecodeError: If the payload is not valid JSON or lacks the
            ``data`` block / has malformed workouts
    """
    try:
        if isinstance(payload, (bytes, str)):
            return HealthExport.model_validate_json(payload)
        return HealthExport.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0] if e.error_count() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "invalid document")
        detail = f"{location}: {message}" if location else message
        raise ExportDecodeError(f"Invalid health export document ({detail})") from e
