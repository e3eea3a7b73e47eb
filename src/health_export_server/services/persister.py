"""Persist classified metrics and workouts.

Each metric variant is mapped to its transformer through METRIC_TRANSFORMERS,
which must cover every MetricKind. Rows are pulled lazily from the
transformer and written one at a time, so the first malformed timestamp or
failed insert stops the call with everything before it already stored.
"""

from collections.abc import Iterator
from typing import Any

import structlog

from health_export_server.schemas.export import MetricKind, MetricRecord, Workout
from health_export_server.services.classifier import ClassifiedExport
from health_export_server.services.writer import RowWriter
from health_export_server.transformers import (
    BloodGlucoseTransformer,
    BloodPressureTransformer,
    CommonMetricTransformer,
    ECGTransformer,
    HandwashingTransformer,
    HeartRateNotificationsTransformer,
    HeartRateTransformer,
    InsulinDeliveryTransformer,
    SexualActivityTransformer,
    SleepAnalysisTransformer,
    StateOfMindTransformer,
    SymptomsTransformer,
    ToothbrushingTransformer,
    WorkoutTransformer,
)
from health_export_server.transformers.base import Row

logger = structlog.get_logger()


METRIC_TRANSFORMERS: dict[MetricKind, Any] = {
    MetricKind.COMMON: CommonMetricTransformer,
    MetricKind.BLOOD_PRESSURE: BloodPressureTransformer,
    MetricKind.HEART_RATE: HeartRateTransformer,
    MetricKind.SLEEP_ANALYSIS: SleepAnalysisTransformer,
    MetricKind.BLOOD_GLUCOSE: BloodGlucoseTransformer,
    MetricKind.SEXUAL_ACTIVITY: SexualActivityTransformer,
    MetricKind.HANDWASHING: HandwashingTransformer,
    MetricKind.TOOTHBRUSHING: ToothbrushingTransformer,
    MetricKind.INSULIN_DELIVERY: InsulinDeliveryTransformer,
    MetricKind.HEART_RATE_NOTIFICATIONS: HeartRateNotificationsTransformer,
    MetricKind.SYMPTOMS: SymptomsTransformer,
    MetricKind.STATE_OF_MIND: StateOfMindTransformer,
    MetricKind.ECG: ECGTransformer,
}

_missing = set(MetricKind) - set(METRIC_TRANSFORMERS)
if _missing:
    raise RuntimeError(f"No transformer registered for {sorted(k.value for k in _missing)}")


class HealthDataPersister:
    """Map classified export content to rows and write them."""

    def __init__(self, writer: RowWriter) -> None:
        """Initialize persister.

        Args:
            writer: Row writer bound to the call's session
        """
        self.writer = writer
        self.logger = logger.bind(service="persister")

    async def _write_rows(self, rows: Iterator[Row]) -> int:
        count = 0
        for model, values in rows:
            await self.writer.write(model, values)
            count += 1
        return count

    async def store_metric(self, metric: MetricRecord, user_id: str) -> int:
        """Write all rows for one classified metric.

        Returns:
            Number of rows written
        """
        transformer = METRIC_TRANSFORMERS[metric.kind]
        count = await self._write_rows(transformer.rows(metric, user_id))
        self.logger.debug(
            "Stored metric",
            kind=metric.kind.value,
            metric_name=metric.name,
            rows=count,
        )
        return count

    async def store_workout(self, workout: Workout, user_id: str) -> int:
        """Write the workout row and its heart rate / route rows.

        Returns:
            Number of rows written
        """
        count = await self._write_rows(WorkoutTransformer.rows(workout, user_id))
        self.logger.debug("Stored workout", workout_name=workout.name, rows=count)
        return count

    async def store(self, classified: ClassifiedExport, user_id: str) -> int:
        """Write every metric, then every workout, in export order.

        Returns:
            Total rows written
        """
        total = 0
        for metric in classified.metrics:
            total += await self.store_metric(metric, user_id)
        for workout in classified.workouts:
            total += await self.store_workout(workout, user_id)
        return total
