"""Workout data transformer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from health_export_server.models.base import generate_uuid
from health_export_server.models.workout import (
    WorkoutHeartRateSample,
    WorkoutRoutePoint,
    WorkoutSession,
)
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    Row,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import HeartRatePoint, RoutePoint, Workout


def _qty(value: Any) -> float | None:
    return value.qty if value is not None else None


def _qty_with_unit(value: Any) -> tuple[float | None, str | None]:
    """Quantity and unit together, or neither."""
    if value is None:
        return None, None
    return value.qty, value.units


class WorkoutTransformer:
    """Transform Workout -> workouts row + heart rate and route rows.

    Export Fields -> Database Fields:
    - totalEnergy / activeEnergy / distance / speed / temperature
      -> <field> + <field>_unit
    - maxHeartRate / avgHeartRate / stepCount / stepCadence /
      totalSwimmingStrokeCount / swimCadence / flightsClimbed / intensity /
      humidity -> <field> (quantity only, unit is fixed)
    - elevation -> elevation_ascent + elevation_descent + elevation_unit
    - heartRateData[] -> workout_heart_rate (is_recovery=0)
    - heartRateRecovery[] -> workout_heart_rate (is_recovery=1)
    - route[] -> workout_route
    """

    @staticmethod
    def transform(workout: Workout, user_id: str, workout_id: str) -> dict[str, Any]:
        """Convert a workout to its parent row.

        Args:
            workout: Workout from the export
            user_id: User identifier for database record
            workout_id: Generated linking key shared with the child rows

        Returns:
            Dict ready for database insertion, absent values as None
        """
        total_energy, total_energy_unit = _qty_with_unit(workout.total_energy)
        active_energy, active_energy_unit = _qty_with_unit(workout.active_energy)
        distance, distance_unit = _qty_with_unit(workout.distance)
        speed, speed_unit = _qty_with_unit(workout.speed)
        temperature, temperature_unit = _qty_with_unit(workout.temperature)

        elevation = workout.elevation

        return {
            "id": workout_id,
            "user_id": user_id,
            "name": workout.name,
            "start_time": parse_export_timestamp(workout.start),
            "end_time": parse_export_timestamp(workout.end),
            "total_energy": total_energy,
            "total_energy_unit": total_energy_unit,
            "active_energy": active_energy,
            "active_energy_unit": active_energy_unit,
            "max_heart_rate": _qty(workout.max_heart_rate),
            "avg_heart_rate": _qty(workout.avg_heart_rate),
            "step_count": _qty(workout.step_count),
            "step_cadence": _qty(workout.step_cadence),
            "total_swimming_stroke_count": _qty(workout.total_swimming_stroke_count),
            "swim_cadence": _qty(workout.swim_cadence),
            "distance": distance,
            "distance_unit": distance_unit,
            "speed": speed,
            "speed_unit": speed_unit,
            "flights_climbed": _qty(workout.flights_climbed),
            "intensity": _qty(workout.intensity),
            "temperature": temperature,
            "temperature_unit": temperature_unit,
            "humidity": _qty(workout.humidity),
            "elevation_ascent": elevation.ascent if elevation else None,
            "elevation_descent": elevation.descent if elevation else None,
            "elevation_unit": elevation.units if elevation else None,
            "source": INGESTION_SOURCE,
        }

    @staticmethod
    def transform_heart_rate(
        point: HeartRatePoint, workout_id: str, is_recovery: bool
    ) -> dict[str, Any]:
        return {
            "workout_id": workout_id,
            "timestamp": parse_export_timestamp(point.date),
            "qty": point.qty,
            "is_recovery": 1 if is_recovery else 0,
        }

    @staticmethod
    def transform_route_point(point: RoutePoint, workout_id: str) -> dict[str, Any]:
        return {
            "workout_id": workout_id,
            "timestamp": parse_export_timestamp(point.timestamp),
            "latitude": point.lat,
            "longitude": point.lon,
            "altitude": point.altitude,
        }

    @classmethod
    def rows(cls, workout: Workout, user_id: str) -> Iterator[Row]:
        """Yield the workout row, then heart rate, recovery and route rows."""
        workout_id = generate_uuid()
        yield WorkoutSession, cls.transform(workout, user_id, workout_id)

        for point in workout.heart_rate_data or []:
            yield WorkoutHeartRateSample, cls.transform_heart_rate(point, workout_id, False)

        for point in workout.heart_rate_recovery or []:
            yield WorkoutHeartRateSample, cls.transform_heart_rate(point, workout_id, True)

        for point in workout.route or []:
            yield WorkoutRoutePoint, cls.transform_route_point(point, workout_id)
