"""Workout data models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class WorkoutSession(Base, RowIdMixin, UserScopedMixin):
    """Workout summary.

    Every metric column is nullable: a value the export did not include is
    NULL, never zero. Where the export carries a unit for a value, the unit
    column is set if and only if the value is.
    """

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_user_start", "user_id", "start_time"),
        {"comment": "Workout summaries with optional metrics"},
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Energy
    total_energy: Mapped[float | None] = mapped_column(Float)
    total_energy_unit: Mapped[str | None] = mapped_column(String(20))
    active_energy: Mapped[float | None] = mapped_column(Float)
    active_energy_unit: Mapped[str | None] = mapped_column(String(20))

    # Heart rate (bpm)
    max_heart_rate: Mapped[float | None] = mapped_column(Float)
    avg_heart_rate: Mapped[float | None] = mapped_column(Float)

    # Steps and strokes
    step_count: Mapped[float | None] = mapped_column(Float)
    step_cadence: Mapped[float | None] = mapped_column(Float)
    total_swimming_stroke_count: Mapped[float | None] = mapped_column(Float)
    swim_cadence: Mapped[float | None] = mapped_column(Float)

    # Distance and pace
    distance: Mapped[float | None] = mapped_column(Float)
    distance_unit: Mapped[str | None] = mapped_column(String(20))
    speed: Mapped[float | None] = mapped_column(Float)
    speed_unit: Mapped[str | None] = mapped_column(String(20))

    flights_climbed: Mapped[float | None] = mapped_column(Float)
    intensity: Mapped[float | None] = mapped_column(Float, comment="MET")

    # Environment
    temperature: Mapped[float | None] = mapped_column(Float)
    temperature_unit: Mapped[str | None] = mapped_column(String(20))
    humidity: Mapped[float | None] = mapped_column(Float, comment="%")

    # Elevation
    elevation_ascent: Mapped[float | None] = mapped_column(Float)
    elevation_descent: Mapped[float | None] = mapped_column(Float)
    elevation_unit: Mapped[str | None] = mapped_column(String(20))

    source: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<WorkoutSession(user_id={self.user_id}, name={self.name}, "
            f"start={self.start_time}, end={self.end_time})>"
        )


class WorkoutHeartRateSample(Base, RowIdMixin):
    """Heart rate during a workout, or during recovery after it."""

    __tablename__ = "workout_heart_rate"
    __table_args__ = (Index("ix_workout_heart_rate_parent_time", "workout_id", "timestamp"),)

    workout_id: Mapped[str] = mapped_column(String(36), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    qty: Mapped[float] = mapped_column(Float, nullable=False)
    is_recovery: Mapped[int] = mapped_column(Integer, nullable=False, comment="1 for recovery")


class WorkoutRoutePoint(Base, RowIdMixin):
    """GPS point along a workout route."""

    __tablename__ = "workout_route"
    __table_args__ = (Index("ix_workout_route_parent_time", "workout_id", "timestamp"),)

    workout_id: Mapped[str] = mapped_column(String(36), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    altitude: Mapped[float] = mapped_column(Float, nullable=False, comment="meters")
