"""Health export schema

Creates one parent table per metric variant and for workouts, plus the child
tables keyed by a parent's generated id:
- heart_rate_notification_details (heart_rate_notifications.id)
- ecg_voltage_measurements (ecg.id)
- workout_heart_rate, workout_route (workouts.id)

Parent tables are indexed on (user_id, primary timestamp), child tables on
(parent id, timestamp). Parent/child links are not enforced with foreign keys.

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _row_id() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("inserted_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _user_id() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Text(),
        nullable=False,
        comment="Opaque user identifier supplied by the caller",
    )


def _timestamp(name: str = "timestamp") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False)


def _source() -> sa.Column:
    return sa.Column("source", sa.String(255), nullable=False)


def _float(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.Float(), nullable=nullable)


def _create_quantity_table(table: str, *columns: sa.Column) -> None:
    """Parent table of the ``<values>, timestamp, source`` shape."""
    op.create_table(table, *_row_id(), _user_id(), *columns, _timestamp(), _source())
    op.create_index(f"ix_{table}_user_time", table, ["user_id", "timestamp"])


def upgrade() -> None:
    """Create the health export tables."""
    op.create_table(
        "common_metrics",
        *_row_id(),
        _user_id(),
        sa.Column("metric_name", sa.String(255), nullable=False),
        sa.Column("units", sa.String(50), nullable=True),
        _float("qty"),
        _timestamp(),
        _source(),
        comment="Quantity samples for metrics without a dedicated table",
    )
    op.create_index(
        "ix_common_metrics_user_name_time",
        "common_metrics",
        ["user_id", "metric_name", "timestamp"],
    )

    _create_quantity_table("blood_pressure", _float("systolic"), _float("diastolic"))
    _create_quantity_table(
        "heart_rate", _float("min_rate"), _float("avg_rate"), _float("max_rate")
    )
    _create_quantity_table(
        "blood_glucose", _float("qty"), sa.Column("meal_time", sa.String(50), nullable=False)
    )
    _create_quantity_table(
        "sexual_activity",
        _float("unspecified", nullable=True),
        _float("protection_used", nullable=True),
        _float("protection_not_used", nullable=True),
    )
    _create_quantity_table(
        "handwashing", _float("qty"), sa.Column("value", sa.String(50), nullable=False)
    )
    _create_quantity_table(
        "toothbrushing", _float("qty"), sa.Column("value", sa.String(50), nullable=False)
    )
    _create_quantity_table(
        "insulin_delivery", _float("qty"), sa.Column("reason", sa.String(50), nullable=False)
    )

    op.create_table(
        "sleep_analysis",
        *_row_id(),
        _user_id(),
        sa.Column("date", sa.Date(), nullable=False),
        _float("asleep"),
        _timestamp("sleep_start"),
        _timestamp("sleep_end"),
        sa.Column("sleep_source", sa.String(255), nullable=False),
        _float("in_bed"),
        _timestamp("in_bed_start"),
        _timestamp("in_bed_end"),
        sa.Column("in_bed_source", sa.String(255), nullable=False),
        comment="Nightly sleep and in-bed windows",
    )
    op.create_index("ix_sleep_analysis_user_date", "sleep_analysis", ["user_id", "date"])

    # Heart rate notifications
    op.create_table(
        "heart_rate_notifications",
        *_row_id(),
        _user_id(),
        _timestamp("start_time"),
        _timestamp("end_time"),
        _float("threshold", nullable=True),
        _source(),
    )
    op.create_index(
        "ix_heart_rate_notifications_user_start",
        "heart_rate_notifications",
        ["user_id", "start_time"],
    )
    op.create_table(
        "heart_rate_notification_details",
        *_row_id(),
        sa.Column("notification_id", sa.String(36), nullable=False),
        _float("hr", nullable=True),
        _float("hrv", nullable=True),
        _timestamp("start_time"),
        _timestamp("end_time"),
        _float("duration"),
    )
    op.create_index(
        "ix_heart_rate_notification_details_parent_start",
        "heart_rate_notification_details",
        ["notification_id", "start_time"],
    )

    op.create_table(
        "symptoms",
        *_row_id(),
        _user_id(),
        sa.Column("symptom_name", sa.String(255), nullable=False),
        sa.Column("severity", sa.String(50), nullable=False),
        _timestamp("start_time"),
        _timestamp("end_time"),
        sa.Column("user_entered", sa.Integer(), nullable=False),
        _source(),
    )
    op.create_index(
        "ix_symptoms_user_name_start", "symptoms", ["user_id", "symptom_name", "start_time"]
    )

    op.create_table(
        "state_of_mind",
        *_row_id(),
        _user_id(),
        sa.Column("record_id", sa.String(255), nullable=False),
        _timestamp("start_time"),
        _timestamp("end_time"),
        sa.Column("kind", sa.String(50), nullable=False),
        sa.Column("labels", sa.JSON(), nullable=False),
        sa.Column("associations", sa.JSON(), nullable=False),
        _float("valence"),
        sa.Column("valence_classification", sa.Integer(), nullable=False),
        sa.Column("metadata_json", sa.Text(), nullable=False),
    )
    op.create_index("ix_state_of_mind_user_start", "state_of_mind", ["user_id", "start_time"])

    # ECG
    op.create_table(
        "ecg",
        *_row_id(),
        _user_id(),
        _timestamp("start_time"),
        _timestamp("end_time"),
        sa.Column("classification", sa.String(100), nullable=False),
        sa.Column("severity", sa.String(100), nullable=False),
        _float("average_heart_rate"),
        sa.Column("number_of_voltage_measurements", sa.Integer(), nullable=False),
        _float("sampling_frequency"),
        _source(),
    )
    op.create_index("ix_ecg_user_start", "ecg", ["user_id", "start_time"])
    op.create_table(
        "ecg_voltage_measurements",
        *_row_id(),
        sa.Column("ecg_id", sa.String(36), nullable=False),
        _timestamp(),
        _float("voltage"),
        sa.Column("units", sa.String(20), nullable=False),
    )
    op.create_index(
        "ix_ecg_voltage_measurements_parent_time",
        "ecg_voltage_measurements",
        ["ecg_id", "timestamp"],
    )

    # Workouts
    op.create_table(
        "workouts",
        *_row_id(),
        _user_id(),
        sa.Column("name", sa.String(255), nullable=False),
        _timestamp("start_time"),
        _timestamp("end_time"),
        _float("total_energy", nullable=True),
        sa.Column("total_energy_unit", sa.String(20), nullable=True),
        _float("active_energy", nullable=True),
        sa.Column("active_energy_unit", sa.String(20), nullable=True),
        _float("max_heart_rate", nullable=True),
        _float("avg_heart_rate", nullable=True),
        _float("step_count", nullable=True),
        _float("step_cadence", nullable=True),
        _float("total_swimming_stroke_count", nullable=True),
        _float("swim_cadence", nullable=True),
        _float("distance", nullable=True),
        sa.Column("distance_unit", sa.String(20), nullable=True),
        _float("speed", nullable=True),
        sa.Column("speed_unit", sa.String(20), nullable=True),
        _float("flights_climbed", nullable=True),
        _float("intensity", nullable=True),
        _float("temperature", nullable=True),
        sa.Column("temperature_unit", sa.String(20), nullable=True),
        _float("humidity", nullable=True),
        _float("elevation_ascent", nullable=True),
        _float("elevation_descent", nullable=True),
        sa.Column("elevation_unit", sa.String(20), nullable=True),
        _source(),
        comment="Workout summaries with optional metrics",
    )
    op.create_index("ix_workouts_user_start", "workouts", ["user_id", "start_time"])
    op.create_table(
        "workout_heart_rate",
        *_row_id(),
        sa.Column("workout_id", sa.String(36), nullable=False),
        _timestamp(),
        _float("qty"),
        sa.Column("is_recovery", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_workout_heart_rate_parent_time", "workout_heart_rate", ["workout_id", "timestamp"]
    )
    op.create_table(
        "workout_route",
        *_row_id(),
        sa.Column("workout_id", sa.String(36), nullable=False),
        _timestamp(),
        _float("latitude"),
        _float("longitude"),
        _float("altitude"),
    )
    op.create_index("ix_workout_route_parent_time", "workout_route", ["workout_id", "timestamp"])


def downgrade() -> None:
    """Drop the health export tables."""
    for table in (
        "workout_route",
        "workout_heart_rate",
        "workouts",
        "ecg_voltage_measurements",
        "ecg",
        "state_of_mind",
        "symptoms",
        "heart_rate_notification_details",
        "heart_rate_notifications",
        "sleep_analysis",
        "insulin_delivery",
        "toothbrushing",
        "handwashing",
        "sexual_activity",
        "blood_glucose",
        "heart_rate",
        "blood_pressure",
        "common_metrics",
    ):
        op.drop_table(table)
