"""State of mind data model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class StateOfMindEntry(Base, RowIdMixin, UserScopedMixin):
    """Momentary emotion or daily mood log.

    Labels and associations keep their exported order. Metadata has no fixed
    schema and is stored as JSON text.
    """

    __tablename__ = "state_of_mind"
    __table_args__ = (Index("ix_state_of_mind_user_start", "user_id", "start_time"),)

    record_id: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="Identifier assigned by HealthKit"
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    labels: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    associations: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    valence: Mapped[float] = mapped_column(Float, nullable=False, comment="-1.0 to 1.0")
    valence_classification: Mapped[int] = mapped_column(Integer, nullable=False)
    metadata_json: Mapped[str] = mapped_column(Text, nullable=False)
