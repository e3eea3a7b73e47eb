"""Sleep analysis data model."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class SleepAnalysisEntry(Base, RowIdMixin, UserScopedMixin):
    """One night of sleep.

    Durations are hours as exported. Sleep and in-bed windows can come from
    different sources (watch vs phone), so each keeps its own source column.
    """

    __tablename__ = "sleep_analysis"
    __table_args__ = (
        Index("ix_sleep_analysis_user_date", "user_id", "date"),
        {"comment": "Nightly sleep and in-bed windows"},
    )

    # The night's calendar date, NOT a timestamp
    date: Mapped[date] = mapped_column(Date, nullable=False)

    asleep: Mapped[float] = mapped_column(Float, nullable=False)
    sleep_start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sleep_end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sleep_source: Mapped[str] = mapped_column(String(255), nullable=False)

    in_bed: Mapped[float] = mapped_column(Float, nullable=False)
    in_bed_start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    in_bed_end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    in_bed_source: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<SleepAnalysisEntry(user_id={self.user_id}, date={self.date}, "
            f"asleep={self.asleep})>"
        )
