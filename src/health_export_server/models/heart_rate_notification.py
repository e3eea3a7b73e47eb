"""Heart rate notification data models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class HeartRateNotificationEvent(Base, RowIdMixin, UserScopedMixin):
    """High, low or irregular heart rate notification raised by the watch.

    The primary key is generated at ingestion time and links the
    notification to its detail rows.
    """

    __tablename__ = "heart_rate_notifications"
    __table_args__ = (Index("ix_heart_rate_notifications_user_start", "user_id", "start_time"),)

    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    threshold: Mapped[float | None] = mapped_column(
        Float, comment="Only set for high and low heart rate notifications"
    )
    source: Mapped[str] = mapped_column(String(255), nullable=False)


class HeartRateNotificationDetail(Base, RowIdMixin):
    """Heart rate or heart rate variation sample behind a notification.

    HR and HRV samples share this table: exactly one of ``hr`` / ``hrv`` is
    set per row.
    """

    __tablename__ = "heart_rate_notification_details"
    __table_args__ = (
        Index("ix_heart_rate_notification_details_parent_start", "notification_id", "start_time"),
    )

    notification_id: Mapped[str] = mapped_column(String(36), nullable=False)
    hr: Mapped[float | None] = mapped_column(Float, comment="bpm")
    hrv: Mapped[float | None] = mapped_column(Float, comment="ms")
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False, comment="Interval in seconds")
