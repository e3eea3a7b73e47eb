"""Handwashing and toothbrushing data models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class HandwashingEvent(Base, RowIdMixin, UserScopedMixin):
    """Handwashing event with duration and completion status."""

    __tablename__ = "handwashing"
    __table_args__ = (Index("ix_handwashing_user_time", "user_id", "timestamp"),)

    qty: Mapped[float] = mapped_column(Float, nullable=False)
    value: Mapped[str] = mapped_column(String(50), nullable=False, comment="Complete or Incomplete")
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)


class ToothbrushingEvent(Base, RowIdMixin, UserScopedMixin):
    """Toothbrushing event with duration and completion status."""

    __tablename__ = "toothbrushing"
    __table_args__ = (Index("ix_toothbrushing_user_time", "user_id", "timestamp"),)

    qty: Mapped[float] = mapped_column(Float, nullable=False)
    value: Mapped[str] = mapped_column(String(50), nullable=False, comment="Complete or Incomplete")
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
