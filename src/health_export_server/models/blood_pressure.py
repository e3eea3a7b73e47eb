"""Blood pressure data model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class BloodPressureReading(Base, RowIdMixin, UserScopedMixin):
    """Systolic/diastolic pair, in mmHg."""

    __tablename__ = "blood_pressure"
    __table_args__ = (Index("ix_blood_pressure_user_time", "user_id", "timestamp"),)

    systolic: Mapped[float] = mapped_column(Float, nullable=False)
    diastolic: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
