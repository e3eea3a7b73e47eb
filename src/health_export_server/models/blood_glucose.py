"""Blood glucose data model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class BloodGlucoseReading(Base, RowIdMixin, UserScopedMixin):
    """Blood glucose sample tagged with its relation to a meal."""

    __tablename__ = "blood_glucose"
    __table_args__ = (Index("ix_blood_glucose_user_time", "user_id", "timestamp"),)

    qty: Mapped[float] = mapped_column(Float, nullable=False)
    meal_time: Mapped[str] = mapped_column(
        String(50), nullable=False, comment="Before Meal, After Meal or Unspecified"
    )
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
