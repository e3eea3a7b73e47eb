"""Insulin delivery data model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class InsulinDeliveryEvent(Base, RowIdMixin, UserScopedMixin):
    """Insulin dose, bolus or basal."""

    __tablename__ = "insulin_delivery"
    __table_args__ = (Index("ix_insulin_delivery_user_time", "user_id", "timestamp"),)

    qty: Mapped[float] = mapped_column(Float, nullable=False)
    reason: Mapped[str] = mapped_column(String(50), nullable=False, comment="Bolus or Basal")
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
