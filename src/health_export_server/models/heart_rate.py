"""Heart rate data model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class HeartRateReading(Base, RowIdMixin, UserScopedMixin):
    """Min/avg/max heart rate over one aggregation bucket."""

    __tablename__ = "heart_rate"
    __table_args__ = (Index("ix_heart_rate_user_time", "user_id", "timestamp"),)

    min_rate: Mapped[float] = mapped_column(Float, nullable=False)
    avg_rate: Mapped[float] = mapped_column(Float, nullable=False)
    max_rate: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
