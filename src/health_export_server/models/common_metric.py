"""Generic quantity + timestamp metric model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class CommonMetricReading(Base, RowIdMixin, UserScopedMixin):
    """One sample of any metric without a dedicated table (step count, weight, ...)."""

    __tablename__ = "common_metrics"
    __table_args__ = (
        Index("ix_common_metrics_user_name_time", "user_id", "metric_name", "timestamp"),
        {"comment": "Quantity samples for metrics without a dedicated table"},
    )

    metric_name: Mapped[str] = mapped_column(String(255), nullable=False)
    units: Mapped[str | None] = mapped_column(String(50))
    qty: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<CommonMetricReading(user_id={self.user_id}, metric={self.metric_name}, "
            f"qty={self.qty}, timestamp={self.timestamp})>"
        )
