"""Sexual activity data model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class SexualActivityEntry(Base, RowIdMixin, UserScopedMixin):
    """Counts per protection category; categories not exported stay NULL."""

    __tablename__ = "sexual_activity"
    __table_args__ = (Index("ix_sexual_activity_user_time", "user_id", "timestamp"),)

    unspecified: Mapped[float | None] = mapped_column(Float)
    protection_used: Mapped[float | None] = mapped_column(Float)
    protection_not_used: Mapped[float | None] = mapped_column(Float)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
