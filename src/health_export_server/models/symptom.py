"""Symptom data model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class SymptomEntry(Base, RowIdMixin, UserScopedMixin):
    """Logged symptom (headache, fatigue, ...) with its severity."""

    __tablename__ = "symptoms"
    __table_args__ = (
        Index("ix_symptoms_user_name_start", "user_id", "symptom_name", "start_time"),
    )

    symptom_name: Mapped[str] = mapped_column(String(255), nullable=False)
    severity: Mapped[str] = mapped_column(String(50), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_entered: Mapped[int] = mapped_column(Integer, nullable=False, comment="1 if user entered")
    source: Mapped[str] = mapped_column(String(255), nullable=False)
