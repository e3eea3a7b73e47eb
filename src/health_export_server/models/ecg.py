"""ECG (Electrocardiogram) database models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from health_export_server.models.base import Base, RowIdMixin, UserScopedMixin


class ECGReading(Base, RowIdMixin, UserScopedMixin):
    """ECG recording summary.

    Waveform samples live in ``ecg_voltage_measurements``, linked through
    this row's generated id.
    """

    __tablename__ = "ecg"
    __table_args__ = (Index("ix_ecg_user_start", "user_id", "start_time"),)

    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    classification: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="Sinus Rhythm, Atrial Fibrillation, ..."
    )
    severity: Mapped[str] = mapped_column(String(100), nullable=False)
    average_heart_rate: Mapped[float] = mapped_column(Float, nullable=False)
    number_of_voltage_measurements: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Count reported by the device"
    )
    sampling_frequency: Mapped[float] = mapped_column(Float, nullable=False, comment="Hz")
    source: Mapped[str] = mapped_column(String(255), nullable=False)


class ECGVoltageSample(Base, RowIdMixin):
    """One waveform sample of an ECG recording."""

    __tablename__ = "ecg_voltage_measurements"
    __table_args__ = (Index("ix_ecg_voltage_measurements_parent_time", "ecg_id", "timestamp"),)

    ecg_id: Mapped[str] = mapped_column(String(36), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    voltage: Mapped[float] = mapped_column(Float, nullable=False)
    units: Mapped[str] = mapped_column(String(20), nullable=False)
