"""Base database model."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base model for all database tables."""

    pass


def generate_uuid() -> str:
    """Generate a UUID for primary and linking keys."""
    return str(uuid4())


class RowIdMixin:
    """UUID primary key plus insertion time.

    Storage is append-only, so there is no updated_at.
    """

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
    )
    inserted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )


class UserScopedMixin:
    """Mixin for user-scoped parent tables.

    Child tables (notification details, ECG voltages, workout samples) are
    scoped through their parent id instead.
    """

    user_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Opaque user identifier supplied by the caller",
    )
