"""Row-at-a-time database writer."""

from collections import Counter
from typing import Any

import structlog
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from health_export_server.models.base import Base

logger = structlog.get_logger()


class RowWriter:
    """Insert rows one statement at a time over a single session.

    Each row is committed as soon as it is inserted. There is no transaction
    spanning an ingestion call: when a later row fails, rows written before
    it stay persisted and the rows after it are never attempted.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize writer.

        Args:
            session: Call-scoped database session
        """
        self.session = session
        self.rows_written: Counter[str] = Counter()
        self.logger = logger.bind(component="row_writer")

    async def write(self, model: type[Base], values: dict[str, Any]) -> None:
        """Insert and commit one row.

        Raises:
            SQLAlchemyError: On any database failure. The failed statement is
                rolled back first; if the rollback fails too, the original
                error is still the one raised
        """
        try:
            await self.session.execute(insert(model).values(**values))
            await self.session.commit()
        except Exception:
            try:
                await self.session.rollback()
            except Exception:
                # The write error is the one callers classify
                self.logger.exception(
                    "Rollback failed after write error",
                    table=model.__tablename__,
                )
            raise

        self.rows_written[model.__tablename__] += 1

    @property
    def total_rows(self) -> int:
        """Total rows written so far across all tables."""
        return sum(self.rows_written.values())
