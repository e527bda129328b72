"""SQL Counter Store — persists the usage count as a row in the usage_counter table.

Invariants:
    - Missing row → read() returns None (caller initializes it)
    - DatabaseError on read → CounterReadError; on write → CounterWriteError
    - write() upserts via session.merge: creates the row on first write

Design Decisions:
    - One row per counter name: the table can hold more counters later
      without a migration
"""

import logging

from sqlalchemy import select

from weightrange.core.errors import (
    CounterReadError, CounterWriteError, DatabaseError, ErrorContext,
)
from weightrange.infrastructure.database import DatabaseSessionManager
from weightrange.models.usage_counter import UsageCounterRow

logger = logging.getLogger(__name__)

DEFAULT_COUNTER_NAME = "app"


class SqlCounterStore:
    """CounterStore backed by SQLAlchemy async sessions."""

    name = "database"

    def __init__(
        self, manager: DatabaseSessionManager, counter_name: str = DEFAULT_COUNTER_NAME,
    ):
        self._manager = manager
        self.counter_name = counter_name

    async def read(self) -> int | None:
        try:
            async with self._manager.session() as db:
                result = await db.execute(
                    select(UsageCounterRow.count).where(
                        UsageCounterRow.name == self.counter_name,
                    ),
                )
                count = result.scalar_one_or_none()
        except DatabaseError as e:
            raise CounterReadError(e.message, ErrorContext(store=self.name)) from e
        if count is not None and count < 0:
            raise CounterReadError(
                f"negative count {count} for '{self.counter_name}'",
                ErrorContext(store=self.name),
            )
        return count

    async def write(self, count: int) -> None:
        try:
            async with self._manager.session() as db:
                await db.merge(UsageCounterRow(name=self.counter_name, count=count))
                await db.commit()
        except DatabaseError as e:
            raise CounterWriteError(e.message, ErrorContext(store=self.name)) from e
        logger.debug("Usage count persisted", extra={"store": self.name, "count": count})
