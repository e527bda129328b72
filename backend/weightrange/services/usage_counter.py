"""Usage Counter — monotonically increasing count of successful adult calculations.

Invariants:
    - read() never raises for storage problems:
        absent store     → persist 0, return 0
        unreadable store → log, return 0 (best-effort, informational count)
    - increment_and_read() returns the value AFTER incrementing
    - increment_and_read() on an unreadable store logs and returns 0 WITHOUT
      writing, so a recoverable count is never overwritten
    - Write failures during increment are logged and propagated as CounterWriteError
    - SERIALIZED policy: every read-modify-write holds one asyncio.Lock, so N
      concurrent increments in this process yield exactly +N
    - LOSSY policy: no lock; concurrent increments may lose updates

Design Decisions:
    - Storage injected as a CounterStore: file, database or memory are
      interchangeable and the consistency policy is testable on its own
    - Singleton initialized in the lifespan, exposed as a FastAPI dependency
"""

import asyncio
import logging
from contextlib import nullcontext

from weightrange.core.domain_types import CounterPolicy
from weightrange.core.errors import CounterReadError, CounterWriteError
from weightrange.core.repository_protocols import CounterStore

logger = logging.getLogger(__name__)


class UsageCounter:
    """Read and increment a persisted usage count through a CounterStore."""

    def __init__(
        self, store: CounterStore, policy: CounterPolicy = CounterPolicy.SERIALIZED,
    ):
        self.store = store
        self.policy = policy
        self._lock = asyncio.Lock()

    def _guard(self):
        if self.policy is CounterPolicy.SERIALIZED:
            return self._lock
        return nullcontext()

    async def read(self) -> int:
        """Current count; initializes the store to 0 on first access."""
        async with self._guard():
            try:
                count = await self.store.read()
            except CounterReadError as e:
                self._log_read_failure(e)
                return 0
            if count is not None:
                return count
            try:
                await self.store.write(0)
            except CounterWriteError as e:
                logger.error(
                    f"Could not initialize usage counter: {e.message}",
                    extra={"error_code": e.code, "store": self.store.name},
                )
                return 0
            logger.info(
                "Usage counter initialized", extra={"store": self.store.name, "count": 0},
            )
            return 0

    async def increment_and_read(self) -> int:
        """Add one to the persisted count and return the new value."""
        async with self._guard():
            try:
                current = await self.store.read()
            except CounterReadError as e:
                self._log_read_failure(e)
                return 0
            new_count = (current or 0) + 1
            try:
                await self.store.write(new_count)
            except CounterWriteError as e:
                logger.error(
                    f"Usage counter increment not persisted: {e.message}",
                    extra={"error_code": e.code, "store": self.store.name},
                )
                raise
            return new_count

    async def is_readable(self) -> bool:
        """Readiness check: True unless the store raises on read."""
        try:
            await self.store.read()
        except CounterReadError:
            return False
        return True

    def _log_read_failure(self, error: CounterReadError) -> None:
        logger.error(
            f"Usage counter unreadable, reporting 0: {error.message}",
            extra={"error_code": error.code, "store": self.store.name},
        )


# Singleton (initialized on startup)
usage_counter: UsageCounter | None = None


def init_usage_counter(
    store: CounterStore, policy: CounterPolicy = CounterPolicy.SERIALIZED,
) -> UsageCounter:
    global usage_counter
    usage_counter = UsageCounter(store, policy)
    logger.info(
        "Usage counter ready", extra={"store": store.name, "policy": policy.value},
    )
    return usage_counter


def get_usage_counter() -> UsageCounter:
    """FastAPI dependency for the process-wide usage counter."""
    if not usage_counter:
        raise RuntimeError("Usage counter not initialized")
    return usage_counter
