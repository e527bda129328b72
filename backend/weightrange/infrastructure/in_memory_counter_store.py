"""In-Memory Counter Store — process-local CounterStore for tests and ephemeral runs.

Invariants:
    - Starts empty (read() returns None) unless an initial count is given
    - Yields to the event loop on every call, like a real IO-backed store
"""

import asyncio


class InMemoryCounterStore:
    """CounterStore holding the count in a Python attribute."""

    name = "memory"

    def __init__(self, initial: int | None = None):
        self.count = initial
        self.reads = 0
        self.writes = 0

    async def read(self) -> int | None:
        self.reads += 1
        await asyncio.sleep(0)
        return self.count

    async def write(self, count: int) -> None:
        self.writes += 1
        await asyncio.sleep(0)
        self.count = count
