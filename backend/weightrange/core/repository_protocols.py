"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Counter persistence accessed only through CounterStore
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO (file or database)
"""

from typing import Protocol


class CounterStore(Protocol):
    """Durable storage for one non-negative usage count.

    read() returns None when nothing has been persisted yet and raises
    CounterReadError when a persisted value exists but cannot be read.
    write() raises CounterWriteError when the value cannot be persisted.
    """
    name: str

    async def read(self) -> int | None: ...
    async def write(self, count: int) -> None: ...
