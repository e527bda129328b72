"""JSON File Counter Store — persists the usage count as {"count": N} on disk.

Invariants:
    - Missing file → read() returns None (caller initializes it)
    - Missing "count" field → 0
    - Undecodable bytes, malformed JSON, negative/non-integer count, or any
      OS error other than "file not found" → CounterReadError
    - Writes are atomic: temp file in the same directory, then os.replace

Design Decisions:
    - Blocking file IO runs in a worker thread (asyncio.to_thread) so the
      event loop never stalls on disk
    - UsageRecord (pydantic) validates the persisted layout
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from weightrange.core.errors import CounterReadError, CounterWriteError, ErrorContext
from weightrange.schemas.usage import UsageRecord

logger = logging.getLogger(__name__)


class JsonFileCounterStore:
    """CounterStore backed by a single JSON file."""

    name = "json"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def read(self) -> int | None:
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CounterReadError(
                f"{self.path}: {e.strerror or e}", ErrorContext(store=self.name),
            ) from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CounterReadError(
                f"{self.path}: usage record is not valid UTF-8",
                ErrorContext(store=self.name),
            ) from e
        try:
            return UsageRecord.model_validate_json(text).count
        except ValidationError as e:
            raise CounterReadError(
                f"{self.path}: malformed usage record",
                ErrorContext(store=self.name, debug_info={"errors": e.errors()}),
            ) from e

    async def write(self, count: int) -> None:
        payload = UsageRecord(count=count).model_dump_json()
        try:
            await asyncio.to_thread(self._replace_file, payload)
        except OSError as e:
            raise CounterWriteError(
                f"{self.path}: {e.strerror or e}", ErrorContext(store=self.name),
            ) from e
        logger.debug("Usage count persisted", extra={"store": self.name, "count": count})

    def _replace_file(self, payload: str) -> None:
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
