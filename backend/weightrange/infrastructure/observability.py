"""Structured Logging — one JSON object per line, or plain text for local runs.

Invariants:
    - Every JSON line has timestamp, level, logger and message
    - Counter context (error_code, path, store, count, policy) is copied from
      `extra=` when present; zero counts are kept
    - setup_logging is idempotent: calling it again replaces, not duplicates,
      the application handler

Design Decisions:
    - Driver loggers (aiosqlite, asyncpg) pinned to WARNING: per-query debug
      noise would drown the counter events
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("error_code", "path", "store", "count", "policy")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_QUIET_LOGGERS = ("aiosqlite", "asyncpg", "sqlalchemy.engine")
_HANDLER_NAME = "weightrange"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
