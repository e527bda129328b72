"""Error Hierarchy — typed, categorized exceptions for all service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Infrastructure errors (500-level) carry the HTTP status the API maps them to
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Invalid calculator input is NOT an error: compute_weight_range returns
      InvalidInput instead of raising

Design Decisions:
    - Single hierarchy with WeightRangeError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STORAGE = "storage"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    store: str | None = None
    debug_info: dict[str, Any] | None = None


class WeightRangeError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"store": self.context.store},
            }
        }


# ─── Counter Storage Errors (500-level) ──────────────────────────

class CounterStoreError(WeightRangeError):
    """Usage counter storage failed."""


class CounterReadError(CounterStoreError):
    """Persisted count exists but cannot be read or parsed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Usage counter read failed: {message}",
            "COUNTER_READ_FAILED", ErrorCategory.STORAGE,
            ErrorSeverity.WARNING, context, 503,
        )


class CounterWriteError(CounterStoreError):
    """New count could not be persisted."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Usage counter write failed: {message}",
            "COUNTER_WRITE_FAILED", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class DatabaseError(WeightRangeError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
