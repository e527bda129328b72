"""Usage Counter ORM — one row per named counter.

Invariants:
    - name is the primary key ("app" for the calculator's counter)
    - count is non-negative (CHECK constraint)
    - Row created lazily on first read; never deleted during normal operation
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from weightrange.db.base import Base


class UsageCounterRow(Base):
    """Persisted aggregate count of successful adult calculations."""
    __tablename__ = "usage_counter"
    __table_args__ = (
        CheckConstraint("count >= 0", name="ck_usage_counter_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
