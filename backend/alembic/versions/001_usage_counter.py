"""Usage counter table — one row per named counter.

Revision ID: 001_usage_counter
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_usage_counter"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "usage_counter",
        sa.Column("name", sa.String(50), primary_key=True),
        sa.Column("count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("count >= 0", name="ck_usage_counter_non_negative"),
    )


def downgrade() -> None:
    op.drop_table("usage_counter")
