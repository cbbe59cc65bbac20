"""Cache store — cache_entries

Revision ID: 001_cache_entries
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers
revision: str = "001_cache_entries"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cache_entries",
        sa.Column(
            "namespace",
            sa.String(),
            nullable=False,
            comment="Cache namespace: aiAnalyze, ebayPrice, comicMetadata, cert",
        ),
        sa.Column("key", sa.String(), nullable=False, comment="Fingerprint or content hash"),
        sa.Column(
            "value",
            sa.JSON().with_variant(JSONB(), "postgresql"),
            nullable=False,
            comment="JSON payload",
        ),
        sa.Column(
            "written_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("namespace", "key"),
    )
    op.create_index("ix_cache_entries_namespace_written_at", "cache_entries", ["namespace", "written_at"])


def downgrade() -> None:
    op.drop_index("ix_cache_entries_namespace_written_at", table_name="cache_entries")
    op.drop_table("cache_entries")
