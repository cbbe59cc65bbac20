"""
Comic Valuation — Cache Entry Model

Namespaced key/value rows backing the cache store. TTL is enforced on read
from the namespace's configured lifetime, so changing a TTL takes effect
without rewriting rows.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, TIMESTAMP, Index, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from comicvalue.models.base import Base


class CacheEntry(Base):
    """
    One cached value. Primary key is (namespace, key).

    value is a JSON document (JSONB on PostgreSQL); {"noData": true} marks a
    lookup that found nothing.
    """

    __tablename__ = "cache_entries"
    __table_args__ = (
        Index("ix_cache_entries_namespace_written_at", "namespace", "written_at"),
    )

    namespace: Mapped[str] = mapped_column(
        String, primary_key=True, comment="Cache namespace: aiAnalyze, ebayPrice, comicMetadata, cert"
    )
    key: Mapped[str] = mapped_column(
        String, primary_key=True, comment="Fingerprint or content hash"
    )
    value: Mapped[Any] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, comment="JSON payload"
    )
    written_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Last write time; compared against the namespace TTL on read",
    )

    def __repr__(self) -> str:
        return (
            f"<CacheEntry namespace={self.namespace!r} key={self.key!r} "
            f"written_at={self.written_at}>"
        )
