"""
Comic Valuation — Namespaced Cache Store

Key/value cache over the cache_entries table with a per-namespace TTL.

Contract:
- get() failures are misses, never errors.
- set() is best-effort; failures are logged and swallowed.
- Without a session factory the store reports unavailable: reads miss and
  writes are dropped.

Callers that must not wait on a write use set_in_background(), which
schedules the write as a task and returns immediately.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from comicvalue.config import CacheNamespace, settings
from comicvalue.models.cache_entry import CacheEntry

logger = structlog.get_logger(__name__)

# Reserved payload: "looked up, found nothing"
NO_DATA: dict[str, bool] = {"noData": True}


def is_no_data(value: Any) -> bool:
    return isinstance(value, dict) and value.get("noData") is True


def _namespace(namespace: CacheNamespace | str) -> str:
    return namespace.value if isinstance(namespace, CacheNamespace) else namespace


class CacheStore:
    """
    Namespaced cache backed by SQLAlchemy.

    Usage:
        cache = CacheStore(session_factory)
        value = await cache.get(CacheNamespace.EBAY_PRICE, fingerprint)
        cache.set_in_background(CacheNamespace.EBAY_PRICE, fingerprint, payload)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        ttl_seconds: dict[str, int] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._ttl_seconds = ttl_seconds or settings.CACHE_TTL_SECONDS
        self._pending: set[asyncio.Task[None]] = set()

    def is_available(self) -> bool:
        return self._session_factory is not None

    async def get(self, namespace: CacheNamespace | str, key: str) -> Any | None:
        """Return the cached value, or None on miss, expiry or any failure."""
        if self._session_factory is None:
            return None

        ns = _namespace(namespace)
        try:
            async with self._session_factory() as session:
                entry = await session.get(CacheEntry, (ns, key))
                if entry is None:
                    return None
                value = entry.value
                written_at = entry.written_at

            if written_at.tzinfo is None:
                written_at = written_at.replace(tzinfo=timezone.utc)
            age_seconds = (datetime.now(timezone.utc) - written_at).total_seconds()
            ttl = self._ttl_seconds.get(ns)
            if ttl is not None and age_seconds > ttl:
                logger.debug(
                    "cache_entry_expired",
                    namespace=ns,
                    key=key,
                    age_seconds=int(age_seconds),
                    source="cache",
                )
                return None
        except Exception as e:
            logger.warning(
                "cache_get_failed",
                namespace=ns,
                key=key,
                error=str(e),
                source="cache",
            )
            return None

        logger.debug("cache_hit", namespace=ns, key=key, source="cache")
        return value

    async def set(self, namespace: CacheNamespace | str, key: str, value: Any) -> None:
        """Upsert a value. Never raises."""
        if self._session_factory is None:
            return

        ns = _namespace(namespace)
        try:
            async with self._session_factory() as session:
                await session.merge(
                    CacheEntry(
                        namespace=ns,
                        key=key,
                        value=value,
                        written_at=datetime.now(timezone.utc),
                    )
                )
                await session.commit()
        except Exception as e:
            logger.warning(
                "cache_set_failed",
                namespace=ns,
                key=key,
                error=str(e),
                source="cache",
            )
            return

        logger.debug("cache_set", namespace=ns, key=key, source="cache")

    async def delete(self, namespace: CacheNamespace | str, key: str) -> None:
        """Remove a value. Never raises."""
        if self._session_factory is None:
            return

        ns = _namespace(namespace)
        try:
            async with self._session_factory() as session:
                entry = await session.get(CacheEntry, (ns, key))
                if entry is not None:
                    await session.delete(entry)
                    await session.commit()
        except Exception as e:
            logger.warning(
                "cache_delete_failed",
                namespace=ns,
                key=key,
                error=str(e),
                source="cache",
            )

    async def purge_expired(self) -> int:
        """Delete entries past their namespace TTL. Returns rows removed."""
        if self._session_factory is None:
            return 0

        now = datetime.now(timezone.utc)
        removed = 0
        try:
            async with self._session_factory() as session:
                for ns, ttl in self._ttl_seconds.items():
                    result = await session.execute(
                        delete(CacheEntry).where(
                            CacheEntry.namespace == ns,
                            CacheEntry.written_at < now - timedelta(seconds=ttl),
                        )
                    )
                    removed += result.rowcount or 0
                await session.commit()
        except Exception as e:
            logger.warning("cache_purge_failed", error=str(e), source="cache")
            return 0

        logger.info("cache_purged", removed=removed, source="cache")
        return removed

    def set_in_background(
        self, namespace: CacheNamespace | str, key: str, value: Any
    ) -> asyncio.Task[None] | None:
        """Schedule set() without awaiting it. Returns the task, or None if unavailable."""
        if self._session_factory is None:
            return None

        task = asyncio.create_task(self.set(namespace, key, value))
        # Hold a strong reference until the write finishes
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_pending(self) -> None:
        """Wait for scheduled background writes (shutdown and tests)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
