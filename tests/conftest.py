"""
Comic Valuation — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- In-memory cache store (aiosqlite)
- Sale / grade point / collection item builders
- Async test support via pytest-asyncio
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import AsyncGenerator, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from comicvalue.models.base import Base
from comicvalue.pricing import ComicDetails, CollectionItem, GradePoint, PriceRecord, SaleEvent
from comicvalue.utils.cache import CacheStore


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

pytest_plugins = ("pytest_asyncio",)


# ---------------------------------------------------------------------------
# Database Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Session factory over a fresh aiosqlite in-memory database.

    StaticPool keeps every session on the same connection, so all of them
    see the same in-memory tables.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def cache(session_factory: async_sessionmaker[AsyncSession]) -> CacheStore:
    """Cache store backed by the in-memory database."""
    return CacheStore(session_factory)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for recency calculations."""
    return datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_sale(now: datetime) -> Callable[..., SaleEvent]:
    """Build a SaleEvent `days_ago` days before `now`."""

    def _make(price: str | int, days_ago: int, source: str = "eBay") -> SaleEvent:
        sold_at = now - timedelta(days=days_ago)
        return SaleEvent(price=Decimal(str(price)), date=sold_at.date().isoformat(), source=source)

    return _make


@pytest.fixture
def scenario_points() -> list[GradePoint]:
    """Three grade points: (9.8, 500, 800), (9.4, 300, 500), (8.0, 100, 180)."""
    return [
        GradePoint(grade=9.4, label="Near Mint", raw_value=Decimal("300"), slabbed_value=Decimal("500")),
        GradePoint(grade=8.0, label="Very Fine", raw_value=Decimal("100"), slabbed_value=Decimal("180")),
        GradePoint(grade=9.8, label="Near Mint/Mint", raw_value=Decimal("500"), slabbed_value=Decimal("800")),
    ]


@pytest.fixture
def make_item() -> Callable[..., CollectionItem]:
    """Build a collection item valued at a flat `value` (None → no price record)."""
    counter = iter(range(1, 10_000))

    def _make(
        value: str | int | None,
        publisher: str = "Marvel Comics",
        purchase_price: str | int | None = None,
    ) -> CollectionItem:
        record = None
        if value is not None:
            record = PriceRecord(estimated_value=Decimal(str(value)))
        return CollectionItem(
            id=f"item-{next(counter)}",
            comic=ComicDetails(title="Test Comic", issue_number="1", publisher=publisher, price_data=record),
            purchase_price=Decimal(str(purchase_price)) if purchase_price is not None else None,
        )

    return _make
