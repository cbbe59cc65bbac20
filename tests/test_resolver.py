"""Tests for the price resolution waterfall."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from comicvalue.config import CacheNamespace, PriceSource, settings
from comicvalue.pipeline.ebay import MarketplaceSummary
from comicvalue.pipeline.estimator import AiPriceEstimate, PriceEstimator
from comicvalue.pricing import GradePoint, PriceRecord, PriceRequest, SaleEvent
from comicvalue.pricing.resolver import PriceResolver
from comicvalue.utils.cache import NO_DATA
from comicvalue.utils.fingerprint import price_fingerprint

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

REQUEST = PriceRequest(title="Incredible Hulk", issue_number="181", grade=9.4)
FINGERPRINT = price_fingerprint("Incredible Hulk", "181", 9.4, False, None)


def _recent(price: str, days_ago: int) -> SaleEvent:
    sold = datetime.now(timezone.utc) - timedelta(days=days_ago)
    return SaleEvent(price=Decimal(price), date=sold.date().isoformat())


def _marketplace(summary: MarketplaceSummary | None = None, error: Exception | None = None) -> AsyncMock:
    marketplace = AsyncMock()
    marketplace.lookup_sold_prices = AsyncMock(return_value=summary, side_effect=error)
    return marketplace


def _estimator(estimate: AiPriceEstimate | None = None) -> AsyncMock:
    estimator = AsyncMock(spec=PriceEstimator)
    estimator.estimate_prices = AsyncMock(return_value=estimate)
    return estimator


def _summary() -> MarketplaceSummary:
    sales = [_recent("300", 2), _recent("200", 10), _recent("100", 20), _recent("50", 40)]
    return MarketplaceSummary(sales=sales, average_price=Decimal("162.50"), total_results=4)


def _ai_estimate(with_sales: bool = True) -> AiPriceEstimate:
    return AiPriceEstimate(
        recent_sales=[_recent("80", 5), _recent("90", 15)] if with_sales else [],
        grade_estimates=[
            GradePoint(grade=9.8, raw_value=Decimal("200"), slabbed_value=Decimal("300")),
            GradePoint(grade=9.0, raw_value=Decimal("40"), slabbed_value=Decimal("60")),
        ],
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestMarketplaceTier:
    @pytest.mark.asyncio
    async def test_sales_are_aggregated_and_cached(self, cache) -> None:
        """Marketplace sales produce an eBay record with a grade curve, written to cache."""
        marketplace = _marketplace(_summary())
        estimator = _estimator()

        record = await PriceResolver(cache, marketplace, estimator).resolve(REQUEST)
        await cache.wait_pending()

        assert record.price_source == PriceSource.EBAY
        assert record.estimated_value == Decimal("200.00")
        assert record.is_averaged is True
        assert record.base_grade == settings.DEFAULT_BASE_GRADE
        assert record.grade_estimates is not None
        assert len(record.grade_estimates) == len(settings.GRADE_MULTIPLIERS)
        estimator.estimate_prices.assert_not_awaited()
        marketplace.lookup_sold_prices.assert_awaited_once_with("Incredible Hulk", "181", 9.4, False, None)

        cached = await cache.get(CacheNamespace.EBAY_PRICE, FINGERPRINT)
        assert cached == record.to_payload()

    @pytest.mark.asyncio
    async def test_cache_hit_keeps_stored_source(self, cache) -> None:
        """A cached record is returned as stored; no adapter runs."""
        stored = PriceRecord(estimated_value=Decimal("75"), price_source=PriceSource.EBAY)
        await cache.set(CacheNamespace.EBAY_PRICE, FINGERPRINT, stored.to_payload())
        marketplace = _marketplace(_summary())
        estimator = _estimator(_ai_estimate())

        record = await PriceResolver(cache, marketplace, estimator).resolve(REQUEST)

        assert record == stored
        marketplace.lookup_sold_prices.assert_not_awaited()
        estimator.estimate_prices.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"estimatedValue": "lots"}, {"estimatedValue": 10.0}])
    async def test_invalid_cache_entry_is_a_miss(self, cache, payload) -> None:
        """Entries that fail validation or carry no source are ignored."""
        await cache.set(CacheNamespace.EBAY_PRICE, FINGERPRINT, payload)
        marketplace = _marketplace(_summary())

        record = await PriceResolver(cache, marketplace, _estimator()).resolve(REQUEST)

        assert record.price_source == PriceSource.EBAY
        marketplace.lookup_sold_prices.assert_awaited_once()


class TestEstimatorTier:
    @pytest.mark.asyncio
    async def test_marketplace_miss_writes_no_data_and_falls_back(self, cache) -> None:
        """No marketplace sales → noData marker cached, AI record returned uncached."""
        estimator = _estimator(_ai_estimate())

        record = await PriceResolver(cache, _marketplace(None), estimator).resolve(REQUEST)
        await cache.wait_pending()

        assert record.price_source == PriceSource.AI
        assert record.estimated_value == Decimal("85.00")
        assert record.base_grade == 9.4
        assert await cache.get(CacheNamespace.EBAY_PRICE, FINGERPRINT) == NO_DATA

    @pytest.mark.asyncio
    async def test_no_data_marker_skips_marketplace(self, cache) -> None:
        """A cached noData marker goes straight to the estimator."""
        await cache.set(CacheNamespace.EBAY_PRICE, FINGERPRINT, NO_DATA)
        marketplace = _marketplace(_summary())
        estimator = _estimator(_ai_estimate())

        record = await PriceResolver(cache, marketplace, estimator).resolve(REQUEST)
        await cache.wait_pending()

        assert record.price_source == PriceSource.AI
        marketplace.lookup_sold_prices.assert_not_awaited()
        assert await cache.get(CacheNamespace.EBAY_PRICE, FINGERPRINT) == NO_DATA

    @pytest.mark.asyncio
    async def test_grade_curve_only_estimate(self, cache) -> None:
        """Without usable sales the value is read off the curve at the requested grade."""
        estimator = _estimator(_ai_estimate(with_sales=False))

        record = await PriceResolver(cache, None, estimator).resolve(REQUEST)

        # 40 + 160 * 0.4 / 0.8
        assert record.estimated_value == Decimal("120.00")
        assert record.recent_sales == []
        assert record.disclaimer == settings.DISCLAIMER_GRADE_CURVE
        assert record.price_source == PriceSource.AI

    @pytest.mark.asyncio
    async def test_marketplace_error_is_a_miss(self, cache) -> None:
        """An adapter exception falls through to the next tier."""
        marketplace = _marketplace(error=RuntimeError("timeout"))

        record = await PriceResolver(cache, marketplace, _estimator(_ai_estimate())).resolve(REQUEST)

        assert record.price_source == PriceSource.AI


class TestNothingAvailable:
    @pytest.mark.asyncio
    async def test_all_tiers_fail_returns_empty_record(self, cache) -> None:
        """Every tier failing yields the empty record, never an exception."""
        record = await PriceResolver(cache, _marketplace(None), _estimator(None)).resolve(REQUEST)

        assert record == PriceRecord.empty()
        assert record.estimated_value is None
        assert record.price_source is None

    @pytest.mark.asyncio
    async def test_no_adapters_and_no_cache(self) -> None:
        """An unavailable cache with no adapters still resolves."""
        from comicvalue.utils.cache import CacheStore

        record = await PriceResolver(CacheStore(), None, None).resolve(REQUEST)

        assert record == PriceRecord.empty()
