"""
Comic Valuation — Price Resolution Orchestrator

Waterfall for one price request, short-circuiting on the first success:

1. Cache ("ebayPrice", keyed by fingerprint)
   - valid PriceRecord        → returned with its stored price_source
   - {"noData": true} marker  → marketplace skipped, go to 3
2. eBay sold listings         → aggregated, grade curve attached, cached
3. Generative estimate        → aggregated over synthetic sales, not cached
4. Nothing                    → PriceRecord.empty()

Cache writes are scheduled in the background and never awaited here. No
retries: one failure is a definitive miss for that tier.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from comicvalue.config import CacheNamespace, PriceSource, settings
from comicvalue.engine.grade_price import generate_grade_estimates, interpolate_grade_value
from comicvalue.engine.sales import aggregate_sales
from comicvalue.pipeline.estimator import PriceEstimator
from comicvalue.pricing import ComicDetails, PriceRecord, PriceRequest
from comicvalue.utils.cache import NO_DATA, CacheStore, is_no_data
from comicvalue.utils.fingerprint import price_fingerprint

logger = structlog.get_logger(__name__)


class PriceResolver:
    """
    Resolves a PriceRequest into a PriceRecord.

    `marketplace` is anything with an async
    lookup_sold_prices(title, issue_number, grade, is_slabbed, grading_company)
    returning a MarketplaceSummary or None (normally an open eBayClient).

    Usage:
        async with eBayClient() as ebay:
            resolver = PriceResolver(cache, ebay, PriceEstimator())
            record = await resolver.resolve(PriceRequest(title="Hulk", issue_number="181"))
    """

    def __init__(
        self,
        cache: CacheStore,
        marketplace: Any | None,
        estimator: PriceEstimator | None,
    ) -> None:
        self.cache = cache
        self.marketplace = marketplace
        self.estimator = estimator

    async def resolve(
        self,
        request: PriceRequest,
        details: ComicDetails | None = None,
    ) -> PriceRecord:
        """
        Run the waterfall. Never raises; the worst outcome is an empty record.

        Args:
            request: What to price.
            details: Optional identification (publisher, year, signature)
                     passed through to the generative estimate prompt.
        """
        fingerprint = price_fingerprint(
            request.title,
            request.issue_number,
            request.grade,
            request.is_encapsulated,
            request.grading_company,
        )

        skip_marketplace = False
        cached = await self.cache.get(CacheNamespace.EBAY_PRICE, fingerprint)
        if cached is not None:
            if is_no_data(cached):
                skip_marketplace = True
                logger.info(
                    "price_cache_no_data",
                    fingerprint=fingerprint,
                    source="resolver",
                )
            else:
                record = _validate_cached(cached, fingerprint)
                if record is not None:
                    logger.info(
                        "price_cache_hit",
                        fingerprint=fingerprint,
                        price_source=record.price_source.value if record.price_source else None,
                        source="resolver",
                    )
                    return record

        if not skip_marketplace:
            record = await self._from_marketplace(request)
            if record is not None:
                self.cache.set_in_background(
                    CacheNamespace.EBAY_PRICE, fingerprint, record.to_payload()
                )
                return record
            self.cache.set_in_background(CacheNamespace.EBAY_PRICE, fingerprint, NO_DATA)

        record = await self._from_estimator(request, details)
        if record is not None:
            return record

        logger.warning(
            "price_unavailable",
            title=request.title,
            issue_number=request.issue_number,
            fingerprint=fingerprint,
            source="resolver",
        )
        return PriceRecord.empty()

    async def _from_marketplace(self, request: PriceRequest) -> PriceRecord | None:
        if self.marketplace is None:
            return None

        try:
            summary = await self.marketplace.lookup_sold_prices(
                request.title,
                request.issue_number,
                request.grade,
                request.is_encapsulated,
                request.grading_company,
            )
        except Exception as e:
            logger.error(
                "marketplace_lookup_failed",
                title=request.title,
                issue_number=request.issue_number,
                error=str(e),
                source="resolver",
            )
            return None

        if summary is None:
            return None

        sales = [sale for sale in summary.sales if sale.price > 0]
        if not sales:
            return None

        aggregate = aggregate_sales(sales)
        if aggregate.estimated_value is None:
            return None

        logger.info(
            "price_resolved_from_marketplace",
            title=request.title,
            issue_number=request.issue_number,
            sale_count=len(sales),
            estimated_value=str(aggregate.estimated_value),
            source="resolver",
        )
        return PriceRecord(
            estimated_value=aggregate.estimated_value,
            recent_sales=aggregate.sales,
            most_recent_sale_date=aggregate.most_recent_sale_date,
            is_averaged=aggregate.is_averaged,
            disclaimer=aggregate.disclaimer,
            grade_estimates=generate_grade_estimates(aggregate.estimated_value),
            base_grade=settings.DEFAULT_BASE_GRADE,
            price_source=PriceSource.EBAY,
        )

    async def _from_estimator(
        self,
        request: PriceRequest,
        details: ComicDetails | None,
    ) -> PriceRecord | None:
        if self.estimator is None:
            return None

        try:
            estimate = await self.estimator.estimate_prices(request, details)
        except Exception as e:
            logger.error(
                "estimator_lookup_failed",
                title=request.title,
                issue_number=request.issue_number,
                error=str(e),
                source="resolver",
            )
            return None

        if estimate is None:
            return None

        aggregate = aggregate_sales(estimate.usable_sales())
        grade_estimates = estimate.grade_estimates or None
        base_grade = request.grade or settings.DEFAULT_BASE_GRADE

        estimated_value = aggregate.estimated_value
        disclaimer = aggregate.disclaimer
        if estimated_value is None and grade_estimates:
            # No usable sales: read the curve at the requested grade
            estimated_value = interpolate_grade_value(
                grade_estimates, base_grade, request.is_encapsulated
            )
            disclaimer = settings.DISCLAIMER_GRADE_CURVE

        if estimated_value is None:
            return None

        logger.info(
            "price_resolved_from_estimator",
            title=request.title,
            issue_number=request.issue_number,
            sale_count=len(aggregate.sales),
            estimated_value=str(estimated_value),
            source="resolver",
        )
        return PriceRecord(
            estimated_value=estimated_value,
            recent_sales=aggregate.sales,
            most_recent_sale_date=aggregate.most_recent_sale_date,
            is_averaged=aggregate.is_averaged,
            disclaimer=disclaimer,
            grade_estimates=grade_estimates,
            base_grade=base_grade,
            price_source=PriceSource.AI,
        )


def _validate_cached(cached: Any, fingerprint: str) -> PriceRecord | None:
    """A cached payload as a PriceRecord, or None if it no longer validates."""
    try:
        record = PriceRecord.model_validate(cached)
    except ValidationError as e:
        logger.warning(
            "price_cache_invalid",
            fingerprint=fingerprint,
            error=str(e),
            source="resolver",
        )
        return None

    # Every record written by the waterfall carries its source
    if record.price_source is None:
        logger.warning(
            "price_cache_invalid",
            fingerprint=fingerprint,
            error="missing priceSource",
            source="resolver",
        )
        return None
    return record
