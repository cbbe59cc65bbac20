"""
Comic Valuation — eBay Sold-Listings Client

Fetches recently sold comic listings for price discovery.

Search order:
1. Marketplace Insights item_sales (true sold data)
2. Browse API item_summary search (fallback)

Auth is an application token (client-credentials grant), reused until it
expires.

Every failure is logged and reported as "no data"; nothing raises.
"""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from comicvalue.config import settings
from comicvalue.engine.sales import parse_sale_date
from comicvalue.pricing import SaleEvent

logger = structlog.get_logger(__name__)

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)

# ---------------------------------------------------------------------------
# Module-level token cache
# ---------------------------------------------------------------------------
_TOKEN_CACHE: dict[str, Any] = {
    "access_token": None,
    "expires_at": datetime.min.replace(tzinfo=timezone.utc),
}


class MarketplaceSummary(BaseModel):
    """Sold listings for one query, newest first, outliers removed."""
    sales: list[SaleEvent]
    average_price: Decimal | None = None
    high_price: Decimal | None = None
    low_price: Decimal | None = None
    total_results: int = 0
    search_query: str = ""


def is_ebay_configured() -> bool:
    return bool(settings.EBAY_APP_ID and settings.EBAY_CERT_ID)


def build_search_query(
    title: str,
    issue_number: str | None = None,
    grade: float | None = None,
    is_slabbed: bool = False,
    grading_company: str | None = None,
) -> str:
    """
    Keywords for a sold-listing search.

    Slabbed comics add the grading company (CGC when unknown) and the grade
    with one decimal ("9.0", not "9"). Signature Series is left out on
    purpose: signed copies are rare and the search would come back empty.
    """
    query = title.strip()
    if issue_number:
        query += f" {issue_number.strip().lstrip('#').strip()}"

    if is_slabbed:
        query += f" {grading_company.strip() if grading_company else 'CGC'}"
        if grade:
            query += f" {float(grade):.1f}"

    return query


def filter_outliers(sales: list[SaleEvent]) -> list[SaleEvent]:
    """Drop sales outside [0.2x, 3x] of the median price."""
    if not sales:
        return []
    prices = sorted(sale.price for sale in sales)
    mid = prices[len(prices) // 2]
    high = mid * settings.OUTLIER_HIGH_MULTIPLE
    low = mid * settings.OUTLIER_LOW_MULTIPLE
    return [sale for sale in sales if low <= sale.price <= high]


def _parse_price(value: Any) -> Decimal | None:
    try:
        price = Decimal(str(value)) if value is not None else None
    except (InvalidOperation, TypeError):
        return None
    if price is None or not price.is_finite() or price <= 0:
        return None
    return price


def _summarise(sales: list[SaleEvent], total: int, query: str) -> MarketplaceSummary:
    sales = sorted(
        sales,
        key=lambda s: parse_sale_date(s.date) or _UNDATED,
        reverse=True,
    )
    kept = filter_outliers(sales)[: settings.MAX_SALES_KEPT]
    if not kept:
        return MarketplaceSummary(sales=[], search_query=query)

    prices = [sale.price for sale in kept]
    average = (sum(prices, Decimal("0")) / len(prices)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return MarketplaceSummary(
        sales=kept,
        average_price=average,
        high_price=max(prices),
        low_price=min(prices),
        total_results=total or len(kept),
        search_query=query,
    )


class eBayClient:
    """
    eBay sold-listings client.

    Application token from EBAY_APP_ID + EBAY_CERT_ID, shared process-wide
    through _TOKEN_CACHE.

    Usage:
        async with eBayClient() as ebay:
            summary = await ebay.lookup_sold_prices("Amazing Spider-Man", "300")
    """

    def __init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "eBayClient":
        self._client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    async def _request_token(self, client: httpx.AsyncClient) -> tuple[str, int]:
        """POST the client-credentials grant; returns (token, lifetime seconds)."""
        basic = base64.b64encode(f"{settings.EBAY_APP_ID}:{settings.EBAY_CERT_ID}".encode()).decode()
        response = await client.post(
            settings.EBAY_OAUTH_URL,
            headers={"Authorization": f"Basic {basic}"},
            data={"grant_type": "client_credentials", "scope": settings.EBAY_OAUTH_SCOPE},
        )
        response.raise_for_status()
        payload = response.json()
        return payload.get("access_token", ""), int(payload.get("expires_in", 7200))

    async def _get_access_token(self) -> str:
        """
        Application token for the Buy APIs.

        Reused until 60 seconds before it expires. "" when credentials are
        missing or the grant is refused.
        """
        if not is_ebay_configured() or self._client is None:
            return ""

        issued_at = datetime.now(timezone.utc)
        cached = _TOKEN_CACHE["access_token"]
        if cached and issued_at < _TOKEN_CACHE["expires_at"]:
            return str(cached)

        try:
            token, lifetime = await self._request_token(self._client)
        except Exception as e:
            logger.error("ebay_token_fetch_failed", error=str(e), source="ebay")
            return ""

        _TOKEN_CACHE.update(
            access_token=token,
            expires_at=issued_at + timedelta(seconds=lifetime - 60),
        )
        logger.info("ebay_token_refreshed", expires_in=lifetime, source="ebay")
        return token

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "X-EBAY-C-MARKETPLACE-ID": settings.EBAY_MARKETPLACE_ID,
        }

    async def search_item_sales(self, query: str, token: str) -> MarketplaceSummary | None:
        """
        Marketplace Insights sold-item search.

        GET /buy/marketplace_insights/v1_beta/item_sales/search?q=...

        Returns None on any HTTP or parse error.
        """
        if not self._client:
            return None

        try:
            response = await self._client.get(
                f"{settings.EBAY_API_URL}/buy/marketplace_insights/v1_beta/item_sales/search",
                headers=self._headers(token),
                params={
                    "q": query,
                    "category_ids": settings.EBAY_COMIC_CATEGORY_ID,
                    "limit": str(settings.EBAY_SEARCH_LIMIT),
                },
            )
            response.raise_for_status()
            data = response.json()

            sales: list[SaleEvent] = []
            for item in data.get("itemSales", []):
                last_sold = item.get("lastSoldPrice") or {}
                price = _parse_price(last_sold.get("value"))
                sold_date = item.get("lastSoldDate")
                if price is None or not sold_date:
                    continue
                sales.append(SaleEvent(price=price, date=sold_date, source="eBay"))

            logger.info(
                "ebay_item_sales_complete",
                query=query,
                result_count=len(sales),
                source="ebay",
            )
            return _summarise(sales, int(data.get("total", 0) or 0), query)

        except Exception as e:
            logger.warning(
                "ebay_item_sales_failed",
                query=query,
                error=str(e),
                source="ebay",
            )
            return None

    async def search_sold_listings(self, query: str, token: str) -> MarketplaceSummary | None:
        """
        Browse API search, newest listings first.

        GET /buy/browse/v1/item_summary/search?q=...&sort=-endDate

        Returns None on any HTTP or parse error.
        """
        if not self._client:
            return None

        try:
            response = await self._client.get(
                f"{settings.EBAY_API_URL}/buy/browse/v1/item_summary/search",
                headers=self._headers(token),
                params={
                    "q": query,
                    "category_ids": settings.EBAY_COMIC_CATEGORY_ID,
                    "filter": "buyingOptions:{FIXED_PRICE|AUCTION}",
                    "sort": "-endDate",
                    "limit": str(settings.EBAY_SEARCH_LIMIT),
                },
            )
            response.raise_for_status()
            data = response.json()

            sales: list[SaleEvent] = []
            for item in data.get("itemSummaries", []):
                price = _parse_price((item.get("price") or {}).get("value"))
                sold_date = item.get("itemEndDate") or item.get("itemCreationDate")
                if price is None or not sold_date:
                    continue
                sales.append(SaleEvent(price=price, date=sold_date, source="eBay"))

            logger.info(
                "ebay_search_complete",
                query=query,
                result_count=len(sales),
                source="ebay",
            )
            return _summarise(sales, int(data.get("total", 0) or 0), query)

        except Exception as e:
            logger.warning(
                "ebay_search_failed",
                query=query,
                error=str(e),
                source="ebay",
            )
            return None

    async def lookup_sold_prices(
        self,
        title: str,
        issue_number: str | None = None,
        grade: float | None = None,
        is_slabbed: bool = False,
        grading_company: str | None = None,
    ) -> MarketplaceSummary | None:
        """
        Sold-price summary for a comic, or None when eBay has nothing usable.

        A returned summary always carries at least one sale.
        """
        query = build_search_query(title, issue_number, grade, is_slabbed, grading_company)

        token = await self._get_access_token()
        if not token:
            logger.warning("ebay_lookup_skipped_no_token", query=query, source="ebay")
            return None

        summary = await self.search_item_sales(query, token)
        if summary is None or not summary.sales:
            summary = await self.search_sold_listings(query, token)

        if summary is None or not summary.sales:
            logger.info("ebay_no_sales_found", query=query, source="ebay")
            return None

        logger.info(
            "ebay_sold_prices_found",
            query=query,
            sale_count=len(summary.sales),
            average_price=str(summary.average_price),
            source="ebay",
        )
        return summary
