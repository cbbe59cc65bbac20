"""
Comic Valuation — Sales Aggregation Rules

Turns a list of sold listings into one estimated value:

    >= 3 sales in the last 180 days  → mean of the 3 most recent (averaged)
    1-2 sales in the last 180 days   → mean of those sales
    only older sales                 → price of the single most recent sale
    no sales                         → None

Pure function, no I/O. Money stays in Decimal.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple

import structlog

from comicvalue.config import settings
from comicvalue.pricing import SaleEvent

logger = structlog.get_logger(__name__)

_TWO_DP = Decimal("0.01")
_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


class SalesAggregate(NamedTuple):
    """Result of aggregating a list of sales."""
    estimated_value: Decimal | None
    is_averaged: bool
    disclaimer: str | None
    most_recent_sale_date: str | None
    sales: list[SaleEvent]  # newest first, age flags recomputed


def parse_sale_date(value: str) -> datetime | None:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime."""
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _mean(prices: list[Decimal]) -> Decimal:
    return sum(prices, Decimal("0")) / Decimal(len(prices))


def aggregate_sales(
    sales: list[SaleEvent],
    now: datetime | None = None,
) -> SalesAggregate:
    """
    Aggregate sold listings into an estimated value.

    Args:
        sales: Sale events in any order. Incoming age flags are ignored.
        now: Reference time for the recency window (default: current UTC time).

    Returns:
        SalesAggregate. Sales with an unparseable date sort last and count
        as older than the recency window.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=settings.RECENT_SALE_WINDOW_DAYS)

    dated: list[tuple[datetime, SaleEvent]] = []
    for sale in sales:
        sold_at = parse_sale_date(sale.date)
        is_old = sold_at is None or sold_at < cutoff
        dated.append((
            sold_at or _UNDATED,
            sale.model_copy(update={"is_older_than_6_months": is_old}),
        ))

    # Stable sort: equal dates keep their input order
    dated.sort(key=lambda pair: pair[0], reverse=True)
    ordered = [sale for _, sale in dated]

    most_recent_sale_date = ordered[0].date if ordered else None
    recent = [sale for sale in ordered if not sale.is_older_than_6_months]
    window = settings.RECENT_SALES_AVERAGE_COUNT

    estimated: Decimal | None = None
    is_averaged = False
    disclaimer: str | None = None

    if len(recent) >= window:
        estimated = _mean([sale.price for sale in recent[:window]])
        is_averaged = True
        disclaimer = settings.DISCLAIMER_AVERAGE_OF_WINDOW.format(count=window)
    elif recent:
        estimated = _mean([sale.price for sale in recent])
        is_averaged = len(recent) > 1
        disclaimer = (
            settings.DISCLAIMER_AVERAGE_OF_FEW.format(count=len(recent))
            if is_averaged
            else settings.DISCLAIMER_SINGLE_RECENT
        )
    elif ordered:
        estimated = ordered[0].price
        disclaimer = settings.DISCLAIMER_STALE

    if estimated is not None:
        estimated = estimated.quantize(_TWO_DP, rounding=ROUND_HALF_UP)

    logger.debug(
        "sales_aggregated",
        sale_count=len(ordered),
        recent_count=len(recent),
        estimated_value=str(estimated) if estimated is not None else None,
        is_averaged=is_averaged,
        source="sales",
    )
    return SalesAggregate(
        estimated_value=estimated,
        is_averaged=is_averaged,
        disclaimer=disclaimer,
        most_recent_sale_date=most_recent_sale_date,
        sales=ordered,
    )
