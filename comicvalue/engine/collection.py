"""
Comic Valuation — Collection Aggregator

Collection-level totals built on the valuation façade. Each item is valued
exactly once per call.
"""

from __future__ import annotations

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple

import structlog

from comicvalue.config import GradingCompany
from comicvalue.engine.valuation import get_comic_value, is_encapsulated
from comicvalue.pricing import CollectionItem

logger = structlog.get_logger(__name__)

_ZERO = Decimal("0")
_TWO_DP = Decimal("0.01")
_ONE_DP = Decimal("0.1")
_UNKNOWN = "Unknown"


class CollectionTotals(NamedTuple):
    total_value: Decimal
    priced_count: int
    unpriced_count: int
    total_count: int
    average_value: Decimal
    highest_value_item: CollectionItem | None
    lowest_value_item: CollectionItem | None


class PublisherStats(NamedTuple):
    publisher: str
    count: int
    value: Decimal
    percentage: Decimal


class FinancialStats(NamedTuple):
    total_purchase_cost: Decimal
    total_estimated_value: Decimal
    unrealized_gain_loss: Decimal
    roi_percentage: Decimal
    comics_with_cost: int
    comics_with_value: int


class DecadeStats(NamedTuple):
    decade: str
    count: int
    value: Decimal
    percentage: Decimal


class GradeCount(NamedTuple):
    grade: str
    count: int


class GradingStats(NamedTuple):
    raw_count: int
    slabbed_count: int
    cgc_count: int
    cbcs_count: int
    pgx_count: int
    other_graded_count: int
    grade_distribution: list[GradeCount]


class KeyComicStats(NamedTuple):
    key_count: int
    top_key_comics: list[CollectionItem]


def calculate_collection_totals(items: list[CollectionItem]) -> CollectionTotals:
    """
    Sum item values and find the highest/lowest valued items in one pass.

    An item valued at exactly 0 is unpriced and is excluded from the
    highest/lowest lookups. Ties keep the first item seen.
    """
    total = _ZERO
    priced = 0
    unpriced = 0
    highest: tuple[Decimal, CollectionItem] | None = None
    lowest: tuple[Decimal, CollectionItem] | None = None

    for item in items:
        value = get_comic_value(item)
        if value == _ZERO:
            unpriced += 1
            continue

        total += value
        priced += 1
        if highest is None or value > highest[0]:
            highest = (value, item)
        if lowest is None or value < lowest[0]:
            lowest = (value, item)

    average = (total / priced).quantize(_TWO_DP, rounding=ROUND_HALF_UP) if priced else _ZERO

    logger.debug(
        "collection_totals_calculated",
        total_value=str(total),
        priced_count=priced,
        unpriced_count=unpriced,
        source="collection",
    )
    return CollectionTotals(
        total_value=total,
        priced_count=priced,
        unpriced_count=unpriced,
        total_count=len(items),
        average_value=average,
        highest_value_item=highest[1] if highest else None,
        lowest_value_item=lowest[1] if lowest else None,
    )


def calculate_publisher_stats(items: list[CollectionItem]) -> list[PublisherStats]:
    """Count and value per publisher, most valuable first."""
    buckets: dict[str, list[Decimal]] = {}
    for item in items:
        publisher = item.comic.publisher or "Unknown"
        buckets.setdefault(publisher, []).append(get_comic_value(item))

    grand_total = sum((sum(values, _ZERO) for values in buckets.values()), _ZERO)

    stats = []
    for publisher, values in buckets.items():
        value = sum(values, _ZERO)
        percentage = (value / grand_total * 100) if grand_total > 0 else _ZERO
        stats.append(PublisherStats(
            publisher=publisher,
            count=len(values),
            value=value,
            percentage=percentage.quantize(_ONE_DP, rounding=ROUND_HALF_UP),
        ))

    stats.sort(key=lambda s: s.value, reverse=True)
    return stats


def calculate_financial_stats(items: list[CollectionItem]) -> FinancialStats:
    """Cost basis versus current value for items with a recorded purchase price."""
    cost = _ZERO
    value_of_costed = _ZERO
    total_value = _ZERO
    with_cost = 0
    with_value = 0

    for item in items:
        value = get_comic_value(item)
        total_value += value
        if value > 0:
            with_value += 1
        if item.purchase_price is not None and item.purchase_price > 0:
            cost += item.purchase_price
            value_of_costed += value
            with_cost += 1

    gain_loss = value_of_costed - cost
    roi = (gain_loss / cost * 100) if cost > 0 else _ZERO

    return FinancialStats(
        total_purchase_cost=cost,
        total_estimated_value=total_value,
        unrealized_gain_loss=gain_loss,
        roi_percentage=roi.quantize(_ONE_DP, rounding=ROUND_HALF_UP),
        comics_with_cost=with_cost,
        comics_with_value=with_value,
    )


def get_top_publishers(items: list[CollectionItem], limit: int = 5) -> list[PublisherStats]:
    return calculate_publisher_stats(items)[:limit]


def _decade(release_year: str | None) -> str:
    match = re.match(r"\s*(\d{4})", release_year or "")
    if not match:
        return _UNKNOWN
    return f"{int(match.group(1)) // 10 * 10}s"


def calculate_decade_stats(items: list[CollectionItem]) -> list[DecadeStats]:
    """Count and value per release decade ("1980s"), oldest first, "Unknown" last."""
    buckets: dict[str, list[Decimal]] = {}
    for item in items:
        buckets.setdefault(_decade(item.comic.release_year), []).append(get_comic_value(item))

    grand_total = sum((sum(values, _ZERO) for values in buckets.values()), _ZERO)

    stats = []
    for decade, values in buckets.items():
        value = sum(values, _ZERO)
        percentage = (value / grand_total * 100) if grand_total > 0 else _ZERO
        stats.append(DecadeStats(
            decade=decade,
            count=len(values),
            value=value,
            percentage=percentage.quantize(_ONE_DP, rounding=ROUND_HALF_UP),
        ))

    stats.sort(key=lambda s: (s.decade == _UNKNOWN, s.decade))
    return stats


def _grade_sort_key(entry: GradeCount) -> float:
    try:
        return float(entry.grade)
    except ValueError:
        return float("-inf")


def calculate_grading_stats(items: list[CollectionItem]) -> GradingStats:
    """
    Raw versus slabbed counts, slabs per grading company, and the grade
    distribution of slabbed items (highest grade first).

    An item is slabbed when the owner marked it graded or the comic itself
    was identified as slabbed. The owner's grading company wins over the
    comic's.
    """
    raw = 0
    slabbed = 0
    per_company = {GradingCompany.CGC.value: 0, GradingCompany.CBCS.value: 0, GradingCompany.PGX.value: 0}
    other = 0
    grades: dict[str, int] = {}

    for item in items:
        if not is_encapsulated(item):
            raw += 1
            continue

        slabbed += 1
        company = (item.grading_company or item.comic.grading_company or "").strip().upper()
        if company in per_company:
            per_company[company] += 1
        elif company:
            other += 1

        grade = item.comic.grade or (f"{item.condition_grade:g}" if item.condition_grade else None)
        if grade:
            grades[grade] = grades.get(grade, 0) + 1

    distribution = [GradeCount(grade=grade, count=count) for grade, count in grades.items()]
    distribution.sort(key=_grade_sort_key, reverse=True)

    return GradingStats(
        raw_count=raw,
        slabbed_count=slabbed,
        cgc_count=per_company[GradingCompany.CGC.value],
        cbcs_count=per_company[GradingCompany.CBCS.value],
        pgx_count=per_company[GradingCompany.PGX.value],
        other_graded_count=other,
        grade_distribution=distribution,
    )


def calculate_key_comic_stats(items: list[CollectionItem], limit: int = 5) -> KeyComicStats:
    """Number of items with key facts, and the most valuable of them."""
    keys = [item for item in items if item.comic.key_info]
    # Stable sort: equal values keep collection order
    ranked = sorted(keys, key=get_comic_value, reverse=True)
    return KeyComicStats(key_count=len(keys), top_key_comics=ranked[:limit])
