"""
Comic Valuation — Valuation Façade

Stable read API used by every display and aggregation feature. Always
returns a Decimal so callers can sum the result directly.
"""

from __future__ import annotations

from decimal import Decimal

from comicvalue.engine.grade_price import calculate_value_at_grade
from comicvalue.pricing import CollectionItem

_ZERO = Decimal("0")


def item_grade(item: CollectionItem) -> float | None:
    """The grade an item is valued at: the owner's assessment, else the slab label."""
    if item.condition_grade is not None:
        return item.condition_grade
    if item.comic.grade:
        try:
            return float(item.comic.grade)
        except ValueError:
            return None
    return None


def is_encapsulated(item: CollectionItem) -> bool:
    return item.is_graded or item.comic.is_slabbed


def get_comic_value(item: CollectionItem) -> Decimal:
    """
    Value of a collection item at its own grade and encapsulation.

    No price record → 0. No grade → the record's base value. A record with
    no usable value also yields 0, never None.
    """
    record = item.comic.price_data
    if record is None:
        return _ZERO

    grade = item_grade(item)
    if grade is None:
        value = record.estimated_value
    else:
        value = calculate_value_at_grade(record, grade, is_encapsulated(item))

    return value if value is not None else _ZERO
