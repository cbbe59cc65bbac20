"""
Comic Valuation — Grade Interpolation Engine

Answers "what is this comic worth at grade X, raw or slabbed" from a sparse
set of known (grade, raw, slabbed) points.

    grade above every point  → value at the highest point (no extrapolation)
    grade below every point  → value at the lowest point
    grade equal to a point   → that point's stored value, untouched
    otherwise                → linear interpolation between the bracketing pair
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple

import structlog

from comicvalue.config import settings
from comicvalue.pricing import GradePoint, PriceRecord

logger = structlog.get_logger(__name__)

_TWO_DP = Decimal("0.01")
_ONE_DP = Decimal("0.1")


class PriceComparison(NamedTuple):
    difference: Decimal
    percentage: Decimal


def _point_value(point: GradePoint, is_encapsulated: bool) -> Decimal:
    return point.slabbed_value if is_encapsulated else point.raw_value


def interpolate_grade_value(
    points: list[GradePoint],
    grade: float,
    is_encapsulated: bool = False,
) -> Decimal | None:
    """
    Value at `grade` from a list of grade points.

    Args:
        points: Known grade points, any order.
        grade: Target grade. Values outside 0.5-10.0 are clamped to the
               nearest known point rather than rejected.
        is_encapsulated: Use slabbed values instead of raw values.

    Returns:
        Value rounded to 2dp, or None when there are no points.
    """
    if not points:
        return None

    ordered = sorted(points, key=lambda p: p.grade, reverse=True)

    for point in ordered:
        if point.grade == grade:
            return _point_value(point, is_encapsulated)

    upper: GradePoint | None = None
    lower: GradePoint | None = None
    for point in ordered:
        if point.grade >= grade:
            upper = point
        else:
            lower = point
            break

    if upper is None:
        return _point_value(ordered[0], is_encapsulated)
    if lower is None:
        return _point_value(ordered[-1], is_encapsulated)

    upper_value = _point_value(upper, is_encapsulated)
    lower_value = _point_value(lower, is_encapsulated)
    position = (Decimal(str(grade)) - Decimal(str(lower.grade))) / (
        Decimal(str(upper.grade)) - Decimal(str(lower.grade))
    )
    value = lower_value + (upper_value - lower_value) * position
    return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def calculate_value_at_grade(
    price_record: PriceRecord | None,
    grade: float,
    is_encapsulated: bool = False,
) -> Decimal | None:
    """
    Value of a priced comic at a specific grade.

    Falls back to the record's base estimated value when it carries no
    grade estimates.
    """
    if price_record is None:
        return None
    if not price_record.grade_estimates:
        return price_record.estimated_value
    return interpolate_grade_value(price_record.grade_estimates, grade, is_encapsulated)


def generate_grade_estimates(base_price: Decimal) -> list[GradePoint]:
    """
    Fan a single base-grade price out across the grade scale.

    Uses the multiplier curve in settings.GRADE_MULTIPLIERS (relative to the
    9.4 base grade).
    """
    return [
        GradePoint(
            grade=grade,
            label=label,
            raw_value=(base_price * raw_mult).quantize(_TWO_DP, rounding=ROUND_HALF_UP),
            slabbed_value=(base_price * slab_mult).quantize(_TWO_DP, rounding=ROUND_HALF_UP),
        )
        for grade, label, raw_mult, slab_mult in settings.GRADE_MULTIPLIERS
    ]


def get_grade_label(grade: float) -> str:
    """Standard label for a numeric grade."""
    if grade >= 9.8:
        return "Near Mint/Mint"
    if grade >= 9.4:
        return "Near Mint"
    if grade >= 9.0:
        return "Very Fine/Near Mint"
    if grade >= 8.0:
        return "Very Fine"
    if grade >= 7.0:
        return "Fine/Very Fine"
    if grade >= 6.0:
        return "Fine"
    if grade >= 5.0:
        return "Very Good/Fine"
    if grade >= 4.0:
        return "Very Good"
    if grade >= 3.0:
        return "Good/Very Good"
    if grade >= 2.0:
        return "Good"
    if grade >= 1.0:
        return "Fair"
    return "Poor"


def get_price_comparison(
    price_record: PriceRecord | None,
    current_grade: float,
    compare_grade: float,
    is_encapsulated: bool = False,
) -> PriceComparison | None:
    """Price difference between two grades of the same comic."""
    current = calculate_value_at_grade(price_record, current_grade, is_encapsulated)
    compare = calculate_value_at_grade(price_record, compare_grade, is_encapsulated)
    if current is None or compare is None:
        return None

    difference = compare - current
    percentage = (difference / current * 100) if current > 0 else Decimal("0")

    logger.debug(
        "grade_price_compared",
        current_grade=current_grade,
        compare_grade=compare_grade,
        difference=str(difference),
        source="grade_price",
    )
    return PriceComparison(
        difference=difference.quantize(_TWO_DP, rounding=ROUND_HALF_UP),
        percentage=percentage.quantize(_ONE_DP, rounding=ROUND_HALF_UP),
    )
