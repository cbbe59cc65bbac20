from comicvalue.engine.collection import (
    calculate_collection_totals,
    calculate_decade_stats,
    calculate_financial_stats,
    calculate_grading_stats,
    calculate_key_comic_stats,
    calculate_publisher_stats,
    get_top_publishers,
)
from comicvalue.engine.grade_price import (
    calculate_value_at_grade,
    generate_grade_estimates,
    get_grade_label,
    get_price_comparison,
    interpolate_grade_value,
)
from comicvalue.engine.sales import aggregate_sales
from comicvalue.engine.valuation import get_comic_value

__all__ = [
    "aggregate_sales",
    "calculate_collection_totals",
    "calculate_decade_stats",
    "calculate_financial_stats",
    "calculate_grading_stats",
    "calculate_key_comic_stats",
    "calculate_publisher_stats",
    "calculate_value_at_grade",
    "generate_grade_estimates",
    "get_comic_value",
    "get_grade_label",
    "get_price_comparison",
    "get_top_publishers",
    "interpolate_grade_value",
]
