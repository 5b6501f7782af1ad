"""Cost comparison package."""

from meeting_cost.comparisons.generator import (
    COMPARISON_CATALOG,
    DEFAULT_COMPARISON_COUNT,
    ComparisonItem,
    generate_comparison,
    generate_comparison_list,
)

__all__ = [
    "COMPARISON_CATALOG",
    "DEFAULT_COMPARISON_COUNT",
    "ComparisonItem",
    "generate_comparison",
    "generate_comparison_list",
]
