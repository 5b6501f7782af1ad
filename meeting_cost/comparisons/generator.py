"""
Cost Comparisons

"This meeting cost the same as 42 burritos."

Turns a dollar amount into quantities of everyday things. Selection is
random on purpose: the same meeting should not always read the same way.

DESIGN DECISION: Multiple comparisons are drawn with random.sample,
a partial shuffle of the catalog. It cannot repeat an item and always
terminates, even when count exceeds the catalog size.
"""

import math
import random
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_COMPARISON_COUNT = 3
ZERO_COMPARISON = "0 items"


class ComparisonItem(BaseModel):
    """A reference item with a unit price in USD."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    plural_name: str = Field(..., min_length=1)
    unit_price: float = Field(..., gt=0)

    def describe(self, quantity: int) -> str:
        return f"{quantity} {self.name if quantity == 1 else self.plural_name}"


COMPARISON_CATALOG: tuple[ComparisonItem, ...] = (
    ComparisonItem(name="cup of coffee", plural_name="cups of coffee", unit_price=5.50),
    ComparisonItem(name="burrito", plural_name="burritos", unit_price=11.00),
    ComparisonItem(name="large pizza", plural_name="large pizzas", unit_price=18.00),
    ComparisonItem(name="movie ticket", plural_name="movie tickets", unit_price=15.00),
    ComparisonItem(name="paperback book", plural_name="paperback books", unit_price=12.00),
    ComparisonItem(name="month of music streaming", plural_name="months of music streaming", unit_price=10.99),
    ComparisonItem(name="pair of running shoes", plural_name="pairs of running shoes", unit_price=120.00),
    ComparisonItem(name="tank of gas", plural_name="tanks of gas", unit_price=55.00),
    ComparisonItem(name="avocado", plural_name="avocados", unit_price=1.75),
    ComparisonItem(name="bag of groceries", plural_name="bags of groceries", unit_price=45.00),
    ComparisonItem(name="concert ticket", plural_name="concert tickets", unit_price=85.00),
    ComparisonItem(name="mechanical keyboard", plural_name="mechanical keyboards", unit_price=150.00),
    ComparisonItem(name="office chair", plural_name="office chairs", unit_price=350.00),
    ComparisonItem(name="laptop", plural_name="laptops", unit_price=1200.00),
    ComparisonItem(name="round-trip flight", plural_name="round-trip flights", unit_price=450.00),
    ComparisonItem(name="houseplant", plural_name="houseplants", unit_price=25.00),
)


def _quantity(cost: float, item: ComparisonItem) -> int:
    return max(1, math.floor(cost / item.unit_price))


def generate_comparison(
    cost: float,
    rng: Optional[random.Random] = None,
    catalog: tuple[ComparisonItem, ...] = COMPARISON_CATALOG,
) -> str:
    """
    Describe a cost as a quantity of one randomly chosen item.

    Returns "0 items" unless the cost is a positive finite number.
    """
    if not math.isfinite(cost) or cost <= 0:
        return ZERO_COMPARISON

    rng = rng or random
    item = rng.choice(catalog)
    return item.describe(_quantity(cost, item))


def generate_comparison_list(
    cost: float,
    count: int = DEFAULT_COMPARISON_COUNT,
    rng: Optional[random.Random] = None,
    catalog: tuple[ComparisonItem, ...] = COMPARISON_CATALOG,
) -> list[str]:
    """
    Describe a cost as several different items.

    Args:
        cost: Amount in USD
        count: How many comparisons to return (capped at the catalog size)
        rng: Optional random source, for reproducible selections

    Returns:
        Up to `count` strings, no item repeated; [] for cost <= 0
        or a non-finite cost
    """
    if not math.isfinite(cost) or cost <= 0 or count <= 0:
        return []

    rng = rng or random
    items = rng.sample(catalog, k=min(count, len(catalog)))
    return [item.describe(_quantity(cost, item)) for item in items]
