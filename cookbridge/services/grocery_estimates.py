# cookbridge/services/grocery_estimates.py
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Iterable, NamedTuple, Union

from cookbridge.core.errors import InvalidInput
from cookbridge.core.grocery_tables import (
    AVERAGE_PRICES,
    BASE_QUANTITIES,
    CATEGORY_KEYWORDS,
    DEFAULT_PRICE,
    DEFAULT_QUANTITY,
)
from cookbridge.models.grocery import CategoryTag

Multiplier = Union[int, float, Fraction]


class QuantityEstimate(NamedTuple):
    amount: int
    unit: str
    notes: str


def _key(name: str) -> str:
    return (name or "").strip().lower()


def estimate_quantity(ingredient: str, multiplier: Multiplier = 1) -> QuantityEstimate:
    """
    Shopping quantity for one ingredient.

    The base amount is scaled by the serving multiplier and always rounded up,
    so a half-size recipe still buys at least one whole unit. Unit and notes
    are never scaled.
    """
    if multiplier <= 0:
        raise InvalidInput("Serving multiplier must be positive", {"multiplier": str(multiplier)})

    base = BASE_QUANTITIES.get(_key(ingredient), DEFAULT_QUANTITY)
    # Fraction keeps 6 * (8/4) from landing on 12.000000000000002
    amount = math.ceil(Fraction(base.amount) * Fraction(multiplier))
    return QuantityEstimate(amount=amount, unit=base.unit, notes=base.notes)


def categorize(ingredient: str) -> CategoryTag:
    lowered = _key(ingredient)
    if not lowered:
        return CategoryTag.other

    # Bidirectional: "cherry tomato" hits "tomato", and "herb" hits "herbs"
    for category, keywords in CATEGORY_KEYWORDS:
        if any(kw in lowered or lowered in kw for kw in keywords):
            return CategoryTag(category)

    return CategoryTag.other


def estimate_cost(ingredients: Iterable[str]) -> float:
    total = Decimal("0")
    for name in ingredients:
        total += Decimal(AVERAGE_PRICES.get(_key(name), DEFAULT_PRICE))
    return float(total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
