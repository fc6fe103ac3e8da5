# cookbridge/core/grocery_tables.py
"""
Read-only grocery reference data, built once at import.

CATEGORY_KEYWORDS is an ordered tuple on purpose: the categorizer returns the
first category that matches, so the order here is the tie-break.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class BaseQuantity(NamedTuple):
    amount: int
    unit: str
    notes: str


CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("produce", ("tomato", "onion", "garlic", "basil", "herbs", "bell pepper", "lettuce", "cucumber")),
    ("dairy", ("cheese", "butter", "milk", "cream", "yogurt", "mozzarella", "parmesan")),
    ("protein", ("eggs", "chicken", "beef", "fish", "tofu")),
    ("pantry", ("salt", "pepper", "olive oil", "flour", "sugar", "pasta", "rice")),
    ("bread", ("bread", "tortilla", "buns", "rolls")),
    ("condiments", ("balsamic vinegar", "soy sauce", "hot sauce", "mustard")),
)

BASE_QUANTITIES: Mapping[str, BaseQuantity] = MappingProxyType(
    {
        "eggs": BaseQuantity(6, "pieces", "Large eggs"),
        "tomato": BaseQuantity(2, "pieces", "Medium tomatoes"),
        "cheese": BaseQuantity(200, "g", "Block or grated"),
        "butter": BaseQuantity(100, "g", "Unsalted preferred"),
        "bread": BaseQuantity(1, "loaf", "Whole grain or white"),
        "olive oil": BaseQuantity(250, "ml", "Extra virgin"),
        "onion": BaseQuantity(1, "piece", "Medium yellow onion"),
        "garlic": BaseQuantity(1, "head", "Fresh bulb"),
        "pasta": BaseQuantity(500, "g", "Dried pasta"),
        "salt": BaseQuantity(1, "container", "Sea salt or table salt"),
        "pepper": BaseQuantity(1, "container", "Freshly ground"),
    }
)

DEFAULT_QUANTITY = BaseQuantity(1, "item", "Check recipe for specific amount")

# Prices are strings so Decimal sums stay exact
AVERAGE_PRICES: Mapping[str, str] = MappingProxyType(
    {
        "eggs": "3.50",
        "tomato": "2.00",
        "cheese": "5.00",
        "butter": "4.00",
        "bread": "2.50",
        "olive oil": "6.00",
        "onion": "1.50",
        "garlic": "1.00",
        "pasta": "1.50",
        "salt": "1.00",
        "pepper": "3.00",
    }
)

DEFAULT_PRICE = "2.50"

KNOWN_INGREDIENTS = frozenset(
    set(BASE_QUANTITIES)
    | set(AVERAGE_PRICES)
    | {kw for _, keywords in CATEGORY_KEYWORDS for kw in keywords}
)
