# cookbridge/services/known_ingredients.py
from __future__ import annotations

from typing import Iterable, List

from cookbridge.core.grocery_tables import KNOWN_INGREDIENTS
from cookbridge.models.grocery import IngredientAvailability


def _normalize(name: str) -> str:
    return " ".join((name or "").strip().lower().split())


class KnownIngredients:
    """Static reference set of ingredients the grocery tables know about."""

    def __init__(self, names: Iterable[str] = KNOWN_INGREDIENTS):
        self._names = frozenset(_normalize(n) for n in names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._names

    def check(self, names: Iterable[str]) -> List[IngredientAvailability]:
        return [IngredientAvailability(name=n, available=n in self) for n in names]


known_ingredients = KnownIngredients()
