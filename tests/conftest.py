from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pytest

from cookbridge.core.errors import RecipeNotFound
from cookbridge.models.grocery import RecipeRef


class FakeRecipeLookup:
    """In-memory stand-in for the LLM-backed lookup; records the ids it was asked for."""

    def __init__(self, recipes: Iterable[RecipeRef]):
        self.recipes: Dict[int, RecipeRef] = {r.id: r for r in recipes}
        self.calls: List[int] = []

    async def get_recipe_by_id(self, recipe_id: int) -> RecipeRef:
        self.calls.append(recipe_id)
        if recipe_id not in self.recipes:
            raise RecipeNotFound(recipe_id)
        return self.recipes[recipe_id]


def recipe(id: int, name: str, servings: int, cooking_time: int, *ingredients: str) -> RecipeRef:
    return RecipeRef(id=id, name=name, servings=servings, cooking_time=cooking_time, ingredients=list(ingredients))


@pytest.fixture
def omelet() -> RecipeRef:
    return recipe(1, "Omelet", 2, 10, "eggs", "cheese", "butter")


@pytest.fixture
def toast() -> RecipeRef:
    return recipe(2, "Toast", 1, 5, "bread", "butter")


@pytest.fixture
def make_lookup() -> Callable[..., FakeRecipeLookup]:
    return lambda *recipes: FakeRecipeLookup(recipes)


@pytest.fixture
def lookup(omelet: RecipeRef, toast: RecipeRef) -> FakeRecipeLookup:
    return FakeRecipeLookup([omelet, toast])
