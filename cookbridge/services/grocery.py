# cookbridge/services/grocery.py
from __future__ import annotations

import logging
from collections.abc import Iterable as IterableABC
from fractions import Fraction
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Union

from cookbridge.core.errors import InvalidInput
from cookbridge.models.grocery import (
    CategoryTag,
    ChecklistItem,
    ChecklistSection,
    ContributingRecipe,
    GroceryList,
    GrocerySummary,
    IngredientAvailability,
    IngredientEntry,
    RecipeRef,
    RecipeSummary,
    ShoppingListFormats,
)
from cookbridge.services.grocery_estimates import categorize, estimate_cost, estimate_quantity
from cookbridge.services.known_ingredients import KnownIngredients, known_ingredients
from cookbridge.services.recipe_lookup import RecipeSource

log = logging.getLogger("cookbridge.grocery")

RecipeIds = Union[int, Sequence[int]]


def _as_id_list(recipe_ids: RecipeIds) -> List[int]:
    if isinstance(recipe_ids, bool):
        raise InvalidInput("Recipe ID must be a positive integer")
    if isinstance(recipe_ids, int):
        recipe_ids = [recipe_ids]
    if isinstance(recipe_ids, (str, bytes)) or not isinstance(recipe_ids, IterableABC):
        raise InvalidInput("Recipe IDs must be an integer or a list of integers")

    ids = list(recipe_ids)
    if not ids:
        raise InvalidInput("Array of recipe IDs is required")

    bad = [i for i in ids if isinstance(i, bool) or not isinstance(i, int) or i <= 0]
    if bad:
        raise InvalidInput("All recipe IDs must be valid positive numbers", {"invalid": [str(b) for b in bad]})
    return ids


def _exclusion_set(exclude_ingredients: Optional[Iterable[str]]) -> FrozenSet[str]:
    if exclude_ingredients is None:
        return frozenset()
    if isinstance(exclude_ingredients, (str, bytes)):
        raise InvalidInput("excludeIngredients must be a list of ingredient names")
    names = list(exclude_ingredients)
    if any(not isinstance(n, str) for n in names):
        raise InvalidInput("excludeIngredients must contain only strings")
    return frozenset(n.strip().lower() for n in names if n.strip())


async def _aggregate(
    recipe_ids: List[int],
    *,
    lookup: RecipeSource,
    servings_for: Callable[[RecipeRef], Optional[int]],
    excluded: FrozenSet[str],
) -> GroceryList:
    recipes: List[RecipeSummary] = []
    ingredients: Dict[str, IngredientEntry] = {}
    estimated_time = 0

    # Sequential on purpose: the first recipe to introduce an ingredient fixes its quantity
    for recipe_id in recipe_ids:
        recipe = await lookup.get_recipe_by_id(recipe_id)
        target = servings_for(recipe)

        recipes.append(
            RecipeSummary(
                id=recipe.id,
                name=recipe.name,
                servings=target or recipe.servings,
                cooking_time=recipe.cooking_time,
            )
        )
        estimated_time += recipe.cooking_time

        multiplier = Fraction(target, recipe.servings) if target else Fraction(1)

        for name in recipe.ingredients:
            if name.strip().lower() in excluded:
                continue

            entry = ingredients.get(name)
            if entry is None:
                qty = estimate_quantity(name, multiplier)
                entry = IngredientEntry(
                    name=name,
                    quantity=qty.amount,
                    unit=qty.unit,
                    category=categorize(name),
                    notes=qty.notes,
                )
                ingredients[name] = entry

            if all(c.recipe_id != recipe.id for c in entry.contributing_recipes):
                entry.contributing_recipes.append(
                    ContributingRecipe(recipe_id=recipe.id, recipe_name=recipe.name)
                )

    categorized: Dict[CategoryTag, List[IngredientEntry]] = {}
    for entry in ingredients.values():
        categorized.setdefault(entry.category, []).append(entry)
    for bucket in categorized.values():
        bucket.sort(key=lambda e: e.name.lower())

    summary = GrocerySummary(
        total_recipes=len(recipes),
        total_ingredients=len(ingredients),
        estimated_cost=estimate_cost(ingredients.keys()),
        estimated_time=estimated_time,
    )

    log.info(
        "grocery list generated",
        extra={
            "recipe_ids": recipe_ids,
            "total_ingredients": summary.total_ingredients,
            "estimated_cost": summary.estimated_cost,
        },
    )

    return GroceryList(
        recipes=recipes,
        ingredients=ingredients,
        categorized_ingredients=categorized,
        summary=summary,
    )


async def generate_grocery_list(
    recipe_ids: RecipeIds,
    *,
    lookup: RecipeSource,
    servings: Optional[int] = None,
    exclude_ingredients: Optional[Iterable[str]] = None,
) -> GroceryList:
    ids = _as_id_list(recipe_ids)
    if servings is not None and servings <= 0:
        raise InvalidInput("Servings must be a positive number")

    log.info("generating grocery list", extra={"recipe_ids": ids, "servings": servings})
    return await _aggregate(
        ids,
        lookup=lookup,
        servings_for=lambda _recipe: servings,
        excluded=_exclusion_set(exclude_ingredients),
    )


async def generate_multiple_grocery_list(
    recipe_ids: Sequence[int],
    servings_by_recipe_id: Optional[Mapping[int, int]] = None,
    *,
    lookup: RecipeSource,
    exclude_ingredients: Optional[Iterable[str]] = None,
) -> GroceryList:
    """Same as generate_grocery_list, but servings are overridden per recipe id."""
    ids = _as_id_list(recipe_ids)
    overrides = dict(servings_by_recipe_id or {})
    bad = {k: v for k, v in overrides.items() if not isinstance(v, int) or v <= 0}
    if bad:
        raise InvalidInput("Servings must be positive numbers", {"invalid": {str(k): str(v) for k, v in bad.items()}})

    log.info("generating combined grocery list", extra={"recipe_ids": ids, "servings": overrides})
    return await _aggregate(
        ids,
        lookup=lookup,
        servings_for=lambda recipe: overrides.get(recipe.id),
        excluded=_exclusion_set(exclude_ingredients),
    )


async def generate_grocery_list_by_category(
    recipe_id: int,
    *,
    lookup: RecipeSource,
    servings: Optional[int] = None,
) -> Dict[CategoryTag, List[IngredientEntry]]:
    grocery_list = await generate_grocery_list(recipe_id, lookup=lookup, servings=servings)
    return grocery_list.categorized_ingredients


def check_ingredient_availability(
    names: Sequence[str],
    reference: KnownIngredients = known_ingredients,
) -> List[IngredientAvailability]:
    if isinstance(names, (str, bytes)) or not names:
        raise InvalidInput("Array of ingredients is required")
    return reference.check(names)


def _line(entry: IngredientEntry) -> str:
    return f"{entry.quantity} {entry.unit} {entry.name}"


def to_simple_list(grocery_list: GroceryList) -> List[str]:
    return [_line(e) for e in grocery_list.ingredients.values()]


def to_checklist(grocery_list: GroceryList) -> List[ChecklistSection]:
    sections: List[ChecklistSection] = []
    for category, entries in grocery_list.categorized_ingredients.items():
        label = CategoryTag(category).value
        sections.append(
            ChecklistSection(
                category=label[:1].upper() + label[1:],
                items=[ChecklistItem(name=_line(e), checked=False, notes=e.notes) for e in entries],
            )
        )
    return sections


async def get_shopping_list_formats(
    recipe_ids: RecipeIds,
    *,
    lookup: RecipeSource,
    servings: Optional[int] = None,
    exclude_ingredients: Optional[Iterable[str]] = None,
) -> ShoppingListFormats:
    grocery_list = await generate_grocery_list(
        recipe_ids,
        lookup=lookup,
        servings=servings,
        exclude_ingredients=exclude_ingredients,
    )
    return ShoppingListFormats(
        detailed=grocery_list,
        simple=to_simple_list(grocery_list),
        checklist=to_checklist(grocery_list),
        category_organized=grocery_list.categorized_ingredients,
    )
