# cookbridge/routers/grocery.py
from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query

from cookbridge.clients.ollama import ollama
from cookbridge.core import config
from cookbridge.models.grocery import (
    AvailabilityRequest,
    CategoryTag,
    Envelope,
    GroceryList,
    IngredientAvailability,
    IngredientEntry,
    MultipleGroceryListRequest,
    ShoppingListFormats,
)
from cookbridge.services import grocery
from cookbridge.services.recipe_lookup import RecipeLookup, RecipeSource

router = APIRouter(prefix="/api/grocery-list", tags=["grocery"])


def get_recipe_lookup() -> RecipeSource:
    return RecipeLookup(ollama)


@router.get("", response_model=Envelope[GroceryList])
async def grocery_list(
    recipe_id: List[int] = Query(alias="recipeId", min_length=1, max_length=config.MAX_RECIPES_PER_LIST),
    servings: Optional[int] = Query(default=None, ge=1, le=config.MAX_SERVINGS),
    exclude: Optional[List[str]] = Query(default=None, alias="excludeIngredients"),
    lookup: RecipeSource = Depends(get_recipe_lookup),
) -> Envelope[GroceryList]:
    data = await grocery.generate_grocery_list(
        recipe_id,
        lookup=lookup,
        servings=servings,
        exclude_ingredients=exclude,
    )
    return Envelope(data=data, message="Grocery list generated successfully")


@router.get("/formats", response_model=Envelope[ShoppingListFormats])
async def grocery_list_formats(
    recipe_id: List[int] = Query(alias="recipeId", min_length=1, max_length=config.MAX_RECIPES_PER_LIST),
    servings: Optional[int] = Query(default=None, ge=1, le=config.MAX_SERVINGS),
    exclude: Optional[List[str]] = Query(default=None, alias="excludeIngredients"),
    lookup: RecipeSource = Depends(get_recipe_lookup),
) -> Envelope[ShoppingListFormats]:
    data = await grocery.get_shopping_list_formats(
        recipe_id,
        lookup=lookup,
        servings=servings,
        exclude_ingredients=exclude,
    )
    return Envelope(data=data, message="Shopping list formats generated successfully")


@router.post("/multiple", response_model=Envelope[GroceryList])
async def multiple_grocery_list(
    req: MultipleGroceryListRequest,
    lookup: RecipeSource = Depends(get_recipe_lookup),
) -> Envelope[GroceryList]:
    data = await grocery.generate_multiple_grocery_list(
        req.recipe_ids,
        req.servings,
        lookup=lookup,
        exclude_ingredients=req.exclude_ingredients,
    )
    return Envelope(data=data, message="Combined grocery list generated successfully")


@router.post("/check-availability", response_model=Envelope[List[IngredientAvailability]])
def check_availability(req: AvailabilityRequest) -> Envelope[List[IngredientAvailability]]:
    data = grocery.check_ingredient_availability(req.ingredients)
    return Envelope(data=data, message="Ingredient availability checked successfully")


@router.get("/{recipe_id}/by-category", response_model=Envelope[Dict[CategoryTag, List[IngredientEntry]]])
async def grocery_list_by_category(
    recipe_id: int = Path(gt=0),
    servings: Optional[int] = Query(default=None, ge=1, le=config.MAX_SERVINGS),
    lookup: RecipeSource = Depends(get_recipe_lookup),
) -> Envelope[Dict[CategoryTag, List[IngredientEntry]]]:
    data = await grocery.generate_grocery_list_by_category(recipe_id, lookup=lookup, servings=servings)
    return Envelope(data=data, message="Categorized grocery list generated successfully")
