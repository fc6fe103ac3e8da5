# cookbridge/models/grocery.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from cookbridge.core import config

DataT = TypeVar("DataT")

RecipeId = Annotated[int, Field(gt=0)]
Servings = Annotated[int, Field(gt=0, le=config.MAX_SERVINGS)]


class CamelModel(BaseModel):
    # Python side is snake_case, JSON side is camelCase
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class CategoryTag(str, Enum):
    produce = "produce"
    dairy = "dairy"
    protein = "protein"
    pantry = "pantry"
    bread = "bread"
    condiments = "condiments"
    other = "other"


class RecipeRef(CamelModel):
    id: int = Field(gt=0)
    name: str
    servings: int = Field(gt=0)
    cooking_time: int = Field(default=0, ge=0)
    ingredients: List[str] = Field(default_factory=list)


class RecipeSummary(CamelModel):
    id: int
    name: str
    servings: int
    cooking_time: int


class ContributingRecipe(CamelModel):
    recipe_id: int
    recipe_name: str


class IngredientEntry(CamelModel):
    name: str
    quantity: int
    unit: str
    category: CategoryTag
    notes: str
    contributing_recipes: List[ContributingRecipe] = Field(default_factory=list)


class GrocerySummary(CamelModel):
    total_recipes: int = 0
    total_ingredients: int = 0
    estimated_cost: float = 0.0
    estimated_time: int = 0


class GroceryList(CamelModel):
    recipes: List[RecipeSummary] = Field(default_factory=list)
    ingredients: Dict[str, IngredientEntry] = Field(default_factory=dict)
    categorized_ingredients: Dict[CategoryTag, List[IngredientEntry]] = Field(default_factory=dict)
    summary: GrocerySummary = Field(default_factory=GrocerySummary)


class ChecklistItem(CamelModel):
    name: str
    checked: bool = False
    notes: str = ""


class ChecklistSection(CamelModel):
    category: str
    items: List[ChecklistItem] = Field(default_factory=list)


class ShoppingListFormats(CamelModel):
    detailed: GroceryList
    simple: List[str]
    checklist: List[ChecklistSection]
    category_organized: Dict[CategoryTag, List[IngredientEntry]]


class IngredientAvailability(CamelModel):
    name: str
    available: bool


# --- Request bodies ---


class MultipleGroceryListRequest(CamelModel):
    recipe_ids: List[RecipeId] = Field(min_length=1, max_length=config.MAX_RECIPES_PER_LIST)
    # JSON object keys arrive as strings; pydantic coerces them to int
    servings: Dict[RecipeId, Servings] = Field(default_factory=dict)
    exclude_ingredients: List[str] = Field(default_factory=list)


class AvailabilityRequest(CamelModel):
    ingredients: List[str] = Field(min_length=1)


class Envelope(CamelModel, Generic[DataT]):
    success: bool = True
    data: DataT
    message: Optional[str] = None
