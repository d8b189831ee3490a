"""Ingredient catalog, parsing and name normalization."""

from smartplates.ingredients.catalog import (
    DEFAULT_CATEGORY,
    INGREDIENT_CATALOG,
    GroceryCategory,
    IngredientInfo,
)
from smartplates.ingredients.normalizer import (
    estimate_ingredient_cost,
    find_ingredient,
    get_ingredient_category,
    is_staple_ingredient,
    normalize_ingredient_name,
)
from smartplates.ingredients.parser import ParsedIngredient, parse_ingredient

__all__ = [
    "DEFAULT_CATEGORY",
    "INGREDIENT_CATALOG",
    "GroceryCategory",
    "IngredientInfo",
    "ParsedIngredient",
    "estimate_ingredient_cost",
    "find_ingredient",
    "get_ingredient_category",
    "is_staple_ingredient",
    "normalize_ingredient_name",
    "parse_ingredient",
]
