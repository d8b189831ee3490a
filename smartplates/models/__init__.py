"""Pydantic models for recipes and meal plans."""

from smartplates.models.meal_plan import DayPlan, MealAssignment, MealPlan, MealPlanCreate, WeekDay
from smartplates.models.recipe import Recipe, RecipeCreate, RecipeIngredient

__all__ = [
    "DayPlan",
    "MealAssignment",
    "MealPlan",
    "MealPlanCreate",
    "Recipe",
    "RecipeCreate",
    "RecipeIngredient",
    "WeekDay",
]
