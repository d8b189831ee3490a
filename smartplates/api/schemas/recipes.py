"""Pydantic schemas for recipe endpoints."""

from pydantic import BaseModel, Field

from smartplates.models.recipe import Recipe


class RecipeListResponse(BaseModel):
    """A list of recipes."""

    count: int
    recipes: list[Recipe] = Field(default_factory=list)


class RecipeSearchResponse(RecipeListResponse):
    """Search results with the query that produced them."""

    query: str
    difficulty: str | None = None
