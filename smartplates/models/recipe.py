"""Pydantic models for recipes."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from smartplates.ingredients.parser import parse_ingredient


class RecipeIngredient(BaseModel):
    """A single ingredient line of a recipe."""

    name: str = Field(..., min_length=1)
    amount: float = 1.0
    unit: str = ""
    original_name: str | None = Field(
        default=None, description="Ingredient text as written in the source recipe"
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


def coerce_ingredient_lines(value):
    """Accept plain ingredient lines ("200 g flour") next to structured entries."""
    if not isinstance(value, list):
        return value

    coerced = []
    for item in value:
        if isinstance(item, str):
            parsed = parse_ingredient(item)
            coerced.append(
                {
                    "name": parsed.name,
                    "amount": parsed.amount,
                    "unit": parsed.unit,
                    "original_name": parsed.original,
                }
            )
        else:
            coerced.append(item)
    return coerced


class Recipe(BaseModel):
    """A recipe with ingredients and instructions."""

    id: int | None = None
    title: str
    source: str = Field(default="user", description="Origin: 'user', 'spoonacular', etc.")
    source_url: str | None = None
    external_id: str | None = Field(default=None, description="ID at the upstream API")
    servings: int | None = None
    ready_in_minutes: int | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: str | None = None
    image_url: str | None = None
    owner_id: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True

    @field_validator("ingredients", mode="before")
    @classmethod
    def parse_ingredient_lines(cls, value):
        return coerce_ingredient_lines(value)


class RecipeCreate(BaseModel):
    """Data required to create a new recipe."""

    title: str = Field(..., min_length=1)
    source: str = "user"
    source_url: str | None = None
    external_id: str | None = None
    servings: int | None = Field(default=None, ge=1)
    ready_in_minutes: int | None = Field(default=None, ge=0)
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: str | None = None
    image_url: str | None = None
    owner_id: str | None = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def parse_ingredient_lines(cls, value):
        return coerce_ingredient_lines(value)
