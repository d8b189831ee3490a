"""Pydantic models for weekly meal plans."""

from collections.abc import Iterator
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class WeekDay(StrEnum):
    """Days of the week."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class MealAssignment(BaseModel):
    """A recipe assigned to a meal slot, with denormalized display fields."""

    recipe_id: int
    recipe_name: str = ""
    servings: int = Field(default=1, ge=1)
    notes: str | None = None


class DayPlan(BaseModel):
    """The meals of a single day."""

    day: WeekDay
    meal_date: date | None = None
    breakfast: MealAssignment | None = None
    lunch: MealAssignment | None = None
    dinner: MealAssignment | None = None
    snacks: list[MealAssignment] = Field(default_factory=list)

    def assignments(self) -> Iterator[tuple[str, MealAssignment]]:
        """Yield (slot, assignment) for every filled slot in meal order."""
        for slot in ("breakfast", "lunch", "dinner"):
            assignment = getattr(self, slot)
            if assignment is not None:
                yield slot, assignment
        for snack in self.snacks:
            yield "snacks", snack


class MealPlan(BaseModel):
    """A weekly meal plan owned by one user."""

    id: int | None = None
    owner_id: str
    name: str
    start_date: date | None = None
    days: list[DayPlan] = Field(default_factory=list, max_length=7)
    created_at: datetime | None = None

    class Config:
        from_attributes = True

    def recipe_ids(self) -> list[int]:
        """Unique recipe IDs referenced by the plan, in first-use order."""
        seen: dict[int, None] = {}
        for day in self.days:
            for _slot, assignment in day.assignments():
                seen.setdefault(assignment.recipe_id, None)
        return list(seen)


class MealPlanCreate(BaseModel):
    """Data required to create a new meal plan."""

    owner_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    start_date: date | None = None
    days: list[DayPlan] = Field(default_factory=list, max_length=7)
