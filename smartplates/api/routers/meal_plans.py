"""Meal plan API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from smartplates.api.auth import verify_token
from smartplates.core.database import create_meal_plan, get_meal_plan
from smartplates.models.meal_plan import MealPlan, MealPlanCreate

router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])
_LOGGER = logging.getLogger(__name__)


@router.post("", response_model=MealPlan, status_code=status.HTTP_201_CREATED)
def create_meal_plan_endpoint(
    request: MealPlanCreate,
    _token: str = Depends(verify_token),
) -> MealPlan:
    """Store a weekly meal plan (up to seven days)."""
    plan = create_meal_plan(request)
    _LOGGER.info(
        "Meal plan created: id=%s owner=%s recipes=%s",
        plan.id,
        plan.owner_id,
        plan.recipe_ids(),
    )
    return plan


@router.get("/{plan_id}", response_model=MealPlan)
def get_meal_plan_endpoint(
    plan_id: int,
    _token: str = Depends(verify_token),
) -> MealPlan:
    """Get a meal plan by ID."""
    plan = get_meal_plan(plan_id)
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Meal plan with ID {plan_id} not found",
        )
    return plan
