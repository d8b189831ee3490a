"""Grocery list API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from smartplates.api.auth import verify_token
from smartplates.api.schemas.grocery import (
    GenerateGroceryListRequest,
    GroceryListPage,
    GroceryListResponse,
    UpdateItemStatusRequest,
)
from smartplates.core.database import (
    delete_grocery_list,
    get_grocery_list,
    get_grocery_lists_by_owner,
    get_meal_plan,
    get_recipes_by_ids,
    save_grocery_list,
    update_grocery_item_status,
)
from smartplates.shopping.export import export_grocery_list_as_text
from smartplates.shopping.grocery_list import GroceryList, generate_grocery_list

router = APIRouter(prefix="/api/grocery-lists", tags=["grocery-lists"])
_LOGGER = logging.getLogger(__name__)


def _get_or_404(grocery_list_id: int) -> GroceryList:
    grocery_list = get_grocery_list(grocery_list_id)
    if grocery_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Grocery list with ID {grocery_list_id} not found",
        )
    return grocery_list


@router.post("", response_model=GroceryListResponse, status_code=status.HTTP_201_CREATED)
def generate_grocery_list_endpoint(
    request: GenerateGroceryListRequest,
    _token: str = Depends(verify_token),
) -> GroceryListResponse:
    """Generate and store a grocery list from a meal plan.

    Returns 404 if the meal plan does not exist.
    """
    plan = get_meal_plan(request.meal_plan_id)
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Meal plan with ID {request.meal_plan_id} not found",
        )

    recipes = get_recipes_by_ids(plan.recipe_ids())
    _LOGGER.info(
        "Grocery list request: meal_plan=%s recipes=%s",
        plan.id,
        sorted(recipes),
    )
    grocery_list = generate_grocery_list(plan, recipes, request.options.to_options())
    grocery_list = save_grocery_list(grocery_list)
    return GroceryListResponse.from_grocery_list(grocery_list)


@router.get("", response_model=GroceryListPage)
def list_grocery_lists(
    owner_id: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    _token: str = Depends(verify_token),
) -> GroceryListPage:
    """List an owner's grocery lists, newest first."""
    grocery_lists = get_grocery_lists_by_owner(owner_id, page=page, limit=limit)
    return GroceryListPage(
        owner_id=owner_id,
        page=page,
        limit=limit,
        grocery_lists=[GroceryListResponse.from_grocery_list(gl) for gl in grocery_lists],
    )


@router.get("/{grocery_list_id}", response_model=GroceryListResponse)
def get_grocery_list_endpoint(
    grocery_list_id: int,
    _token: str = Depends(verify_token),
) -> GroceryListResponse:
    """Get a grocery list by ID."""
    return GroceryListResponse.from_grocery_list(_get_or_404(grocery_list_id))


@router.patch("/{grocery_list_id}/items", response_model=GroceryListResponse)
def update_item_status_endpoint(
    grocery_list_id: int,
    request: UpdateItemStatusRequest,
    _token: str = Depends(verify_token),
) -> GroceryListResponse:
    """Mark an item purchased or not, by exact display name.

    Returns 404 if the list or the item does not exist.
    """
    _get_or_404(grocery_list_id)

    grocery_list = update_grocery_item_status(
        grocery_list_id, request.item_name, request.is_purchased
    )
    if grocery_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item '{request.item_name}' not found in grocery list {grocery_list_id}",
        )

    _LOGGER.info(
        "Grocery item updated: list=%s item=%r purchased=%s",
        grocery_list_id,
        request.item_name,
        request.is_purchased,
    )
    return GroceryListResponse.from_grocery_list(grocery_list)


@router.delete("/{grocery_list_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_grocery_list_endpoint(
    grocery_list_id: int,
    owner_id: str = Query(..., min_length=1),
    _token: str = Depends(verify_token),
) -> None:
    """Delete a grocery list owned by owner_id."""
    if not delete_grocery_list(grocery_list_id, owner_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Grocery list with ID {grocery_list_id} not found",
        )


@router.get("/{grocery_list_id}/export", response_model=None)
def export_grocery_list_endpoint(
    grocery_list_id: int,
    format: str = Query("text", pattern="^(text|json)$"),
    include_costs: bool = False,
    group_by_category: bool = False,
    _token: str = Depends(verify_token),
) -> PlainTextResponse | dict:
    """Export a grocery list as a text checklist or as JSON."""
    grocery_list = _get_or_404(grocery_list_id)

    if format == "json":
        return grocery_list.to_dict()

    text = export_grocery_list_as_text(
        grocery_list,
        include_costs=include_costs,
        group_by_category=group_by_category,
    )
    return PlainTextResponse(
        text,
        headers={
            "Content-Disposition": f'attachment; filename="grocery-list-{grocery_list_id}.txt"'
        },
    )
