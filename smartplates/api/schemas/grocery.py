"""Pydantic schemas for grocery list endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from smartplates.shopping.grocery_list import GroceryList, GroceryListOptions


class GroceryListOptionsSchema(BaseModel):
    """Generation switches, all optional."""

    include_estimates: bool = False
    categorize_items: bool = True
    merge_similar_items: bool = True
    exclude_staples: bool = False

    def to_options(self) -> GroceryListOptions:
        return GroceryListOptions.from_dict(self.model_dump())


class GenerateGroceryListRequest(BaseModel):
    """Request to generate a grocery list from a stored meal plan."""

    meal_plan_id: int
    options: GroceryListOptionsSchema = Field(default_factory=GroceryListOptionsSchema)


class UpdateItemStatusRequest(BaseModel):
    """Request to mark an item purchased or not."""

    item_name: str = Field(..., min_length=1, description="Display name of the item")
    is_purchased: bool


class GroceryItemResponse(BaseModel):
    """A single grocery item."""

    name: str
    display_name: str
    quantity: float
    unit: str
    category: str
    estimated_cost: float | None = None
    is_purchased: bool = False
    recipes: list[str] = Field(default_factory=list)


class GroceryListResponse(BaseModel):
    """A generated grocery list."""

    id: int | None = None
    owner_id: str
    meal_plan_id: int | None = None
    name: str
    items: list[GroceryItemResponse] = Field(default_factory=list)
    categories: dict[str, list[GroceryItemResponse]] = Field(default_factory=dict)
    options: GroceryListOptionsSchema
    total_estimated_cost: float | None = None
    items_count: int
    purchased_count: int
    is_completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_grocery_list(cls, grocery_list: GroceryList) -> "GroceryListResponse":
        return cls.model_validate(grocery_list.to_dict())


class GroceryListPage(BaseModel):
    """One page of an owner's grocery lists."""

    owner_id: str
    page: int
    limit: int
    grocery_lists: list[GroceryListResponse] = Field(default_factory=list)
