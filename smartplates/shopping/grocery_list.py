"""Grocery list generation from a weekly meal plan.

This module aggregates ingredients from all recipes assigned in a meal plan
into a consolidated grocery list.

Key features:
- Groups by canonical ingredient name (aliases folded via the catalog)
- Aggregates quantities with the same unit
- Keeps different units separate (no unit conversion)
- Optional cost estimates, staple exclusion and category buckets
- Items keep the order in which they first appear in the plan

Example usage:
    >>> from smartplates.shopping import GroceryListOptions, generate_grocery_list
    >>> grocery_list = generate_grocery_list(plan, recipes_by_id)
    >>> print(grocery_list)
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from smartplates.ingredients.catalog import DEFAULT_CATEGORY, IngredientInfo
from smartplates.ingredients.normalizer import find_ingredient
from smartplates.models.meal_plan import MealAssignment, MealPlan
from smartplates.models.recipe import Recipe

_LOGGER = logging.getLogger(__name__)


def _flag(value: Any, default: bool) -> bool:
    """Read a stored boolean; "true"/"1"/"yes" strings count as true."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    if isinstance(value, int):
        return value != 0
    return default


@dataclass
class GroceryListOptions:
    """Switches for grocery list generation."""

    include_estimates: bool = False
    categorize_items: bool = True
    merge_similar_items: bool = True  # Fold aliases into the canonical name
    exclude_staples: bool = False

    def to_dict(self) -> dict:
        return {
            "include_estimates": self.include_estimates,
            "categorize_items": self.categorize_items,
            "merge_similar_items": self.merge_similar_items,
            "exclude_staples": self.exclude_staples,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "GroceryListOptions":
        """Build options from a dict; unknown keys are ignored, missing keys default."""
        data = data or {}
        defaults = cls()
        return cls(
            include_estimates=_flag(data.get("include_estimates"), defaults.include_estimates),
            categorize_items=_flag(data.get("categorize_items"), defaults.categorize_items),
            merge_similar_items=_flag(data.get("merge_similar_items"), defaults.merge_similar_items),
            exclude_staples=_flag(data.get("exclude_staples"), defaults.exclude_staples),
        )


@dataclass
class GroceryItem:
    """A single item on the grocery list."""

    name: str  # Grouping name (canonical if resolved)
    display_name: str  # Unique within a list
    quantity: float
    unit: str
    category: str
    estimated_cost: float | None = None
    is_purchased: bool = False
    recipes: list[str] = field(default_factory=list)  # Which recipes need this

    def __str__(self) -> str:
        quantity = f"{self.quantity:g}"
        if self.unit:
            return f"{quantity} {self.unit} {self.display_name}"
        return f"{quantity} {self.display_name}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "estimated_cost": self.estimated_cost,
            "is_purchased": self.is_purchased,
            "recipes": list(self.recipes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GroceryItem":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            display_name=data.get("display_name", data["name"]),
            quantity=data.get("quantity", 0.0),
            unit=data.get("unit", ""),
            category=data.get("category", str(DEFAULT_CATEGORY)),
            estimated_cost=data.get("estimated_cost"),
            is_purchased=data.get("is_purchased", False),
            recipes=list(data.get("recipes", [])),
        )


@dataclass
class GroceryList:
    """Aggregated grocery list generated from a meal plan."""

    owner_id: str
    meal_plan_id: int | None
    name: str
    items: list[GroceryItem] = field(default_factory=list)
    options: GroceryListOptions = field(default_factory=GroceryListOptions)
    categories: dict[str, list[GroceryItem]] = field(default_factory=dict)
    total_estimated_cost: float | None = None
    items_count: int = 0
    purchased_count: int = 0
    is_completed: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.refresh()

    def __str__(self) -> str:
        lines = [self.name, ""]
        for item in self.items:
            mark = "x" if item.is_purchased else " "
            lines.append(f"[{mark}] {item}")
        lines.append("")
        lines.append(f"({self.items_count} items, {self.purchased_count} purchased)")
        return "\n".join(lines)

    def refresh(self) -> None:
        """Recompute counters and category buckets from items."""
        self.items_count = len(self.items)
        self.purchased_count = sum(1 for item in self.items if item.is_purchased)
        self.is_completed = self.items_count > 0 and self.purchased_count == self.items_count
        self.categories = build_categories(self.items) if self.options.categorize_items else {}

    def find_item(self, display_name: str) -> GroceryItem | None:
        """Exact display-name lookup."""
        for item in self.items:
            if item.display_name == display_name:
                return item
        return None

    def set_item_status(self, display_name: str, is_purchased: bool) -> bool:
        """Mark an item purchased or not. Returns False if no such item."""
        item = self.find_item(display_name)
        if item is None:
            return False

        item.is_purchased = is_purchased
        self.updated_at = datetime.now()
        self.refresh()
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "meal_plan_id": self.meal_plan_id,
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
            "categories": {
                category: [item.to_dict() for item in items]
                for category, items in self.categories.items()
            },
            "options": self.options.to_dict(),
            "total_estimated_cost": self.total_estimated_cost,
            "items_count": self.items_count,
            "purchased_count": self.purchased_count,
            "is_completed": self.is_completed,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


def build_categories(items: list[GroceryItem]) -> dict[str, list[GroceryItem]]:
    """Bucket items by category, keeping list order inside each bucket."""
    categories: dict[str, list[GroceryItem]] = {}
    for item in items:
        categories.setdefault(item.category or str(DEFAULT_CATEGORY), []).append(item)
    return categories


def _scaling_factor(assignment: MealAssignment, recipe: Recipe) -> float:
    """Scale recipe quantities to the servings planned for the slot."""
    if recipe.servings and recipe.servings > 0 and assignment.servings > 0:
        return assignment.servings / recipe.servings
    return 1.0


def _unique_display_name(base: str, unit: str, taken: set[str]) -> str:
    if base not in taken:
        return base

    candidate = f"{base} ({unit})" if unit else f"{base} (no unit)"
    suffix = 2
    unique = candidate
    while unique in taken:
        unique = f"{candidate} #{suffix}"
        suffix += 1
    return unique


def generate_grocery_list(
    meal_plan: MealPlan,
    recipes: Mapping[int, Recipe],
    options: GroceryListOptions | None = None,
) -> GroceryList:
    """Generate a grocery list from a meal plan.

    Walks every day and meal slot of the plan, resolves each ingredient
    through the catalog and merges quantities of the same ingredient that
    share a unit. Amounts are scaled from the recipe's servings to the
    servings planned for the slot.

    Args:
        meal_plan: The plan to shop for
        recipes: Recipes referenced by the plan, keyed by recipe ID
        options: Generation switches (defaults if None)

    Returns:
        GroceryList with aggregated items
    """
    options = options or GroceryListOptions()

    # {(group name, unit key): aggregation state}, in first-seen order
    aggregated: dict[tuple[str, str], dict] = {}

    for day in meal_plan.days:
        for slot, assignment in day.assignments():
            recipe = recipes.get(assignment.recipe_id)
            if recipe is None:
                _LOGGER.warning(
                    "Recipe %s for %s %s not loaded, skipping",
                    assignment.recipe_id,
                    day.day,
                    slot,
                )
                continue

            factor = _scaling_factor(assignment, recipe)
            recipe_label = recipe.title or assignment.recipe_name

            for ingredient in recipe.ingredients:
                raw_name = " ".join((ingredient.name or "").lower().split())
                if not raw_name:
                    _LOGGER.warning("Blank ingredient name in recipe %s, skipping", recipe.id)
                    continue

                info = find_ingredient(raw_name)

                if options.exclude_staples and info is not None and info.is_staple:
                    continue

                if info is not None and options.merge_similar_items:
                    group_name = info.name
                else:
                    group_name = raw_name

                unit = ingredient.unit.strip()
                key = (group_name, unit.lower())

                entry = aggregated.get(key)
                if entry is None:
                    entry = {
                        "quantity": 0.0,
                        "unit": unit,
                        "info": info,
                        "recipes": [],
                    }
                    aggregated[key] = entry

                entry["quantity"] += ingredient.amount * factor
                if recipe_label not in entry["recipes"]:
                    entry["recipes"].append(recipe_label)

    items: list[GroceryItem] = []
    taken: set[str] = set()
    total_cost = 0.0

    for (group_name, _unit_key), data in aggregated.items():
        info: IngredientInfo | None = data["info"]
        quantity = round(data["quantity"], 2)

        if info is not None and group_name == info.name:
            base_display = info.display_name
        else:
            base_display = group_name

        display_name = _unique_display_name(base_display, data["unit"], taken)
        taken.add(display_name)

        estimated_cost = None
        if options.include_estimates and info is not None and info.estimated_cost_per_unit is not None:
            estimated_cost = round(quantity * info.estimated_cost_per_unit, 2)
            total_cost += estimated_cost

        items.append(
            GroceryItem(
                name=group_name,
                display_name=display_name,
                quantity=quantity,
                unit=data["unit"],
                category=str(info.category if info is not None else DEFAULT_CATEGORY),
                estimated_cost=estimated_cost,
                recipes=data["recipes"],
            )
        )

    grocery_list = GroceryList(
        owner_id=meal_plan.owner_id,
        meal_plan_id=meal_plan.id,
        name=f"Grocery List for {meal_plan.name}",
        items=items,
        options=options,
        total_estimated_cost=round(total_cost, 2) if options.include_estimates else None,
    )

    _LOGGER.info(
        "Grocery list generated: meal_plan=%s items=%s categories=%s",
        meal_plan.id,
        grocery_list.items_count,
        len(grocery_list.categories),
    )
    return grocery_list
