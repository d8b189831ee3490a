"""SQLite database setup and CRUD operations.

Recipes, meal plans and grocery lists are stored as documents: scalar
columns for lookups, JSON columns for the nested parts (ingredients, days,
items).
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Generator

from smartplates.core.config import DB_PATH
from smartplates.models.meal_plan import DayPlan, MealPlan, MealPlanCreate
from smartplates.models.recipe import Recipe, RecipeCreate
from smartplates.shopping.grocery_list import GroceryItem, GroceryList, GroceryListOptions

_LOGGER = logging.getLogger(__name__)

SCHEMA = """
-- Recipes (user uploads + imported from Spoonacular)
CREATE TABLE IF NOT EXISTS recipes (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    source TEXT,
    source_url TEXT,
    external_id TEXT,
    servings INTEGER,
    ready_in_minutes INTEGER,
    ingredients TEXT,
    instructions TEXT,
    image_url TEXT,
    owner_id TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Weekly meal plans, days stored as JSON
CREATE TABLE IF NOT EXISTS meal_plans (
    id INTEGER PRIMARY KEY,
    owner_id TEXT NOT NULL,
    name TEXT NOT NULL,
    start_date DATE,
    days TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Generated grocery lists, items stored as JSON
CREATE TABLE IF NOT EXISTS grocery_lists (
    id INTEGER PRIMARY KEY,
    owner_id TEXT NOT NULL,
    meal_plan_id INTEGER REFERENCES meal_plans(id),
    name TEXT NOT NULL,
    items TEXT,
    options TEXT,
    total_estimated_cost REAL,
    created_at TIMESTAMP,
    updated_at TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_recipes_source ON recipes(source);
CREATE INDEX IF NOT EXISTS idx_meal_plans_owner ON meal_plans(owner_id);
CREATE INDEX IF NOT EXISTS idx_grocery_lists_owner ON grocery_lists(owner_id);
"""


def init_db() -> None:
    """Initialize the database with schema."""
    with get_connection() as conn:
        conn.executescript(SCHEMA)


@contextmanager
def get_connection() -> Generator[sqlite3.Connection, None, None]:
    """Get a database connection with row factory."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


# Recipe CRUD operations


def create_recipe(recipe: RecipeCreate) -> Recipe:
    """Create a new recipe."""
    created_at = datetime.now()
    with get_connection() as conn:
        cursor = conn.execute(
            """
            INSERT INTO recipes (title, source, source_url, external_id, servings, ready_in_minutes,
                                 ingredients, instructions, image_url, owner_id, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                recipe.title,
                recipe.source,
                recipe.source_url,
                recipe.external_id,
                recipe.servings,
                recipe.ready_in_minutes,
                json.dumps([ing.model_dump() for ing in recipe.ingredients]),
                recipe.instructions,
                recipe.image_url,
                recipe.owner_id,
                created_at.isoformat(),
            ),
        )
        return Recipe(
            id=cursor.lastrowid,
            created_at=created_at,
            **recipe.model_dump(),
        )


def get_recipe(recipe_id: int) -> Recipe | None:
    """Get a recipe by ID."""
    with get_connection() as conn:
        row = conn.execute("SELECT * FROM recipes WHERE id = ?", (recipe_id,)).fetchone()
        if row:
            return _row_to_recipe(row)
        return None


def get_recipes_by_ids(recipe_ids: list[int]) -> dict[int, Recipe]:
    """Get several recipes at once, keyed by ID. Missing IDs are absent."""
    if not recipe_ids:
        return {}

    placeholders = ", ".join("?" for _ in recipe_ids)
    with get_connection() as conn:
        rows = conn.execute(
            f"SELECT * FROM recipes WHERE id IN ({placeholders})",
            tuple(recipe_ids),
        ).fetchall()
        return {row["id"]: _row_to_recipe(row) for row in rows}


def get_all_recipes() -> list[Recipe]:
    """Get all recipes."""
    with get_connection() as conn:
        rows = conn.execute("SELECT * FROM recipes ORDER BY id").fetchall()
        return [_row_to_recipe(row) for row in rows]


def _row_to_recipe(row: sqlite3.Row) -> Recipe:
    """Convert a database row to a Recipe model."""
    ingredients = json.loads(row["ingredients"]) if row["ingredients"] else []
    return Recipe(
        id=row["id"],
        title=row["title"],
        source=row["source"],
        source_url=row["source_url"],
        external_id=row["external_id"],
        servings=row["servings"],
        ready_in_minutes=row["ready_in_minutes"],
        ingredients=ingredients,
        instructions=row["instructions"],
        image_url=row["image_url"],
        owner_id=row["owner_id"],
        created_at=row["created_at"],
    )


# MealPlan CRUD operations


def create_meal_plan(meal_plan: MealPlanCreate) -> MealPlan:
    """Create a new meal plan."""
    created_at = datetime.now()
    with get_connection() as conn:
        cursor = conn.execute(
            """
            INSERT INTO meal_plans (owner_id, name, start_date, days, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                meal_plan.owner_id,
                meal_plan.name,
                meal_plan.start_date.isoformat() if meal_plan.start_date else None,
                json.dumps([day.model_dump(mode="json") for day in meal_plan.days]),
                created_at.isoformat(),
            ),
        )
        return MealPlan(
            id=cursor.lastrowid,
            owner_id=meal_plan.owner_id,
            name=meal_plan.name,
            start_date=meal_plan.start_date,
            days=meal_plan.days,
            created_at=created_at,
        )


def get_meal_plan(plan_id: int) -> MealPlan | None:
    """Get a meal plan by ID."""
    with get_connection() as conn:
        row = conn.execute("SELECT * FROM meal_plans WHERE id = ?", (plan_id,)).fetchone()
        if row:
            return _row_to_meal_plan(row)
        return None


def _row_to_meal_plan(row: sqlite3.Row) -> MealPlan:
    """Convert a database row to a MealPlan model."""
    days = json.loads(row["days"]) if row["days"] else []
    return MealPlan(
        id=row["id"],
        owner_id=row["owner_id"],
        name=row["name"],
        start_date=row["start_date"],
        days=[DayPlan.model_validate(day) for day in days],
        created_at=row["created_at"],
    )


# GroceryList CRUD operations


def save_grocery_list(grocery_list: GroceryList) -> GroceryList:
    """Insert a generated grocery list and set its ID."""
    with get_connection() as conn:
        cursor = conn.execute(
            """
            INSERT INTO grocery_lists (owner_id, meal_plan_id, name, items, options,
                                       total_estimated_cost, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                grocery_list.owner_id,
                grocery_list.meal_plan_id,
                grocery_list.name,
                json.dumps([item.to_dict() for item in grocery_list.items], ensure_ascii=False),
                json.dumps(grocery_list.options.to_dict()),
                grocery_list.total_estimated_cost,
                grocery_list.created_at.isoformat(),
                grocery_list.updated_at.isoformat(),
            ),
        )
        grocery_list.id = cursor.lastrowid

    _LOGGER.info("Saved grocery list %s for owner %s", grocery_list.id, grocery_list.owner_id)
    return grocery_list


def get_grocery_list(grocery_list_id: int) -> GroceryList | None:
    """Get a grocery list by ID."""
    with get_connection() as conn:
        row = conn.execute(
            "SELECT * FROM grocery_lists WHERE id = ?", (grocery_list_id,)
        ).fetchone()
        if row:
            return _row_to_grocery_list(row)
        return None


def get_grocery_lists_by_owner(owner_id: str, page: int = 1, limit: int = 10) -> list[GroceryList]:
    """Get an owner's grocery lists, newest first.

    Args:
        owner_id: Owner of the lists
        page: Page number (1-based)
        limit: Number of results per page
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")

    with get_connection() as conn:
        rows = conn.execute(
            """
            SELECT * FROM grocery_lists
            WHERE owner_id = ?
            ORDER BY created_at DESC, id DESC
            LIMIT ? OFFSET ?
            """,
            (owner_id, limit, (page - 1) * limit),
        ).fetchall()
        return [_row_to_grocery_list(row) for row in rows]


def update_grocery_item_status(
    grocery_list_id: int,
    item_name: str,
    is_purchased: bool,
) -> GroceryList | None:
    """Mark one item purchased or not.

    Args:
        grocery_list_id: ID of the grocery list
        item_name: Exact display name of the item
        is_purchased: New purchase status

    Returns:
        The updated list, or None if the list or the item does not exist
    """
    with get_connection() as conn:
        row = conn.execute(
            "SELECT * FROM grocery_lists WHERE id = ?", (grocery_list_id,)
        ).fetchone()
        if row is None:
            return None

        grocery_list = _row_to_grocery_list(row)
        if not grocery_list.set_item_status(item_name, is_purchased):
            return None

        conn.execute(
            "UPDATE grocery_lists SET items = ?, updated_at = ? WHERE id = ?",
            (
                json.dumps([item.to_dict() for item in grocery_list.items], ensure_ascii=False),
                grocery_list.updated_at.isoformat(),
                grocery_list_id,
            ),
        )

    return grocery_list


def delete_grocery_list(grocery_list_id: int, owner_id: str) -> bool:
    """Delete a grocery list.

    Returns:
        True if deleted, False if not found or owned by someone else
    """
    with get_connection() as conn:
        cursor = conn.execute(
            "DELETE FROM grocery_lists WHERE id = ? AND owner_id = ?",
            (grocery_list_id, owner_id),
        )
        return cursor.rowcount > 0


def _row_to_grocery_list(row: sqlite3.Row) -> GroceryList:
    """Convert a database row to a GroceryList."""
    items = json.loads(row["items"]) if row["items"] else []
    options = json.loads(row["options"]) if row["options"] else {}
    return GroceryList(
        id=row["id"],
        owner_id=row["owner_id"],
        meal_plan_id=row["meal_plan_id"],
        name=row["name"],
        items=[GroceryItem.from_dict(item) for item in items],
        options=GroceryListOptions.from_dict(options),
        total_estimated_cost=row["total_estimated_cost"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )
