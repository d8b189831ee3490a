"""
Pytest configuration and shared fixtures.

Fixtures are reusable test setup that can be injected into tests.
"""

import shutil
import tempfile
from datetime import date
from pathlib import Path

import pytest

from smartplates.models.meal_plan import DayPlan, MealAssignment, MealPlan, WeekDay
from smartplates.models.recipe import Recipe, RecipeIngredient


@pytest.fixture
def temp_db_dir():
    """
    Create a temporary database directory for testing.

    This fixture is automatically cleaned up after each test.
    """
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def db(temp_db_dir, monkeypatch):
    """
    Point the database module at a fresh SQLite file and create the schema.

    Usage in tests:
        def test_something(db):
            db.create_recipe(...)
    """
    from smartplates.core import database

    monkeypatch.setattr(database, "DB_PATH", temp_db_dir / "local" / "test.db")
    database.init_db()
    return database


@pytest.fixture
def pasta_recipe():
    """Pasta for two."""
    return Recipe(
        id=1,
        title="Tomato Pasta",
        servings=2,
        ready_in_minutes=20,
        ingredients=[
            RecipeIngredient(name="spaghetti", amount=200, unit="g"),
            RecipeIngredient(name="tomatoes", amount=3, unit="pcs"),
            RecipeIngredient(name="onion", amount=1, unit="pcs"),
            RecipeIngredient(name="olive oil", amount=2, unit="tbsp"),
            RecipeIngredient(name="salt", amount=1, unit="tsp"),
        ],
    )


@pytest.fixture
def soup_recipe():
    """Soup for four."""
    return Recipe(
        id=2,
        title="Chicken Soup",
        servings=4,
        ready_in_minutes=45,
        ingredients=[
            RecipeIngredient(name="chicken breast", amount=400, unit="g"),
            RecipeIngredient(name="Onions", amount=2, unit="pcs"),
            RecipeIngredient(name="carrots", amount=2, unit="pcs"),
            RecipeIngredient(name="chicken broth", amount=1000, unit="ml"),
            RecipeIngredient(name="black pepper", amount=0.5, unit="tsp"),
        ],
    )


@pytest.fixture
def salad_recipe():
    """Quick salad for one, with an ingredient the catalog does not know."""
    return Recipe(
        id=3,
        title="Quick Salad",
        servings=1,
        ready_in_minutes=10,
        ingredients=[
            RecipeIngredient(name="lettuce", amount=1, unit="pcs"),
            RecipeIngredient(name="dragon fruit", amount=1, unit=""),
            RecipeIngredient(name="olive oil", amount=1, unit="tbsp"),
        ],
    )


@pytest.fixture
def sample_recipes(pasta_recipe, soup_recipe, salad_recipe):
    """Recipes keyed by ID, as generate_grocery_list expects them."""
    return {r.id: r for r in (pasta_recipe, soup_recipe, salad_recipe)}


@pytest.fixture
def sample_meal_plan():
    """Two days: pasta and soup on Monday, soup for two on Tuesday."""
    return MealPlan(
        id=10,
        owner_id="user-1",
        name="Week 42",
        start_date=date(2026, 10, 12),
        days=[
            DayPlan(
                day=WeekDay.MONDAY,
                lunch=MealAssignment(recipe_id=1, recipe_name="Tomato Pasta", servings=2),
                dinner=MealAssignment(recipe_id=2, recipe_name="Chicken Soup", servings=4),
            ),
            DayPlan(
                day=WeekDay.TUESDAY,
                dinner=MealAssignment(recipe_id=2, recipe_name="Chicken Soup", servings=2),
            ),
        ],
    )
