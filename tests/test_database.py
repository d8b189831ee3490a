"""Tests for SQLite persistence."""

from datetime import date, datetime, timedelta

import pytest

from smartplates.models.meal_plan import DayPlan, MealAssignment, MealPlanCreate, WeekDay
from smartplates.models.recipe import RecipeCreate
from smartplates.shopping.grocery_list import GroceryListOptions, generate_grocery_list


@pytest.fixture
def stored_recipes(db):
    pasta = db.create_recipe(
        RecipeCreate(
            title="Tomato Pasta",
            servings=2,
            ready_in_minutes=20,
            ingredients=["200 g spaghetti", "3 tomatoes", "1 onion", "1 tsp salt"],
        )
    )
    soup = db.create_recipe(
        RecipeCreate(
            title="Onion Soup",
            servings=4,
            ingredients=[
                {"name": "onions", "amount": 4, "unit": "pcs"},
                {"name": "butter", "amount": 30, "unit": "g"},
            ],
        )
    )
    return pasta, soup


@pytest.fixture
def stored_plan(db, stored_recipes):
    pasta, soup = stored_recipes
    return db.create_meal_plan(
        MealPlanCreate(
            owner_id="user-1",
            name="Week 42",
            start_date=date(2026, 10, 12),
            days=[
                DayPlan(
                    day=WeekDay.MONDAY,
                    meal_date=date(2026, 10, 12),
                    lunch=MealAssignment(recipe_id=pasta.id, recipe_name=pasta.title, servings=2),
                    dinner=MealAssignment(recipe_id=soup.id, recipe_name=soup.title, servings=4),
                ),
            ],
        )
    )


@pytest.fixture
def stored_list(db, stored_plan):
    recipes = db.get_recipes_by_ids(stored_plan.recipe_ids())
    grocery_list = generate_grocery_list(stored_plan, recipes)
    return db.save_grocery_list(grocery_list)


class TestRecipes:
    def test_create_and_get(self, db, stored_recipes):
        pasta, _soup = stored_recipes
        loaded = db.get_recipe(pasta.id)

        assert loaded.title == "Tomato Pasta"
        assert loaded.source == "user"
        assert [(i.name, i.amount, i.unit) for i in loaded.ingredients] == [
            ("spaghetti", 200.0, "g"),
            ("tomatoes", 3.0, ""),
            ("onion", 1.0, ""),
            ("salt", 1.0, "tsp"),
        ]
        assert loaded.ingredients[0].original_name == "200 g spaghetti"

    def test_get_missing(self, db):
        assert db.get_recipe(999) is None

    def test_get_all(self, db, stored_recipes):
        assert [r.title for r in db.get_all_recipes()] == ["Tomato Pasta", "Onion Soup"]

    def test_get_by_ids(self, db, stored_recipes):
        pasta, soup = stored_recipes
        recipes = db.get_recipes_by_ids([soup.id, 999, pasta.id])

        assert set(recipes) == {pasta.id, soup.id}
        assert recipes[soup.id].title == "Onion Soup"
        assert db.get_recipes_by_ids([]) == {}


class TestMealPlans:
    def test_round_trip(self, db, stored_plan):
        loaded = db.get_meal_plan(stored_plan.id)

        assert loaded.owner_id == "user-1"
        assert loaded.start_date == date(2026, 10, 12)
        assert loaded.days[0].day == WeekDay.MONDAY
        assert loaded.days[0].meal_date == date(2026, 10, 12)
        assert loaded.days[0].dinner.servings == 4
        assert loaded.recipe_ids() == stored_plan.recipe_ids()

    def test_get_missing(self, db):
        assert db.get_meal_plan(999) is None


class TestGroceryLists:
    def test_save_assigns_id(self, stored_list):
        assert stored_list.id is not None

    def test_round_trip(self, db, stored_list):
        loaded = db.get_grocery_list(stored_list.id)

        assert loaded.name == "Grocery List for Week 42"
        assert loaded.owner_id == "user-1"
        assert [i.display_name for i in loaded.items] == [i.display_name for i in stored_list.items]
        assert loaded.find_item("Onion").quantity == 1
        assert loaded.find_item("Onion (pcs)").quantity == 4
        assert loaded.options == GroceryListOptions()
        assert "Produce" in loaded.categories

    def test_unit_separated_onions(self, db, stored_list):
        # "1 onion" parses without unit, the soup lists onions in pcs
        names = [i.display_name for i in stored_list.items]
        assert "Onion" in names
        assert "Onion (pcs)" in names

    def test_toggle_purchased_round_trip(self, db, stored_list):
        updated = db.update_grocery_item_status(stored_list.id, "Onion", True)
        assert updated.find_item("Onion").is_purchased is True
        assert updated.purchased_count == 1

        reloaded = db.get_grocery_list(stored_list.id)
        assert reloaded.find_item("Onion").is_purchased is True
        assert reloaded.purchased_count == 1

        db.update_grocery_item_status(stored_list.id, "Onion", False)
        assert db.get_grocery_list(stored_list.id).purchased_count == 0

    def test_toggle_unknown_item_or_list(self, db, stored_list):
        assert db.update_grocery_item_status(stored_list.id, "Dragon Fruit", True) is None
        assert db.update_grocery_item_status(999, "Onion", True) is None

    def test_list_by_owner_newest_first(self, db, stored_plan):
        recipes = db.get_recipes_by_ids(stored_plan.recipe_ids())
        first = generate_grocery_list(stored_plan, recipes)
        first.created_at = datetime(2026, 10, 1)
        second = generate_grocery_list(stored_plan, recipes)
        second.created_at = first.created_at + timedelta(days=1)
        db.save_grocery_list(first)
        db.save_grocery_list(second)

        lists = db.get_grocery_lists_by_owner("user-1")
        assert [gl.id for gl in lists] == [second.id, first.id]
        assert [gl.id for gl in db.get_grocery_lists_by_owner("user-1", page=2, limit=1)] == [first.id]
        assert db.get_grocery_lists_by_owner("someone-else") == []

    def test_list_by_owner_rejects_bad_paging(self, db):
        with pytest.raises(ValueError):
            db.get_grocery_lists_by_owner("user-1", page=0)

    def test_delete(self, db, stored_list):
        assert db.delete_grocery_list(stored_list.id, "someone-else") is False
        assert db.delete_grocery_list(stored_list.id, "user-1") is True
        assert db.get_grocery_list(stored_list.id) is None
        assert db.delete_grocery_list(stored_list.id, "user-1") is False
