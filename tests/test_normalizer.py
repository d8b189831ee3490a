"""Tests for ingredient catalog lookups."""

import pytest

from smartplates.ingredients.catalog import INGREDIENT_CATALOG, GroceryCategory
from smartplates.ingredients.normalizer import (
    estimate_ingredient_cost,
    find_ingredient,
    get_ingredient_category,
    is_staple_ingredient,
    normalize_ingredient_name,
)


class TestFindIngredient:
    """Exact lookup by canonical name or alias."""

    def test_canonical_name(self):
        info = find_ingredient("onion")
        assert info is not None
        assert info.name == "onion"
        assert info.category == GroceryCategory.PRODUCE

    @pytest.mark.parametrize("raw", ["Onions", "  yellow onion ", "YELLOW ONIONS", "yellow   onion"])
    def test_aliases_case_and_whitespace(self, raw):
        assert find_ingredient(raw).name == "onion"

    def test_pepper_alias_resolves_to_black_pepper(self):
        assert find_ingredient("pepper").name == "black pepper"

    def test_no_fuzzy_matching(self):
        assert find_ingredient("oni") is None
        assert find_ingredient("onoin") is None

    @pytest.mark.parametrize("raw", ["", "   ", None, 42])
    def test_empty_or_invalid_input(self, raw):
        assert find_ingredient(raw) is None

    def test_unknown_ingredient(self):
        assert find_ingredient("dragon fruit") is None

    def test_catalog_names_are_unique(self):
        names = [info.name for info in INGREDIENT_CATALOG]
        assert len(names) == len(set(names))

    def test_display_name(self):
        assert find_ingredient("extra virgin olive oil").display_name == "Olive Oil"


class TestDerivedLookups:
    def test_normalize_known_and_unknown(self):
        assert normalize_ingredient_name("Spaghetti") == "pasta"
        assert normalize_ingredient_name("  Dragon  Fruit ") == "dragon fruit"

    def test_category_defaults_to_pantry(self):
        assert get_ingredient_category("chicken breasts") == GroceryCategory.MEAT_SEAFOOD
        assert get_ingredient_category("dragon fruit") == GroceryCategory.PANTRY

    def test_staples(self):
        assert is_staple_ingredient("sea salt")
        assert is_staple_ingredient("flour")
        assert not is_staple_ingredient("onion")
        assert not is_staple_ingredient("dragon fruit")

    def test_cost_estimate(self):
        assert estimate_ingredient_cost("onions", 3) == 1.5
        assert estimate_ingredient_cost("dragon fruit", 3) is None

    @pytest.mark.parametrize("raw", ["onions", "Spaghetti", "sea salt", "chicken stock"])
    def test_lookup_is_idempotent(self, raw):
        info = find_ingredient(raw)
        assert find_ingredient(info.name) is info
