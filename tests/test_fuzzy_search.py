"""Tests for typo-tolerant recipe search."""

import pytest

from smartplates.models.recipe import Recipe, RecipeIngredient
from smartplates.search.fuzzy import (
    filter_recipes_by_difficulty,
    fuzzy_search_recipes,
    levenshtein_distance,
    similarity,
)


def _recipe(title: str, ingredients: list[str] = (), minutes: int | None = None) -> Recipe:
    return Recipe(
        title=title,
        ready_in_minutes=minutes,
        ingredients=[RecipeIngredient(name=name) for name in ingredients],
    )


@pytest.fixture
def recipes():
    return [
        _recipe("Chicken Curry", ["chicken breast", "coconut milk", "curry powder"], 35),
        _recipe("Spaghetti Bolognese", ["pasta", "ground beef", "tomatoes"], 30),
        _recipe("Greek Salad", ["cucumber", "feta", "olives"], 10),
        _recipe("Mushroom Risotto", ["arborio rice", "mushrooms", "parmesan"], 40),
    ]


def _titles(results):
    return [r.title for r in results]


class TestLevenshtein:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("", "", 0),
            ("abc", "", 3),
            ("", "abc", 3),
            ("kitten", "sitting", 3),
            ("chicken", "chiken", 1),
            ("pasta", "pasta", 0),
        ],
    )
    def test_distance(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_symmetric(self):
        assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw")

    def test_similarity(self):
        assert similarity("", "") == 1.0
        assert similarity("abc", "abc") == 1.0
        assert similarity("abcd", "wxyz") == 0.0
        assert similarity("qwertyuiop", "qwertyuxyz") == pytest.approx(0.7)


class TestFuzzySearch:
    def test_blank_query_returns_everything(self, recipes):
        assert fuzzy_search_recipes(recipes, "") == recipes
        assert fuzzy_search_recipes(recipes, "   ") == recipes

    def test_title_substring_case_insensitive(self, recipes):
        assert _titles(fuzzy_search_recipes(recipes, "CURRY")) == ["Chicken Curry"]

    def test_ingredient_substring(self, recipes):
        assert _titles(fuzzy_search_recipes(recipes, "feta")) == ["Greek Salad"]

    def test_known_misspelling(self, recipes):
        assert _titles(fuzzy_search_recipes(recipes, "chiken")) == ["Chicken Curry"]

    def test_translation(self, recipes):
        assert _titles(fuzzy_search_recipes(recipes, "nudeln")) == ["Spaghetti Bolognese"]
        assert _titles(fuzzy_search_recipes(recipes, "pilze")) == ["Mushroom Risotto"]

    def test_word_similarity(self, recipes):
        assert _titles(fuzzy_search_recipes(recipes, "risoto")) == ["Mushroom Risotto"]
        assert _titles(fuzzy_search_recipes(recipes, "bolognaise")) == ["Spaghetti Bolognese"]

    def test_similarity_threshold_is_inclusive(self):
        recipes = [_recipe("Qwertyuxyz Stew")]
        assert len(fuzzy_search_recipes(recipes, "qwertyuiop")) == 1

    def test_below_threshold_does_not_match(self):
        recipes = [_recipe("Abcdefghiwxyz Stew")]
        assert fuzzy_search_recipes(recipes, "abcdefghijklm") == []

    def test_short_query_prefix_match(self):
        recipes = [_recipe("Zucchini Bake")]
        assert len(fuzzy_search_recipes(recipes, "zuc")) == 1
        assert len(fuzzy_search_recipes(recipes, "zucx")) == 1

    def test_no_match(self, recipes):
        assert fuzzy_search_recipes(recipes, "xylophone") == []

    def test_preserves_input_order(self, recipes):
        reordered = list(reversed(recipes))
        results = fuzzy_search_recipes(reordered, "i")
        assert results == [r for r in reordered if r in results]

    def test_original_name_is_searched(self):
        recipe = Recipe(
            title="Weeknight Bowl",
            ingredients=[RecipeIngredient(name="rice", original_name="2 cups jasmine rice")],
        )
        assert fuzzy_search_recipes([recipe], "jasmine") == [recipe]


class TestDifficulty:
    def test_buckets(self, recipes):
        assert _titles(filter_recipes_by_difficulty(recipes, "easy")) == ["Greek Salad"]
        assert _titles(filter_recipes_by_difficulty(recipes, "medium")) == ["Spaghetti Bolognese"]
        assert _titles(filter_recipes_by_difficulty(recipes, "hard")) == [
            "Chicken Curry",
            "Mushroom Risotto",
        ]

    def test_no_filter(self, recipes):
        assert filter_recipes_by_difficulty(recipes, None) == recipes
        assert filter_recipes_by_difficulty(recipes, "extreme") == recipes

    def test_missing_time_counts_as_easy(self):
        recipe = _recipe("Toast")
        assert filter_recipes_by_difficulty([recipe], "easy") == [recipe]
