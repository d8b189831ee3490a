"""Typo-tolerant recipe search over titles and ingredient names.

A recipe matches when any of these tiers passes, checked in order:

1. the query is a substring of the title
2. the query is a substring of an ingredient name
3. the query is a known misspelling or translation of a common term,
   and that term (or one of its variants) appears in title or ingredients
4. for queries of 4+ characters, a title or ingredient word of 4+
   characters has Levenshtein similarity >= SIMILARITY_THRESHOLD
5. for queries of 3 or 4 characters, a word contains the query or the
   query contains the first three letters of a word

Example usage:
    >>> from smartplates.search import fuzzy_search_recipes
    >>> [r.title for r in fuzzy_search_recipes(recipes, "chiken")]
    ['Chicken Soup']
"""

import logging
from typing import Iterable

from smartplates.models.recipe import Recipe

_LOGGER = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.7
MIN_FUZZY_QUERY_LENGTH = 4
MIN_FUZZY_WORD_LENGTH = 4
PREFIX_QUERY_LENGTHS = (3, 4)
PREFIX_LENGTH = 3

# Canonical term -> known typos and German translations
COMMON_MISSPELLINGS: dict[str, list[str]] = {
    "pasta": ["pata", "past", "nudel", "nudeln", "pasta"],
    "chicken": ["chiken", "chicen", "chikken", "hähnchen", "huhn", "chicken"],
    "tomato": ["tomate", "tomatoe", "tomatos", "tomaten", "tomato"],
    "potato": ["potatoe", "potatos", "kartoffel", "kartoffeln", "potato"],
    "cheese": ["chese", "ches", "käse", "cheese"],
    "mushroom": ["mushrom", "mushroon", "pilz", "pilze", "mushroom"],
    "salmon": ["salomon", "samon", "lachs", "salmon"],
    "beef": ["beaf", "bef", "rindfleisch", "beef"],
    "pork": ["prok", "schwein", "schweinefleisch", "pork"],
    "soup": ["sope", "supe", "soupe", "suppe", "soup"],
}

_WORD_PUNCTUATION = ".,;:!?()[]\"'"


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit cost for insertion, deletion and substitution.

    Fills the full (len(b) + 1) x (len(a) + 1) matrix.
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],  # insertion
                    matrix[i - 1][j],  # deletion
                )

    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]: (max_len - distance) / max_len."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len


def _ingredient_names(recipe: Recipe) -> list[str]:
    names = []
    for ingredient in recipe.ingredients:
        name = ingredient.name or ingredient.original_name or ""
        if name:
            names.append(name.lower())
        if ingredient.original_name and ingredient.original_name.lower() != name.lower():
            names.append(ingredient.original_name.lower())
    return names


def _words(texts: Iterable[str]) -> list[str]:
    words = []
    for text in texts:
        for word in text.split():
            word = word.strip(_WORD_PUNCTUATION)
            if word:
                words.append(word)
    return words


def _misspelling_terms(query: str) -> list[str]:
    """Canonical term plus variants if query is a known misspelling, else []."""
    for correct, variants in COMMON_MISSPELLINGS.items():
        candidates = [correct, *variants]
        if query in candidates:
            return candidates
        if len(query) >= MIN_FUZZY_QUERY_LENGTH:
            for candidate in candidates:
                if len(candidate) >= MIN_FUZZY_QUERY_LENGTH and (
                    candidate in query or query in candidate
                ):
                    return candidates
    return []


def _matches(recipe: Recipe, query: str, corrected_terms: list[str]) -> bool:
    title = recipe.title.lower()
    ingredients = _ingredient_names(recipe)

    # 1. Title substring
    if query in title:
        _LOGGER.debug("Title match: %r in %r", query, recipe.title)
        return True

    # 2. Ingredient substring
    if any(query in name for name in ingredients):
        _LOGGER.debug("Ingredient match: %r in %r", query, recipe.title)
        return True

    # 3. Known misspellings and translations
    for term in corrected_terms:
        if term in title or any(term in name for name in ingredients):
            _LOGGER.debug("Corrected match: %r -> %r in %r", query, term, recipe.title)
            return True

    words = _words([title, *ingredients])

    # 4. Word-level similarity
    if len(query) >= MIN_FUZZY_QUERY_LENGTH:
        for word in words:
            if len(word) >= MIN_FUZZY_WORD_LENGTH and similarity(query, word) >= SIMILARITY_THRESHOLD:
                _LOGGER.debug("Fuzzy match: %r ~ %r in %r", query, word, recipe.title)
                return True

    # 5. Partial / prefix match for short queries
    if len(query) in PREFIX_QUERY_LENGTHS:
        for word in words:
            if len(word) < PREFIX_LENGTH:
                continue
            if query in word or word[:PREFIX_LENGTH] in query:
                _LOGGER.debug("Prefix match: %r ~ %r in %r", query, word, recipe.title)
                return True

    return False


def fuzzy_search_recipes(recipes: list[Recipe], search_query: str) -> list[Recipe]:
    """Filter recipes by a typo-tolerant query, preserving input order.

    Args:
        recipes: Candidate recipes
        search_query: User input; blank returns all recipes

    Returns:
        Matching recipes in their original order
    """
    if not search_query or not search_query.strip():
        return list(recipes)

    query = search_query.lower().strip()
    corrected_terms = _misspelling_terms(query)
    if corrected_terms:
        _LOGGER.debug("Query %r matches known terms %s", query, corrected_terms)

    results = [recipe for recipe in recipes if _matches(recipe, query, corrected_terms)]

    _LOGGER.info("Fuzzy search %r: %s of %s recipes", query, len(results), len(recipes))
    return results


def filter_recipes_by_difficulty(recipes: list[Recipe], difficulty: str | None) -> list[Recipe]:
    """Filter by cooking time: easy <= 15 min, medium 15-30 min, hard > 30 min.

    Unknown or empty difficulty returns all recipes.
    """
    if not difficulty:
        return list(recipes)

    def minutes(recipe: Recipe) -> int:
        return recipe.ready_in_minutes or 0

    if difficulty == "easy":
        return [r for r in recipes if minutes(r) <= 15]
    if difficulty == "medium":
        return [r for r in recipes if 15 <= minutes(r) <= 30]
    if difficulty == "hard":
        return [r for r in recipes if minutes(r) > 30]
    return list(recipes)
