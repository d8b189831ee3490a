"""Recipe search helpers."""

from smartplates.search.fuzzy import (
    COMMON_MISSPELLINGS,
    SIMILARITY_THRESHOLD,
    filter_recipes_by_difficulty,
    fuzzy_search_recipes,
    levenshtein_distance,
    similarity,
)

__all__ = [
    "COMMON_MISSPELLINGS",
    "SIMILARITY_THRESHOLD",
    "filter_recipes_by_difficulty",
    "fuzzy_search_recipes",
    "levenshtein_distance",
    "similarity",
]
