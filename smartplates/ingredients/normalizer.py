"""Resolve free-text ingredient names against the ingredient catalog.

Lookup is exact: the lower-cased, trimmed name is matched against canonical
names first and then against each entry's aliases. There is no fuzzy
matching at this layer. Names the catalog does not know are a normal
outcome, not an error; callers fall back to the Pantry category.

Example usage:
    >>> from smartplates.ingredients.normalizer import find_ingredient
    >>> find_ingredient("Yellow Onions").name
    'onion'
    >>> find_ingredient("dragon fruit") is None
    True
"""

from smartplates.ingredients.catalog import (
    DEFAULT_CATEGORY,
    INGREDIENT_CATALOG,
    GroceryCategory,
    IngredientInfo,
)

# Canonical name -> entry
_BY_NAME: dict[str, IngredientInfo] = {info.name: info for info in INGREDIENT_CATALOG}


def _clean(raw_name) -> str:
    if not isinstance(raw_name, str):
        return ""
    return " ".join(raw_name.lower().split())


def find_ingredient(raw_name: str) -> IngredientInfo | None:
    """Find the catalog entry for an ingredient name or alias.

    Args:
        raw_name: Free-text ingredient name (any case, surrounding whitespace ok)

    Returns:
        The matching IngredientInfo, or None if the name is unknown
    """
    name = _clean(raw_name)
    if not name:
        return None

    info = _BY_NAME.get(name)
    if info is not None:
        return info

    for info in INGREDIENT_CATALOG:
        for alias in info.aliases:
            if alias.lower() == name:
                return info

    return None


def normalize_ingredient_name(raw_name: str) -> str:
    """Canonical name for raw_name, or the cleaned input if unknown."""
    info = find_ingredient(raw_name)
    return info.name if info else _clean(raw_name)


def get_ingredient_category(raw_name: str) -> GroceryCategory:
    """Store category for raw_name (Pantry if unknown)."""
    info = find_ingredient(raw_name)
    return info.category if info else DEFAULT_CATEGORY


def is_staple_ingredient(raw_name: str) -> bool:
    """True if raw_name resolves to a pantry staple."""
    info = find_ingredient(raw_name)
    return info.is_staple if info else False


def estimate_ingredient_cost(raw_name: str, quantity: float) -> float | None:
    """Rough cost of quantity units of raw_name.

    The quantity is taken to be in the ingredient's base unit; there is no
    unit conversion. Returns None if the ingredient or its price is unknown.
    """
    info = find_ingredient(raw_name)
    if info is None or info.estimated_cost_per_unit is None:
        return None
    return round(quantity * info.estimated_cost_per_unit, 2)
