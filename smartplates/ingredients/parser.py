"""Parse free-text ingredient lines.

This module extracts structured data from ingredient strings like "200 g flour"
into components: amount (200), unit (g), name (flour).

Key features:
- Regex-based parsing of integer, decimal, fraction and mixed-number amounts
- Unit normalization (tablespoons → tbsp, grams → g)
- Removal of filler words and parenthetical content

Lines without a leading amount count as one unit of the whole line, so
"salt" parses to amount=1, unit="", name="salt".

Example usage:
    >>> from smartplates.ingredients.parser import parse_ingredient
    >>> parsed = parse_ingredient("1 1/2 cups whole milk")
    >>> print(parsed.amount, parsed.unit, parsed.name)
    1.5 cup whole milk
"""

import re
from dataclasses import dataclass
from fractions import Fraction


@dataclass
class ParsedIngredient:
    """A parsed ingredient with structured components.

    Attributes:
        original: The original ingredient string as it appeared in the recipe
        amount: Numeric amount (e.g., 200.0 for "200 g"), 1.0 if not specified
        unit: Normalized unit (e.g., "g", "tbsp"), "" if not specified
        name: Lower-cased ingredient name
    """

    original: str
    amount: float
    unit: str
    name: str


# Mapping of unit variations to their normalized form
UNIT_MAPPING = {
    # Metric
    "g": "g",
    "gram": "g",
    "grams": "g",
    "gr": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    # Imperial / US
    "tsp": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tbsp": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cup",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    # Counts
    "pcs": "pcs",
    "pc": "pcs",
    "piece": "pcs",
    "pieces": "pcs",
    "clove": "clove",
    "cloves": "clove",
    "can": "can",
    "cans": "can",
    "tin": "can",
    "tins": "can",
    "bunch": "bunch",
    "bunches": "bunch",
    "slice": "slice",
    "slices": "slice",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "sprig": "sprig",
    "sprigs": "sprig",
    "handful": "handful",
    "package": "package",
    "packages": "package",
    "pkg": "package",
}

UNICODE_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅛": "1/8",
}

# amount: "2", "1.5", "1,5", "1/2", "1 1/2"
_AMOUNT = r"(\d+\s+\d+/\d+|\d+/\d+|\d+(?:[.,]\d+)?)"
_LINE_PATTERN = re.compile(rf"^{_AMOUNT}\s*([a-zA-Z]+\.?)?\s*(.*)$")

_FILLER_WORDS = re.compile(
    r"\b(fresh|freshly|chopped|diced|minced|sliced|large|medium|small|"
    r"finely|roughly|about|approx|optional|to taste)\b"
)


def normalize_unit(unit: str | None) -> str:
    """Normalize a unit string to its canonical form.

    Args:
        unit: Raw unit string (e.g., "Tablespoons", "g", "cups")

    Returns:
        Normalized unit (e.g., "tbsp", "g") or the lower-cased input
        if it is not a known unit. Empty string for missing input.
    """
    if not unit:
        return ""
    unit_lower = unit.lower().strip().rstrip(".")
    return UNIT_MAPPING.get(unit_lower, unit_lower)


def parse_amount(amount_str: str) -> float:
    """Parse "2", "1.5", "1,5", "1/2" or "1 1/2" into a float."""
    amount_str = amount_str.strip().replace(",", ".")
    total = Fraction(0)
    for part in amount_str.split():
        total += Fraction(part)
    return float(total)


def clean_ingredient_name(name: str) -> str:
    """Lowercase, drop filler words, "of" and surplus whitespace."""
    if not name:
        return ""

    name = name.lower().strip()
    name = re.sub(r"^[.,;:\-/]+\s*", "", name)
    name = _FILLER_WORDS.sub("", name)
    name = re.sub(r"^of\s+", "", name.strip())
    name = re.sub(r"\s*,\s*$", "", name)
    name = re.sub(r"\s+", " ", name).strip()
    return name


def parse_ingredient(ingredient_str: str) -> ParsedIngredient:
    """Parse an ingredient string into components.

    Examples:
        "200 g flour" -> amount=200, unit="g", name="flour"
        "2 tablespoons olive oil" -> amount=2, unit="tbsp", name="olive oil"
        "Salt" -> amount=1, unit="", name="salt"
        "2 onions" -> amount=2, unit="", name="onions"
    """
    original = ingredient_str.strip()

    text = original
    for symbol, replacement in UNICODE_FRACTIONS.items():
        text = text.replace(symbol, f" {replacement}")

    # Remove content in parentheses for parsing (keep original for reference)
    text = re.sub(r"\s*\([^)]*\)", "", text).strip()

    # "1 x 400g can" -> "400g can"
    text = re.sub(r"^(\d+)\s*x\s*(\d+)", r"\2", text)

    match = _LINE_PATTERN.match(text)
    amount = None
    if match:
        try:
            amount = parse_amount(match.group(1))
        except (ValueError, ZeroDivisionError):
            amount = None

    if amount is None:
        return ParsedIngredient(
            original=original,
            amount=1.0,
            unit="",
            name=clean_ingredient_name(text) or original.lower(),
        )

    _amount_str, unit_raw, name_raw = match.groups()
    name = name_raw.strip() if name_raw else ""
    unit = ""

    if unit_raw:
        unit_key = unit_raw.lower().rstrip(".")
        if unit_key in UNIT_MAPPING:
            unit = UNIT_MAPPING[unit_key]
        else:
            # Not a unit, e.g. "2 onions"
            name = f"{unit_raw} {name}".strip()

    return ParsedIngredient(
        original=original,
        amount=amount,
        unit=unit,
        name=clean_ingredient_name(name),
    )
