"""Unit normalization, fraction parsing and quantity formatting."""

import math
import re

# Recipe unit spellings -> normalized unit
UNIT_ALIASES: dict[str, str] = {
    # Spoons
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "tb": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "ts": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    # Volume
    "cup": "cup",
    "cups": "cup",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    # Weight
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    # Count
    "clove": "cloves",
    "cloves": "cloves",
    "can": "can",
    "cans": "can",
    "bunch": "bunch",
    "bunches": "bunch",
    "slice": "slice",
    "slices": "slice",
    "piece": "piece",
    "pieces": "piece",
    "pcs": "piece",
    "head": "head",
    "heads": "head",
    "sprig": "sprig",
    "sprigs": "sprig",
    "inch": "inch",
    "inches": "inch",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    "pkg": "pkg",
    "pkgs": "pkg",
    "package": "pkg",
    "packages": "pkg",
    "jar": "jar",
    "jars": "jar",
    "bottle": "bottle",
    "bottles": "bottle",
}

# Unicode vulgar fractions -> decimal value
UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

# Glyphs preferred when displaying quantities
DISPLAY_FRACTIONS: list[tuple[float, str]] = [
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (1 / 2, "½"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
]

FRACTION_TOLERANCE = 0.05

_SLASH_FRACTION = re.compile(r"^(\d+)\s*/\s*(\d+)")


def normalize_unit(token: str | None) -> str | None:
    """Return the normalized unit for a token, or None if it is not a unit."""
    if not token:
        return None
    return UNIT_ALIASES.get(token.lower().strip())


def parse_fraction(text: str) -> tuple[float | None, str]:
    """
    Parse a fraction token from the start of text.

    Accepts a single unicode glyph ("½") or the "n/d" form ("1/2").

    Returns:
        Tuple of (value, remaining_text); value is None when no fraction
        starts the text, in which case the text is returned unchanged.
    """
    if text[:1] in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[text[0]], text[1:]

    match = _SLASH_FRACTION.match(text)
    if match:
        try:
            numerator, denominator = int(match.group(1)), int(match.group(2))
            if denominator:
                return numerator / denominator, text[match.end() :]
        except (ValueError, OverflowError):
            # Too many digits for int() or a quotient beyond float range
            return None, text

    return None, text


def format_quantity(quantity: float) -> str:
    """
    Format a quantity for display.

    Examples:
        2.0 -> "2"
        0.5 -> "½"
        1.33 -> "1⅓"
        1.4 -> "1.4"
    """
    if not math.isfinite(quantity):
        return str(quantity)

    if quantity == int(quantity):
        return str(int(quantity))

    whole = int(quantity)
    remainder = quantity - whole
    for value, glyph in DISPLAY_FRACTIONS:
        if abs(remainder - value) <= FRACTION_TOLERANCE:
            return f"{whole}{glyph}" if whole else glyph

    return f"{quantity:.1f}"


def format_amount(quantity: float | None, unit: str | None) -> str:
    """Format quantity and unit together (e.g. "2 tbsp", "½", "cup", "")."""
    parts = []
    if quantity is not None:
        parts.append(format_quantity(quantity))
    if unit:
        parts.append(unit)
    return " ".join(parts)
