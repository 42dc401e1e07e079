"""Free-text ingredient line parsing."""

import math
import re
import string
from dataclasses import dataclass
from typing import Any

from .categories import Category, categorize
from .units import format_amount, normalize_unit, parse_fraction

# Sentinel unit used in aggregation keys for unit-less ingredients
WHOLE_UNIT = "whole"

# Terms marking a comma clause or parenthetical as a preparation note
PREPARATION_KEYWORDS: tuple[str, ...] = (
    "minced",
    "diced",
    "chopped",
    "sliced",
    "grated",
    "shredded",
    "crushed",
    "cubed",
    "julienned",
    "peeled",
    "seeded",
    "cored",
    "trimmed",
    "halved",
    "quartered",
    "softened",
    "melted",
    "beaten",
    "whisked",
    "sifted",
    "packed",
    "divided",
    "drained",
    "rinsed",
    "thawed",
    "toasted",
    "zested",
    "juiced",
    "cut into",
    "room temperature",
    "to taste",
    "optional",
)

# Words kept lowercase when title-casing names, in any position
CONNECTOR_WORDS = frozenset({"and", "or", "of", "with", "for", "&"})

ARTICLES = ("a ", "an ", "the ")

# Leading whole number (decimal allowed), optionally followed by a range tail
_LEADING_NUMBER = re.compile(r"^(\d+(?:\.\d+)?)(?:\s*[-–]\s*\d+(?:\.\d+)?)?")
_PARENTHETICAL = re.compile(r"\(([^()]*)\)")


@dataclass(frozen=True)
class ParsedIngredient:
    """A parsed ingredient line."""

    original: str  # Original text
    name: str  # Cleaned, title-cased name
    category: Category = "other"
    quantity: float | None = None
    unit: str | None = None
    preparation: str | None = None  # e.g., "minced; room temperature"

    @property
    def key(self) -> str:
        """Aggregation key: lower-cased name and unit."""
        return f"{self.name.lower()}|{self.unit or WHOLE_UNIT}"

    @property
    def amount(self) -> str:
        return format_amount(self.quantity, self.unit)

    def __str__(self) -> str:
        if self.amount:
            return f"{self.amount} {self.name}"
        return self.name

    def to_dict(self) -> dict[str, Any]:
        """Convert ingredient to dictionary for serialization."""
        return {
            "original": self.original,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "preparation": self.preparation,
            "category": self.category,
        }


def parse_quantity(text: str) -> tuple[float | None, str]:
    """
    Parse quantity from the beginning of an ingredient string.

    Handles "2", "1.5", "1/2", "½", "1 1/2", "1½" and ranges like "2-3"
    (the first number of a range is used).

    Returns:
        Tuple of (quantity, remaining_text)
    """
    text = text.strip()

    # A fraction on its own is the whole quantity
    value, remaining = parse_fraction(text)
    if value is not None:
        return value, remaining.strip()

    match = _LEADING_NUMBER.match(text)
    if not match:
        return None, text

    quantity = float(match.group(1))
    if not math.isfinite(quantity):
        return None, text
    remaining = text[match.end() :].lstrip()

    # Mixed numbers like "1 1/2" or "1½"
    fraction, after_fraction = parse_fraction(remaining)
    if fraction is not None:
        quantity += fraction
        remaining = after_fraction

    return quantity, remaining.strip()


def _match_unit_token(text: str) -> tuple[str | None, str]:
    """Match the first whitespace token of text against the unit table."""
    words = text.split(maxsplit=1)
    if not words:
        return None, text

    unit = normalize_unit(words[0].strip(string.punctuation))
    if unit is None:
        return None, text

    return unit, words[1] if len(words) > 1 else ""


def parse_unit(text: str) -> tuple[str | None, str]:
    """
    Parse unit from the beginning of text.

    A parenthetical size right after the unit position ("(14 oz)") takes
    precedence over a unit word: its unit is used and its quantity dropped.

    Returns:
        Tuple of (unit, remaining_text)
    """
    unit, remaining = _match_unit_token(text.strip())

    if remaining.startswith("("):
        close = remaining.find(")")
        if close != -1:
            _, inner = parse_quantity(remaining[1:close])
            inner_unit, _ = _match_unit_token(inner)
            if inner_unit is not None:
                unit = inner_unit
                remaining = remaining[close + 1 :].strip()

    return unit, remaining


def _has_preparation_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in PREPARATION_KEYWORDS)


def _find_top_level_comma(text: str) -> int:
    """Index of the first comma outside parentheses, or -1."""
    depth = 0
    for i, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            return i
    return -1


def extract_preparation(text: str) -> tuple[str, str | None]:
    """
    Split preparation notes from an ingredient name candidate.

    Notes come from a trailing comma clause ("garlic, minced") and from
    parentheticals ("butter (softened)") that contain a preparation keyword.

    Returns:
        Tuple of (name_candidate, preparation)
    """
    name = text
    notes: list[str] = []

    comma = _find_top_level_comma(text)
    if comma != -1:
        clause = text[comma + 1 :].strip()
        if _has_preparation_keyword(clause):
            notes.append(clause)
            name = text[:comma]

    def take_note(match: re.Match[str]) -> str:
        inner = match.group(1).strip()
        if inner and _has_preparation_keyword(inner):
            notes.append(inner)
            return " "
        return match.group(0)

    name = _PARENTHETICAL.sub(take_note, name)

    return name, "; ".join(notes) if notes else None


def _strip_stray_parentheses(text: str) -> str:
    while text.startswith("(") and text.endswith(")"):
        text = text[1:-1].strip()
    if text.startswith("(") and ")" not in text:
        text = text[1:].strip()
    if text.endswith(")") and "(" not in text:
        text = text[:-1].strip()
    return text


def clean_name(text: str) -> str:
    """
    Normalize an ingredient name for display.

    Collapses whitespace, drops stray parentheses and a leading article,
    and title-cases every word except connector words.
    """
    name = " ".join(text.split())
    name = _strip_stray_parentheses(name).strip(" ,.;:")

    lowered = name.lower()
    for article in ARTICLES:
        if lowered.startswith(article):
            name = name[len(article) :].lstrip()
            break

    words = [
        word.lower() if word.lower() in CONNECTOR_WORDS else word.capitalize()
        for word in name.split()
    ]
    return " ".join(words)


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse a single ingredient line into structured data.

    Never raises: unrecognized parts simply stay in the name.

    Args:
        text: Raw ingredient text (e.g., "1 lb chicken breast, cubed")

    Returns:
        ParsedIngredient with quantity, unit, name, preparation and category
    """
    original = text.strip()

    quantity, remaining = parse_quantity(original)
    unit, remaining = parse_unit(remaining)
    name_candidate, preparation = extract_preparation(remaining)

    name = clean_name(name_candidate) or clean_name(original) or original

    return ParsedIngredient(
        original=original,
        name=name,
        category=categorize(name),
        quantity=quantity,
        unit=unit,
        preparation=preparation,
    )
