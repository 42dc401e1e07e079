"""Shopping list aggregation: parse recipe lines, merge duplicates, group by category."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import NamedTuple, Protocol

from .categories import CATEGORY_ORDER, Category, category_label
from .ingredient_parser import ParsedIngredient, parse_ingredient
from .logging_config import get_logger

logger = get_logger(__name__)


class HasIngredients(Protocol):
    """Anything exposing an ordered list of raw ingredient lines."""

    @property
    def ingredients(self) -> Sequence[str]: ...


class ShoppingCategory(NamedTuple):
    """One category section of a shopping list."""

    category: Category
    items: list[ParsedIngredient]

    @property
    def label(self) -> str:
        return category_label(self.category)


def parse_recipe_ingredients(recipes: Iterable[HasIngredients]) -> list[ParsedIngredient]:
    """Parse every ingredient line, in recipe order then line order."""
    return [parse_ingredient(line) for recipe in recipes for line in recipe.ingredients]


def merge_ingredients(group: list[ParsedIngredient]) -> ParsedIngredient:
    """
    Merge ingredients sharing an aggregation key.

    Present quantities are summed (the result is None only if every member
    lacks a quantity). Distinct preparations are joined with "; ".
    Everything else comes from the first member.
    """
    first = group[0]
    if len(group) == 1:
        return first

    quantities = [ing.quantity for ing in group if ing.quantity is not None]
    total = sum(quantities) if quantities else None

    preparations = dict.fromkeys(ing.preparation for ing in group if ing.preparation)
    preparation = "; ".join(preparations) if preparations else None

    return replace(first, quantity=total, preparation=preparation)


def aggregate(recipes: Iterable[HasIngredients]) -> list[ShoppingCategory]:
    """
    Build a category-grouped, deduplicated shopping list.

    Args:
        recipes: Recipes whose ingredient lines should be bought

    Returns:
        ShoppingCategory sections in CATEGORY_ORDER, empty sections omitted,
        items sorted case-insensitively by name
    """
    parsed = parse_recipe_ingredients(recipes)

    groups: dict[str, list[ParsedIngredient]] = {}
    for ingredient in parsed:
        groups.setdefault(ingredient.key, []).append(ingredient)

    buckets: dict[Category, list[ParsedIngredient]] = {}
    for group in groups.values():
        merged = merge_ingredients(group)
        buckets.setdefault(merged.category, []).append(merged)

    result = [
        ShoppingCategory(category, sorted(buckets[category], key=lambda ing: ing.name.lower()))
        for category in CATEGORY_ORDER
        if buckets.get(category)
    ]

    logger.debug(
        f"Aggregated {len(parsed)} ingredient lines into {len(groups)} items "
        f"across {len(result)} categories"
    )
    return result


def iter_items(groups: Iterable[ShoppingCategory]) -> Iterator[ParsedIngredient]:
    """Iterate over all items of a shopping list in display order."""
    for group in groups:
        yield from group.items


def count_items(groups: Iterable[ShoppingCategory]) -> int:
    """Total number of items in a shopping list."""
    return sum(len(group.items) for group in groups)
