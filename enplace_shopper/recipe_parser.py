"""Recipe models and loading from recipe bundles or pasted text."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


class RecipeLoadError(Exception):
    """Exception raised when recipes cannot be loaded."""

    pass


@dataclass
class Recipe:
    """Represents a recipe and its raw ingredient lines."""

    title: str
    ingredients: list[str] = field(default_factory=list)
    servings: int | None = None
    cook_time_minutes: int | None = None
    description: str | None = None
    steps: list[str] = field(default_factory=list)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization."""
        return {
            "title": self.title,
            "servings": self.servings,
            "cook_time_minutes": self.cook_time_minutes,
            "description": self.description,
            "source": self.source,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """
        Create recipe from dictionary.

        Accepts both this project's format ("title") and the app's recipe
        bundle format ("name", "cookTimeMinutes").
        """
        title = data.get("title") or data.get("name")
        if not title:
            raise KeyError("title")

        ingredients = data.get("ingredients", [])
        if not isinstance(ingredients, list):
            raise TypeError("ingredients must be a list of strings")

        return cls(
            title=str(title),
            ingredients=[str(line) for line in ingredients],
            servings=data.get("servings"),
            cook_time_minutes=data.get("cook_time_minutes", data.get("cookTimeMinutes")),
            description=data.get("description"),
            steps=[str(step) for step in data.get("steps", [])],
            source=data.get("source"),
        )


def parse_ingredients_text(text: str) -> list[str]:
    """
    Split pasted text into ingredient lines (one per line).

    Skips empty lines, "Ingredients"-style headers, bullet points and
    list numbering.
    """
    lines = []

    for line in text.strip().split("\n"):
        line = line.strip()
        # Skip empty lines and headers
        if not line or line.lower().startswith(("ingredients", "for the", "---")):
            continue
        # Skip bullet points and numbers at start ("1. " but not "1.5")
        line = re.sub(r"^[\-\*•]\s*", "", line)
        line = re.sub(r"^\d+\.\s+", "", line)

        if line:
            lines.append(line)

    return lines


def parse_recipe_text(title: str, ingredients_text: str, servings: int | None = None) -> Recipe:
    """
    Create a recipe from manual text input.

    Args:
        title: Recipe name
        ingredients_text: Multi-line ingredient list
        servings: Optional serving size

    Returns:
        Recipe object
    """
    return Recipe(
        title=title,
        ingredients=parse_ingredients_text(ingredients_text),
        servings=servings,
        source="text",
    )


def load_recipes(filepath: str | Path) -> list[Recipe]:
    """
    Load recipes from a JSON bundle.

    The file holds either {"recipes": [...]} or a bare list of recipes.
    Malformed entries are skipped with a warning.

    Raises:
        RecipeLoadError: If the file cannot be read or has the wrong shape
    """
    path = Path(filepath)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RecipeLoadError(f"Failed to load recipes from {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("recipes")
    if not isinstance(data, list):
        raise RecipeLoadError(f"{path} does not contain a list of recipes")

    recipes: list[Recipe] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping recipe #{index} in {path}: not an object")
            continue
        try:
            recipe = Recipe.from_dict(entry)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping recipe #{index} in {path}: {e}")
            continue
        recipe.source = recipe.source or str(path)
        recipes.append(recipe)

    logger.info(f"Loaded {len(recipes)} recipes from {path}")
    return recipes


def select_recipes(recipes: list[Recipe], titles: list[str] | tuple[str, ...]) -> list[Recipe]:
    """
    Pick recipes by title (case-insensitive), in the order requested.

    An empty selection returns all recipes.

    Raises:
        RecipeLoadError: If a title matches no recipe
    """
    if not titles:
        return list(recipes)

    by_title = {recipe.title.lower(): recipe for recipe in recipes}
    selected = []
    for title in titles:
        recipe = by_title.get(title.strip().lower())
        if recipe is None:
            raise RecipeLoadError(f"Recipe '{title}' not found")
        selected.append(recipe)
    return selected
