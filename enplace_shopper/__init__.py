"""EnPlace Shopper - recipe ingredient parsing and shopping lists."""

__version__ = "1.0.0"

from .checklist import Checklist, load_checklist, save_checklist
from .ingredient_parser import ParsedIngredient, parse_ingredient
from .recipe_parser import Recipe, RecipeLoadError, load_recipes, parse_recipe_text
from .shopping_list import ShoppingCategory, aggregate

__all__ = [
    "ParsedIngredient",
    "parse_ingredient",
    "ShoppingCategory",
    "aggregate",
    "Recipe",
    "RecipeLoadError",
    "load_recipes",
    "parse_recipe_text",
    "Checklist",
    "load_checklist",
    "save_checklist",
]
