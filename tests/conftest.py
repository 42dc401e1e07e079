"""Shared fixtures for enplace-shopper tests."""

import json
import logging

import pytest

from enplace_shopper.recipe_parser import Recipe


@pytest.fixture
def stir_fry():
    """Recipe with a garlic line shared with pad_thai."""
    return Recipe(
        title="Chicken Stir Fry",
        ingredients=[
            "1 lb chicken breast, cubed",
            "2 cloves garlic, minced",
            "2 tbsp soy sauce",
            "1 red bell pepper, sliced",
            "1 cup jasmine rice",
        ],
        servings=2,
    )


@pytest.fixture
def pad_thai():
    return Recipe(
        title="Pad Thai",
        ingredients=[
            "8 oz rice noodles",
            "2 cloves garlic, minced",
            "2 eggs",
            "½ cup bean sprouts",
            "1 lime, cut into wedges",
            "Salt to taste",
        ],
        servings=2,
    )


@pytest.fixture
def recipes_bundle():
    """Recipes in the app's bundled recipes.json format."""
    return {
        "recipes": [
            {
                "name": "Chicken Stir Fry",
                "isForFamily": False,
                "dietTags": ["none"],
                "chefLevels": ["lineCook"],
                "cookTimeMinutes": 25,
                "description": "Quick weeknight stir fry.",
                "ingredients": [
                    "1 lb chicken breast, cubed",
                    "2 cloves garlic, minced",
                    "2 tbsp olive oil",
                ],
                "steps": ["Cook the chicken.", "Add garlic."],
                "foodTags": ["chicken"],
                "imageName": "stirfry",
            },
            {
                "name": "Garlic Pasta",
                "cookTimeMinutes": 20,
                "description": "Pantry pasta.",
                "ingredients": [
                    "8 oz spaghetti",
                    "2 cloves garlic, minced",
                    "1 tbsp olive oil",
                    "¼ cup parmesan cheese, grated",
                ],
                "steps": ["Boil pasta."],
            },
        ]
    }


@pytest.fixture
def recipes_file(tmp_path, recipes_bundle):
    """Write the recipe bundle to a temporary file."""
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(recipes_bundle, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def checklist_file(tmp_path, monkeypatch):
    """Point the CLI's checklist file at a temporary location."""
    path = tmp_path / "config" / "checklist.json"
    monkeypatch.setattr("enplace_shopper.cli.CHECKLIST_FILE", path)
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging during a test."""
    yield
    package_logger = logging.getLogger("enplace_shopper")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
