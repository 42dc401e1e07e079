"""Shopping categories and keyword-based ingredient categorization."""

from typing import Literal

Category = Literal["protein", "produce", "dairy", "spices", "pantry", "other"]

# Display and precedence order
CATEGORY_ORDER: tuple[Category, ...] = (
    "protein",
    "produce",
    "dairy",
    "spices",
    "pantry",
    "other",
)

CATEGORY_LABELS: dict[Category, str] = {
    "protein": "🥩 Proteins",
    "produce": "🥬 Produce",
    "dairy": "🧀 Dairy & Eggs",
    "spices": "🧂 Spices",
    "pantry": "🫙 Pantry",
    "other": "📦 Other",
}

# Keyword lists are tested in this order; the first substring hit wins.
# A keyword must never contain a keyword from an earlier list.
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    "protein": (
        "chicken",
        "beef",
        "pork",
        "steak",
        "bacon",
        "sausage",
        "chorizo",
        "pancetta",
        "prosciutto",
        "turkey",
        "lamb",
        "veal",
        "duck",
        "salmon",
        "tuna",
        "fish",
        "shrimp",
        "prawn",
        "scallop",
        "crab",
        "lobster",
        "tofu",
        "tempeh",
    ),
    "produce": (
        "onion",
        "scallion",
        "shallot",
        "leek",
        "garlic",
        "ginger",
        "tomatoes",
        "cherry tomato",
        "roma tomato",
        "plum tomato",
        "grape tomato",
        "potato",
        "carrot",
        "celery",
        "pepper",
        "jalapeño",
        "jalapeno",
        "spinach",
        "kale",
        "lettuce",
        "arugula",
        "broccoli",
        "cauliflower",
        "cabbage",
        "zucchini",
        "squash",
        "eggplant",
        "cucumber",
        "mushroom",
        "avocado",
        "radish",
        "beet",
        "asparagus",
        "green bean",
        "green peas",
        "snap peas",
        "snow peas",
        "sweet corn",
        "corn kernel",
        "bean sprout",
        "lemon",
        "lime",
        "orange",
        "apple",
        "banana",
        "berry",
        "berries",
        "mango",
        "basil",
        "cilantro",
        "parsley",
        "mint",
        "dill",
        "thyme",
        "rosemary",
        "sage",
        "chive",
    ),
    "dairy": (
        "milk",
        "cream",
        "butter",
        "cheese",
        "cheddar",
        "mozzarella",
        "parmesan",
        "ricotta",
        "feta",
        "mascarpone",
        "yogurt",
        "yoghurt",
        "ghee",
        "half-and-half",
        "creme fraiche",
        "egg",
    ),
    "spices": (
        "salt",
        "cumin",
        "paprika",
        "oregano",
        "cinnamon",
        "nutmeg",
        "turmeric",
        "cayenne",
        "coriander",
        "cardamom",
        "clove",
        "allspice",
        "star anise",
        "saffron",
        "bay leaf",
        "bay leaves",
        "chili powder",
        "curry powder",
        "garam masala",
        "seasoning",
        "spice",
    ),
    "pantry": (
        "oil",
        "olive",
        "vinegar",
        "flour",
        "sugar",
        "honey",
        "syrup",
        "rice",
        "pasta",
        "spaghetti",
        "noodle",
        "bread",
        "panko",
        "tortilla",
        "broth",
        "stock",
        "sauce",
        "tomato paste",
        "ketchup",
        "mayonnaise",
        "mustard",
        "salsa",
        "tahini",
        "peanut",
        "almond",
        "walnut",
        "pecan",
        "coconut",
        "oats",
        "quinoa",
        "lentil",
        "chickpea",
        "beans",
        "cornstarch",
        "baking soda",
        "baking powder",
        "yeast",
        "vanilla",
        "cocoa",
        "chocolate",
        "cracker",
        "jam",
    ),
}


def categorize(name: str) -> Category:
    """
    Assign a shopping category to an ingredient name.

    Lists are checked in CATEGORY_ORDER; names matching no keyword are "other".
    """
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return "other"


def category_label(category: Category) -> str:
    """Get the display heading for a category."""
    return CATEGORY_LABELS.get(category, category.title())
