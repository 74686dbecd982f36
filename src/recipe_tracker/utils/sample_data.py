"""
Utility to load sample recipes for development and testing.

Recipes are created through recipe_service so they go through the same
validation as user input. Reference data must be seeded first.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Tuple

from recipe_tracker.models import Recipe
from recipe_tracker.models.enums import Difficulty
from recipe_tracker.services import recipe_service, repositories
from recipe_tracker.services.commands import (
    CategoryCommand,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    UnitOfMeasureCommand,
)
from recipe_tracker.services.database import session_scope

logger = logging.getLogger(__name__)

# (description, amount, unit of measure)
GUACAMOLE_INGREDIENTS: List[Tuple[str, str, str]] = [
    ("ripe avocados", "2", "Each"),
    ("Kosher salt", "0.5", "Teaspoon"),
    ("fresh lime juice or lemon juice", "1", "Tablespoon"),
    ("minced red onion or thinly sliced green onion", "2", "Tablespoon"),
    ("serrano chiles, stems and seeds removed, minced", "2", "Each"),
    ("Cilantro", "2", "Tablespoon"),
    ("freshly grated black pepper", "1", "Dash"),
    ("ripe tomato, seeds and pulp removed, chopped", "0.5", "Each"),
]

TACO_INGREDIENTS: List[Tuple[str, str, str]] = [
    ("Ancho Chili Powder", "2", "Tablespoon"),
    ("Dried Oregano", "1", "Teaspoon"),
    ("Dried Cumin", "1", "Teaspoon"),
    ("Sugar", "1", "Teaspoon"),
    ("Salt", "0.5", "Teaspoon"),
    ("Clove of Garlic, Chopped", "1", "Each"),
    ("finely grated orange zest", "1", "Tablespoon"),
    ("fresh-squeezed orange juice", "3", "Tablespoon"),
    ("Olive Oil", "2", "Tablespoon"),
    ("boneless chicken thighs", "4", "Each"),
    ("small corn tortillas", "8", "Each"),
]

SAMPLE_RECIPES = [
    {
        "description": "Perfect Guacamole",
        "prep_time": 10,
        "cook_time": 0,
        "servings": 4,
        "source": "Simply Recipes",
        "url": "http://www.simplyrecipes.com/recipes/perfect_guacamole/",
        "difficulty": Difficulty.EASY,
        "directions": (
            "1 Cut avocado, remove flesh.\n"
            "2 Mash with a fork.\n"
            "3 Add salt, lime juice, and the rest.\n"
            "4 Cover with plastic and chill to store."
        ),
        "notes": "Be careful handling chiles if using.",
        "categories": ["American", "Mexican"],
        "ingredients": GUACAMOLE_INGREDIENTS,
    },
    {
        "description": "Spicy Grilled Chicken Taco",
        "prep_time": 20,
        "cook_time": 15,
        "servings": 4,
        "source": "Simply Recipes",
        "url": "http://www.simplyrecipes.com/recipes/spicy_grilled_chicken_tacos/",
        "difficulty": Difficulty.MODERATE,
        "directions": (
            "1 Prepare a gas or charcoal grill for medium-high, direct heat.\n"
            "2 Make the marinade and coat the chicken.\n"
            "3 Grill the chicken.\n"
            "4 Warm the tortillas.\n"
            "5 Assemble the tacos."
        ),
        "notes": "We have a family motto and it is this: Everything goes better in a tortilla.",
        "categories": ["American", "Mexican"],
        "ingredients": TACO_INGREDIENTS,
    },
]


def _build_command(data: Dict, session) -> RecipeCommand:
    """Resolve category and unit names to IDs and build a RecipeCommand."""
    categories = []
    for name in data["categories"]:
        category = repositories.find_category_by_description(name, session=session)
        if category is None:
            raise ValueError(f"Category '{name}' not found - seed reference data first")
        categories.append(CategoryCommand(id=category.id))

    ingredients = []
    for description, amount, uom_name in data["ingredients"]:
        uom = repositories.find_uom_by_description(uom_name, session=session)
        if uom is None:
            raise ValueError(f"Unit of measure '{uom_name}' not found - seed reference data first")
        ingredients.append(
            IngredientCommand(
                description=description,
                amount=Decimal(amount),
                uom=UnitOfMeasureCommand(id=uom.id),
            )
        )

    return RecipeCommand(
        description=data["description"],
        prep_time=data["prep_time"],
        cook_time=data["cook_time"],
        servings=data["servings"],
        source=data["source"],
        url=data["url"],
        directions=data["directions"],
        difficulty=data["difficulty"],
        notes=NotesCommand(recipe_notes=data["notes"]),
        ingredients=ingredients,
        categories=categories,
    )


def load_sample_recipes() -> int:
    """
    Insert the sample recipes that are not already present.

    Returns:
        Number of recipes created
    """
    created = 0
    with session_scope() as session:
        existing = {description for (description,) in session.query(Recipe.description).all()}
        for data in SAMPLE_RECIPES:
            if data["description"] in existing:
                logger.debug(f"Sample recipe '{data['description']}' already present")
                continue
            recipe_service.save_recipe_command(_build_command(data, session), session=session)
            created += 1

    logger.info(f"Loaded {created} sample recipes")
    return created
