"""Converters between ORM entities and command objects.

Every converter returns None when given None.
"""

from typing import Optional

from ..models import Category, Ingredient, Notes, Recipe, UnitOfMeasure
from .commands import (
    CategoryCommand,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    UnitOfMeasureCommand,
)


def uom_to_command(uom: Optional[UnitOfMeasure]) -> Optional[UnitOfMeasureCommand]:
    if uom is None:
        return None
    return UnitOfMeasureCommand(id=uom.id, description=uom.description)


def category_to_command(category: Optional[Category]) -> Optional[CategoryCommand]:
    if category is None:
        return None
    return CategoryCommand(id=category.id, description=category.description)


def notes_to_command(notes: Optional[Notes]) -> Optional[NotesCommand]:
    if notes is None:
        return None
    return NotesCommand(id=notes.id, recipe_notes=notes.recipe_notes)


def ingredient_to_command(ingredient: Optional[Ingredient]) -> Optional[IngredientCommand]:
    """
    Convert an Ingredient entity to an IngredientCommand.

    The recipe ID comes from the back-reference when it is set, otherwise
    from the foreign key column.
    """
    if ingredient is None:
        return None

    recipe_id = ingredient.recipe.id if ingredient.recipe is not None else ingredient.recipe_id
    uom = ingredient.unit_of_measure
    if uom is None and ingredient.unit_of_measure_id is not None:
        uom_command = UnitOfMeasureCommand(id=ingredient.unit_of_measure_id)
    else:
        uom_command = uom_to_command(uom)

    return IngredientCommand(
        id=ingredient.id,
        recipe_id=recipe_id,
        description=ingredient.description,
        amount=ingredient.amount,
        uom=uom_command,
    )


def command_to_ingredient(command: Optional[IngredientCommand]) -> Optional[Ingredient]:
    """
    Build a new, unattached Ingredient from a command.

    The ID is never copied: new ingredients get their ID from the database.
    The unit of measure is referenced by ID only; services replace it with
    the resolved UnitOfMeasure row.
    """
    if command is None:
        return None

    return Ingredient(
        description=command.description,
        amount=command.amount,
        unit_of_measure_id=command.uom.id if command.uom is not None else None,
    )


def recipe_to_command(recipe: Optional[Recipe]) -> Optional[RecipeCommand]:
    """Convert a Recipe aggregate, including ingredients and categories, to a RecipeCommand."""
    if recipe is None:
        return None

    ingredients = sorted(
        (ingredient_to_command(ingredient) for ingredient in recipe.ingredients),
        key=lambda command: (command.id is None, command.id or 0),
    )
    categories = sorted(
        (category_to_command(category) for category in recipe.categories),
        key=lambda command: command.id or 0,
    )

    return RecipeCommand(
        id=recipe.id,
        description=recipe.description,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        servings=recipe.servings,
        source=recipe.source,
        url=recipe.url,
        directions=recipe.directions,
        difficulty=recipe.difficulty,
        notes=notes_to_command(recipe.notes),
        ingredients=ingredients,
        categories=categories,
    )


def command_to_notes(command: Optional[NotesCommand]) -> Optional[Notes]:
    if command is None:
        return None
    return Notes(recipe_notes=command.recipe_notes)
