"""
Recipe Service - Business logic for recipe management.

This service provides:
- Listing all recipes
- Lookup by ID (as entity or as RecipeCommand)
- Create/update from a RecipeCommand, including notes, categories and
  ingredient reconciliation
- Deletion

Session Management Pattern:
- All functions accept optional `session` parameter
- If session is provided, use it directly (allows callers to manage transactions)
- If session is None, create a new session_scope for the operation
"""

import logging
from typing import Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Recipe
from ..utils.validators import validate_recipe_command
from . import repositories
from .commands import RecipeCommand
from .converters import command_to_notes, recipe_to_command
from .database import session_scope
from .exceptions import (
    CategoryNotFound,
    DatabaseError,
    RecipeNotFound,
    ServiceError,
    ValidationError,
)
from .ingredient_service import apply_ingredient_command
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def _touch_relationships(recipe: Recipe) -> None:
    """Load relationships so the recipe is usable after the session closes."""
    _ = recipe.notes
    _ = recipe.categories
    for ingredient in recipe.ingredients:
        _ = ingredient.unit_of_measure


# ============================================================================
# Read Operations
# ============================================================================


def get_recipes(session: Optional[Session] = None) -> Set[Recipe]:
    """
    Get every recipe.

    Returns:
        Set of Recipe instances with ingredients, notes and categories loaded

    Raises:
        DatabaseError: If database operation fails
    """
    logger.debug("Listing all recipes")

    def _impl(sess: Session) -> Set[Recipe]:
        recipes = set()
        for recipe in repositories.find_all_recipes(session=sess):
            _touch_relationships(recipe)
            recipes.add(recipe)
        return recipes

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError("Failed to retrieve recipes", e)


def find_by_id(recipe_id: int, session: Optional[Session] = None) -> Recipe:
    """
    Retrieve a recipe by ID.

    Raises:
        RecipeNotFound: If recipe doesn't exist
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> Recipe:
        recipe = repositories.find_recipe_by_id(recipe_id, session=sess)
        if recipe is None:
            log_operation(
                logger,
                operation="find_recipe",
                outcome="recipe_not_found",
                level=logging.WARNING,
                recipe_id=recipe_id,
            )
            raise RecipeNotFound(recipe_id)

        _touch_relationships(recipe)
        return recipe

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except ServiceError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to retrieve recipe {recipe_id}", e)


def find_command_by_id(recipe_id: int, session: Optional[Session] = None) -> RecipeCommand:
    """
    Retrieve a recipe by ID as a RecipeCommand.

    Raises:
        RecipeNotFound: If recipe doesn't exist
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> RecipeCommand:
        return recipe_to_command(find_by_id(recipe_id, session=sess))

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except ServiceError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to retrieve recipe {recipe_id}", e)


# ============================================================================
# Write Operations
# ============================================================================


def save_recipe_command(command: RecipeCommand, session: Optional[Session] = None) -> RecipeCommand:
    """
    Create or update a recipe from a RecipeCommand.

    A command without an ID creates a new recipe. Otherwise the existing
    recipe's fields, notes and categories are replaced, and each ingredient
    command is applied with the same update-or-append rule as
    ingredient_service.save_ingredient_command. Ingredients not mentioned
    in the command are kept.

    Returns:
        RecipeCommand for the saved recipe

    Raises:
        ValidationError: If the command is invalid
        RecipeNotFound: If command.id doesn't exist
        CategoryNotFound: If a category doesn't exist
        UnitOfMeasureNotFound: If an ingredient's unit of measure doesn't exist
        DatabaseError: If database operation fails
    """
    is_valid, errors = validate_recipe_command(command)
    if not is_valid:
        raise ValidationError(errors)

    def _impl(sess: Session) -> RecipeCommand:
        if command.id is None:
            recipe = Recipe()
        else:
            recipe = repositories.find_recipe_by_id(command.id, session=sess)
            if recipe is None:
                log_operation(
                    logger,
                    operation="save_recipe_command",
                    outcome="recipe_not_found",
                    level=logging.WARNING,
                    recipe_id=command.id,
                )
                raise RecipeNotFound(command.id)

        recipe.description = command.description
        recipe.prep_time = command.prep_time
        recipe.cook_time = command.cook_time
        recipe.servings = command.servings
        recipe.source = command.source
        recipe.url = command.url
        recipe.directions = command.directions
        recipe.difficulty = command.difficulty

        if command.notes is None:
            recipe.set_notes(None)
        elif recipe.notes is not None:
            recipe.notes.recipe_notes = command.notes.recipe_notes
        else:
            recipe.set_notes(command_to_notes(command.notes))

        categories = set()
        for category_command in command.categories:
            category = repositories.find_category_by_id(category_command.id, session=sess)
            if category is None:
                raise CategoryNotFound(category_command.id)
            categories.add(category)
        recipe.categories = categories

        for ingredient_command in command.ingredients:
            apply_ingredient_command(recipe, ingredient_command, sess)

        saved = repositories.save_recipe(recipe, session=sess)
        log_operation(
            logger,
            operation="save_recipe_command",
            outcome="created" if command.id is None else "updated",
            recipe_id=saved.id,
        )
        return recipe_to_command(saved)

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except ServiceError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseError("Failed to save recipe", e)


def delete_by_id(recipe_id: int, session: Optional[Session] = None) -> None:
    """
    Delete a recipe with its ingredients and notes.

    Deleting a recipe that doesn't exist does nothing.

    Raises:
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> None:
        recipe = repositories.find_recipe_by_id(recipe_id, session=sess)
        if recipe is None:
            logger.debug(f"Recipe Id Not found. Id: {recipe_id}")
            return

        repositories.delete_recipe(recipe, session=sess)
        log_operation(logger, operation="delete_recipe", outcome="deleted", recipe_id=recipe_id)

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to delete recipe {recipe_id}", e)
