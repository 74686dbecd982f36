"""
Ingredient Service - reading, saving and deleting the ingredients of a recipe.

Ingredients are only reachable through their recipe. Saving an ingredient
command reconciles it against the recipe's current ingredients:

- If the recipe already has an ingredient with the command's ID, that
  ingredient is updated in place (its ID is preserved).
- Otherwise a new ingredient is appended to the recipe. A command without
  an ID always takes this branch.

The recipe is then saved as a whole and the affected ingredient is located
in the saved recipe to build the returned view.

Session Management Pattern:
- All functions accept optional `session` parameter
- If session is provided, use it directly (allows callers to manage transactions)
- If session is None, create a new session_scope for the operation
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Ingredient, Recipe, UnitOfMeasure
from ..utils.validators import validate_ingredient_command
from . import repositories
from .commands import IngredientCommand
from .converters import command_to_ingredient, ingredient_to_command
from .database import session_scope
from .exceptions import (
    DatabaseError,
    IngredientNotFound,
    IngredientResolutionError,
    RecipeNotFound,
    ServiceError,
    UnitOfMeasureNotFound,
    ValidationError,
)
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


# ============================================================================
# Helpers
# ============================================================================


def _load_recipe(recipe_id: Optional[int], operation: str, session: Session) -> Recipe:
    """Load a recipe or raise RecipeNotFound."""
    recipe = repositories.find_recipe_by_id(recipe_id, session=session)
    if recipe is None:
        log_operation(
            logger,
            operation=operation,
            outcome="recipe_not_found",
            level=logging.WARNING,
            recipe_id=recipe_id,
        )
        raise RecipeNotFound(recipe_id)
    return recipe


def _resolve_uom(uom_id: Optional[int], operation: str, session: Session) -> UnitOfMeasure:
    """Load a unit of measure or raise UnitOfMeasureNotFound."""
    uom = repositories.find_uom_by_id(uom_id, session=session)
    if uom is None:
        log_operation(
            logger,
            operation=operation,
            outcome="uom_not_found",
            level=logging.WARNING,
            uom_id=uom_id,
        )
        raise UnitOfMeasureNotFound(uom_id)
    return uom


def apply_ingredient_command(
    recipe: Recipe, command: IngredientCommand, session: Session
) -> Ingredient:
    """
    Update the matching ingredient of a recipe, or append a new one.

    The recipe is not saved; callers save the aggregate afterwards.

    Args:
        recipe: Loaded recipe aggregate
        command: Ingredient change request
        session: Database session used to resolve the unit of measure

    Returns:
        The updated or newly appended Ingredient

    Raises:
        UnitOfMeasureNotFound: If the command's unit of measure doesn't exist
    """
    uom_id = command.uom.id if command.uom is not None else None
    uom = _resolve_uom(uom_id, "save_ingredient_command", session)

    ingredient = recipe.get_ingredient(command.id)
    if ingredient is not None:
        ingredient.description = command.description
        ingredient.amount = command.amount
        ingredient.unit_of_measure = uom
        return ingredient

    ingredient = command_to_ingredient(command)
    ingredient.unit_of_measure = uom
    recipe.add_ingredient(ingredient)
    return ingredient


def resolve_saved_ingredient(
    recipe: Recipe, ingredient_id: Optional[int], command: IngredientCommand
) -> Ingredient:
    """
    Locate an ingredient in a saved recipe.

    Looks the ingredient up by ID first. If that fails, falls back to
    matching description, amount and unit of measure, which must match
    exactly one ingredient.

    Raises:
        IngredientResolutionError: If neither lookup identifies a single ingredient
    """
    ingredient = recipe.get_ingredient(ingredient_id)
    if ingredient is not None:
        return ingredient

    uom_id = command.uom.id if command.uom is not None else None
    candidates = [
        candidate
        for candidate in recipe.ingredients
        if candidate.matches(command.description, command.amount, uom_id)
    ]
    if len(candidates) == 1:
        return candidates[0]

    log_operation(
        logger,
        operation="resolve_saved_ingredient",
        outcome="ambiguous" if candidates else "no_match",
        level=logging.ERROR,
        recipe_id=recipe.id,
        candidates=len(candidates),
    )
    raise IngredientResolutionError(recipe.id, command.description, len(candidates))


# ============================================================================
# Operations
# ============================================================================


def find_by_recipe_id_and_ingredient_id(
    recipe_id: int, ingredient_id: int, session: Optional[Session] = None
) -> IngredientCommand:
    """
    Get one ingredient of a recipe.

    Args:
        recipe_id: Recipe ID
        ingredient_id: Ingredient ID
        session: Optional database session

    Returns:
        IngredientCommand for the ingredient

    Raises:
        RecipeNotFound: If recipe doesn't exist
        IngredientNotFound: If the recipe has no ingredient with that ID
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> IngredientCommand:
        recipe = _load_recipe(recipe_id, "find_ingredient", sess)

        ingredient = recipe.get_ingredient(ingredient_id)
        if ingredient is None:
            log_operation(
                logger,
                operation="find_ingredient",
                outcome="ingredient_not_found",
                level=logging.WARNING,
                recipe_id=recipe_id,
                ingredient_id=ingredient_id,
            )
            raise IngredientNotFound(recipe_id, ingredient_id)

        return ingredient_to_command(ingredient)

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except ServiceError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to retrieve ingredient {ingredient_id}", e)


def save_ingredient_command(
    command: IngredientCommand, session: Optional[Session] = None
) -> IngredientCommand:
    """
    Update or append an ingredient of a recipe and save the recipe.

    Args:
        command: Ingredient change request; `recipe_id` selects the recipe,
            `id` selects the ingredient to update (None appends)
        session: Optional database session

    Returns:
        IngredientCommand for the saved ingredient, with its ID assigned

    Raises:
        ValidationError: If the command is invalid
        RecipeNotFound: If recipe doesn't exist
        UnitOfMeasureNotFound: If the unit of measure doesn't exist
        IngredientResolutionError: If the saved ingredient can't be identified
        DatabaseError: If database operation fails
    """
    is_valid, errors = validate_ingredient_command(command)
    if not is_valid:
        raise ValidationError(errors)

    def _impl(sess: Session) -> IngredientCommand:
        recipe = _load_recipe(command.recipe_id, "save_ingredient_command", sess)

        existed = recipe.get_ingredient(command.id) is not None
        ingredient = apply_ingredient_command(recipe, command, sess)

        saved_recipe = repositories.save_recipe(recipe, session=sess)
        saved_ingredient = resolve_saved_ingredient(saved_recipe, ingredient.id, command)

        log_operation(
            logger,
            operation="save_ingredient_command",
            outcome="updated" if existed else "appended",
            recipe_id=saved_recipe.id,
            ingredient_id=saved_ingredient.id,
        )
        return ingredient_to_command(saved_ingredient)

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except ServiceError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to save ingredient for recipe {command.recipe_id}", e)


def delete_by_id(recipe_id: int, ingredient_id: int, session: Optional[Session] = None) -> None:
    """
    Remove an ingredient from a recipe.

    Deleting from a missing recipe, or deleting an ingredient the recipe
    doesn't have, does nothing.

    Args:
        recipe_id: Recipe ID
        ingredient_id: Ingredient ID
        session: Optional database session

    Raises:
        DatabaseError: If database operation fails
    """
    logger.debug(f"Deleting ingredient: {recipe_id}:{ingredient_id}")

    def _impl(sess: Session) -> None:
        recipe = repositories.find_recipe_by_id(recipe_id, session=sess)
        if recipe is None:
            logger.debug(f"Recipe Id Not found. Id: {recipe_id}")
            return

        ingredient = recipe.get_ingredient(ingredient_id)
        if ingredient is None:
            logger.debug(f"Ingredient {ingredient_id} not in recipe {recipe_id}")
            return

        recipe.remove_ingredient(ingredient)
        repositories.save_recipe(recipe, session=sess)
        log_operation(
            logger,
            operation="delete_ingredient",
            outcome="deleted",
            recipe_id=recipe_id,
            ingredient_id=ingredient_id,
        )

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to delete ingredient {ingredient_id}", e)
