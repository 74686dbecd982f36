"""
Repositories - persistence access for recipes, units of measure and categories.

Each function takes the session of the calling service so that the
load-modify-save sequence of a service operation runs in one transaction.
Lookups return None when the row does not exist; callers decide whether
that is an error.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Category, Recipe, UnitOfMeasure


# ============================================================================
# Recipes
# ============================================================================


def find_recipe_by_id(recipe_id: Optional[int], session: Session) -> Optional[Recipe]:
    """Load a recipe with its ingredients, or None."""
    if recipe_id is None:
        return None
    return session.get(Recipe, recipe_id)


def find_all_recipes(session: Session) -> List[Recipe]:
    """Load every recipe ordered by ID."""
    return session.query(Recipe).order_by(Recipe.id).all()


def save_recipe(recipe: Recipe, session: Session) -> Recipe:
    """
    Persist a recipe aggregate with its ingredients and notes.

    The session is flushed before returning, so ingredients appended to
    the recipe have their database IDs assigned when this returns.

    Returns:
        The persisted Recipe
    """
    session.add(recipe)
    session.flush()
    return recipe


def delete_recipe(recipe: Recipe, session: Session) -> None:
    """Delete a recipe; ingredients and notes cascade."""
    session.delete(recipe)
    session.flush()


# ============================================================================
# Units of measure
# ============================================================================


def find_uom_by_id(uom_id: Optional[int], session: Session) -> Optional[UnitOfMeasure]:
    if uom_id is None:
        return None
    return session.get(UnitOfMeasure, uom_id)


def find_uom_by_description(description: str, session: Session) -> Optional[UnitOfMeasure]:
    return session.query(UnitOfMeasure).filter(UnitOfMeasure.description == description).first()


def find_all_uoms(session: Session) -> List[UnitOfMeasure]:
    return session.query(UnitOfMeasure).order_by(UnitOfMeasure.id).all()


# ============================================================================
# Categories
# ============================================================================


def find_category_by_id(category_id: Optional[int], session: Session) -> Optional[Category]:
    if category_id is None:
        return None
    return session.get(Category, category_id)


def find_category_by_description(description: str, session: Session) -> Optional[Category]:
    return session.query(Category).filter(Category.description == description).first()
