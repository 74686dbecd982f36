"""
Database models package.

This package contains all SQLAlchemy ORM models for the application.
"""

from .base import Base, BaseModel
from .enums import Difficulty
from .unit_of_measure import UnitOfMeasure
from .category import Category
from .notes import Notes
from .ingredient import Ingredient
from .recipe import Recipe, recipe_category

__all__ = [
    "Base",
    "BaseModel",
    "Difficulty",
    "UnitOfMeasure",
    "Category",
    "Notes",
    "Ingredient",
    "Recipe",
    "recipe_category",
]
