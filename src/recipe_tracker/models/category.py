"""
Category model for recipe grouping (e.g., "Italian", "Mexican").
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Category(BaseModel):
    """
    Category model. Recipes and categories are many-to-many.

    Attributes:
        description: Unique category name
        recipes: Recipes tagged with this category
    """

    __tablename__ = "categories"

    description = Column(String(100), unique=True, nullable=False, index=True)

    recipes = relationship(
        "Recipe",
        secondary="recipe_category",
        back_populates="categories",
        collection_class=set,
        lazy="select",
    )

    def __repr__(self) -> str:
        """String representation of category."""
        return f"Category(id={self.id}, description='{self.description}')"
