"""
Recipe model: the aggregate root for ingredients and notes.

This module contains:
- Recipe: Recipe metadata, owning its ingredients and notes
- recipe_category: Association table linking recipes to categories
"""

from typing import Dict, Optional

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from .base import Base, BaseModel
from .enums import Difficulty


recipe_category = Table(
    "recipe_category",
    Base.metadata,
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    ),
)


class Recipe(BaseModel):
    """
    Recipe model.

    The recipe owns its ingredients: removing an ingredient from the
    ``ingredients`` set deletes it on the next flush.

    Attributes:
        description: Recipe title (required)
        prep_time: Preparation time in minutes
        cook_time: Cooking time in minutes
        servings: Number of servings
        source: Where the recipe came from
        url: Link to the original recipe
        directions: Preparation steps
        difficulty: Difficulty enum
        notes: One-to-one Notes
        ingredients: Set of Ingredient children
        categories: Set of Category
    """

    __tablename__ = "recipes"

    description = Column(String(255), nullable=False)
    prep_time = Column(Integer, nullable=True)
    cook_time = Column(Integer, nullable=True)
    servings = Column(Integer, nullable=True)
    source = Column(String(255), nullable=True)
    url = Column(String(500), nullable=True)
    directions = Column(Text, nullable=True)
    difficulty = Column(Enum(Difficulty), nullable=True)

    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        collection_class=set,
        lazy="joined",
    )
    notes = relationship(
        "Notes",
        back_populates="recipe",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="joined",
    )
    categories = relationship(
        "Category",
        secondary=recipe_category,
        back_populates="recipes",
        collection_class=set,
        lazy="selectin",
    )

    __table_args__ = (Index("idx_recipe_description", "description"),)

    def __repr__(self) -> str:
        """String representation of recipe."""
        return f"Recipe(id={self.id}, description='{self.description}')"

    @property
    def ingredients_by_id(self) -> Dict[int, "Ingredient"]:  # noqa: F821
        """Persisted ingredients keyed by ID. Unflushed ingredients have no ID and are skipped."""
        return {
            ingredient.id: ingredient
            for ingredient in self.ingredients
            if ingredient.id is not None
        }

    def get_ingredient(self, ingredient_id: Optional[int]):
        """
        Look up one of this recipe's ingredients by ID.

        Args:
            ingredient_id: Ingredient ID, may be None for a new ingredient

        Returns:
            The Ingredient, or None if the recipe has no ingredient with that ID
        """
        if ingredient_id is None:
            return None
        return self.ingredients_by_id.get(ingredient_id)

    def add_ingredient(self, ingredient) -> None:
        """Attach an ingredient to this recipe."""
        ingredient.recipe = self
        self.ingredients.add(ingredient)

    def remove_ingredient(self, ingredient) -> None:
        """
        Detach an ingredient from this recipe.

        Removing it from the collection also clears ingredient.recipe
        (back_populates); delete-orphan removes the row on flush.
        """
        self.ingredients.discard(ingredient)

    def set_notes(self, notes) -> None:
        """Replace this recipe's notes; the previous notes are deleted on flush."""
        self.notes = notes
