"""
Ingredient model: a child of exactly one Recipe.

Ingredients are created, changed and removed only through their owning
Recipe (see Recipe.add_ingredient / Recipe.remove_ingredient). The ID is
assigned by the database when the recipe is flushed.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Index
from sqlalchemy.orm import relationship

from recipe_tracker.utils.constants import AMOUNT_DECIMAL_PLACES
from .base import BaseModel


class Ingredient(BaseModel):
    """
    Ingredient used in a recipe.

    Attributes:
        recipe_id: Foreign key to the owning Recipe
        description: Ingredient text (e.g., "ripe avocados")
        amount: Quantity in the referenced unit of measure
        unit_of_measure_id: Foreign key to UnitOfMeasure
    """

    __tablename__ = "ingredients"

    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(10, AMOUNT_DECIMAL_PLACES), nullable=False)
    unit_of_measure_id = Column(
        Integer, ForeignKey("units_of_measure.id", ondelete="RESTRICT"), nullable=False
    )

    recipe = relationship("Recipe", back_populates="ingredients")
    unit_of_measure = relationship("UnitOfMeasure", lazy="joined")

    __table_args__ = (
        Index("idx_ingredient_recipe", "recipe_id"),
        Index("idx_ingredient_uom", "unit_of_measure_id"),
    )

    def matches(self, description, amount, uom_id) -> bool:
        """Return True if description, amount and unit of measure all match."""
        return (
            self.description == description
            and self.amount == amount
            and self.unit_of_measure_id == uom_id
        )

    def __repr__(self) -> str:
        """String representation of ingredient."""
        return (
            f"Ingredient(id={self.id}, recipe_id={self.recipe_id}, "
            f"description='{self.description}', amount={self.amount}, "
            f"unit_of_measure_id={self.unit_of_measure_id})"
        )
