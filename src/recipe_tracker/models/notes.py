"""
Notes model holding free-form text attached to a single recipe.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class Notes(BaseModel):
    """
    Notes model (one-to-one with Recipe).

    Attributes:
        recipe_id: Foreign key to the owning Recipe
        recipe_notes: Note text
    """

    __tablename__ = "notes"

    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=True, unique=True
    )
    recipe_notes = Column(Text, nullable=True)

    recipe = relationship("Recipe", back_populates="notes")

    def __repr__(self) -> str:
        """String representation of notes."""
        return f"Notes(id={self.id}, recipe_id={self.recipe_id})"
