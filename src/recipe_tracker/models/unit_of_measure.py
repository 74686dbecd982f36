"""
Unit of measure reference model.

Units are seeded on database initialization and are only ever looked up
by the services; ingredients reference them by ID.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class UnitOfMeasure(BaseModel):
    """
    Reference table for ingredient measurement units.

    Attributes:
        description: Unique unit name (e.g., "Teaspoon", "Cup")
    """

    __tablename__ = "units_of_measure"

    description = Column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        """Return string representation of UnitOfMeasure."""
        return f"UnitOfMeasure(id={self.id}, description='{self.description}')"
