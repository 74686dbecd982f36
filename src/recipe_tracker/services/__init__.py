"""Services package - Business logic layer for Recipe Tracker.

Architecture:
- Services: Stateless functions organized by domain (recipe, ingredient, unit of measure)
- Transactions: Managed via session_scope() context manager
- Exceptions: Consistent error handling via ServiceError hierarchy
- Validation: Input validation before database operations

Service Modules:
- ingredient_service: Ingredient lookup, save (update-or-append) and delete
- recipe_service: Recipe listing and management
- unit_of_measure_service: Unit of measure listing

Infrastructure:
- database: Session management and database utilities
- repositories: Recipe, unit of measure and category persistence access
- commands / converters: Detached command objects and entity conversion
- exceptions: Custom exception classes for service layer errors
- logging_utils: Structured service logging
"""

from . import (
    database,
    ingredient_service,
    recipe_service,
    unit_of_measure_service,
)
from .exceptions import (
    ServiceError,
    RecipeNotFound,
    IngredientNotFound,
    UnitOfMeasureNotFound,
    CategoryNotFound,
    IngredientResolutionError,
    ValidationError,
    DatabaseError,
)

__all__ = [
    "database",
    "ingredient_service",
    "recipe_service",
    "unit_of_measure_service",
    "ServiceError",
    "RecipeNotFound",
    "IngredientNotFound",
    "UnitOfMeasureNotFound",
    "CategoryNotFound",
    "IngredientResolutionError",
    "ValidationError",
    "DatabaseError",
]
