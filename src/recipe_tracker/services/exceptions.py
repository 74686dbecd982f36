"""Service layer exception classes for Recipe Tracker.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── RecipeNotFound
    ├── IngredientNotFound
    ├── UnitOfMeasureNotFound
    ├── CategoryNotFound
    ├── IngredientResolutionError
    ├── ValidationError
    └── DatabaseError
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class RecipeNotFound(ServiceError):
    """Raised when a recipe cannot be found by ID.

    Example:
        >>> raise RecipeNotFound(1)
        RecipeNotFound: Recipe with ID 1 not found
    """

    def __init__(self, recipe_id):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found")


class IngredientNotFound(ServiceError):
    """Raised when a recipe has no ingredient with the given ID.

    Example:
        >>> raise IngredientNotFound(1, 10)
        IngredientNotFound: Ingredient with ID 10 not found in recipe 1
    """

    def __init__(self, recipe_id, ingredient_id):
        self.recipe_id = recipe_id
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient with ID {ingredient_id} not found in recipe {recipe_id}")


class UnitOfMeasureNotFound(ServiceError):
    """Raised when a unit of measure cannot be found by ID."""

    def __init__(self, uom_id):
        self.uom_id = uom_id
        super().__init__(f"Unit of measure with ID {uom_id} not found")


class CategoryNotFound(ServiceError):
    """Raised when a category cannot be found by ID."""

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Category with ID {category_id} not found")


class IngredientResolutionError(ServiceError):
    """Raised when a saved ingredient cannot be identified in its recipe.

    After a save the ingredient is looked up by ID, then by matching
    description, amount and unit of measure. The match must be unique.

    Args:
        recipe_id: Recipe that was saved
        description: Ingredient description being resolved
        candidates: Number of ingredients matching by value (0 or more than 1)
    """

    def __init__(self, recipe_id, description: str, candidates: int):
        self.recipe_id = recipe_id
        self.description = description
        self.candidates = candidates
        if candidates == 0:
            detail = "no matching ingredient"
        else:
            detail = f"{candidates} ingredients match"
        super().__init__(
            f"Could not resolve saved ingredient '{description}' in recipe {recipe_id}: {detail}"
        )


class ValidationError(ServiceError):
    """Raised when data validation fails."""

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")


class DatabaseError(ServiceError):
    """Raised when a database operation fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
