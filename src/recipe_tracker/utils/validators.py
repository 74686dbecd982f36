"""
Input validation functions for the Recipe Tracker application.

This module provides validation functions for incoming commands:
- Numeric validation (non-negative, ranges)
- String validation (length, required fields)
- Ingredient and recipe command validation
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from .constants import MAX_AMOUNT, MAX_DESCRIPTION_LENGTH, MAX_URL_LENGTH

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Must be a valid number"
ERROR_INVALID_NON_NEGATIVE = "Must be zero or greater"


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    return True, ""


def validate_string_length(
    value: Optional[str], max_length: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a string doesn't exceed maximum length.

    Args:
        value: The string value to validate
        max_length: Maximum allowed length
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value and len(value) > max_length:
        return False, f"{field_name}: Must be {max_length} characters or less"
    return True, ""


def validate_non_negative_number(value, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is a non-negative number (>= 0).

    Args:
        value: The value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or isinstance(value, bool):
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    try:
        num_value = Decimal(str(value))
    except InvalidOperation:
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if not num_value.is_finite():
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if num_value < 0:
        return False, f"{field_name}: {ERROR_INVALID_NON_NEGATIVE}"
    return True, ""


def validate_number_range(
    value, min_value: float, max_value: float, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a number is within a specified range.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        num_value = float(value)
    except (ValueError, TypeError):
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if num_value < min_value or num_value > max_value:
        return False, f"{field_name}: Must be between {min_value} and {max_value}"
    return True, ""


def _validate_ingredient_fields(command) -> list:
    """Field checks shared by standalone and nested ingredient commands."""
    errors = []

    is_valid, error = validate_required_string(command.description, "Description")
    if not is_valid:
        errors.append(error)
    else:
        is_valid, error = validate_string_length(
            command.description, MAX_DESCRIPTION_LENGTH, "Description"
        )
        if not is_valid:
            errors.append(error)

    is_valid, error = validate_non_negative_number(command.amount, "Amount")
    if not is_valid:
        errors.append(error)
    else:
        is_valid, error = validate_number_range(command.amount, 0, MAX_AMOUNT, "Amount")
        if not is_valid:
            errors.append(error)

    if command.uom is None or command.uom.id is None:
        errors.append(f"Unit of measure: {ERROR_REQUIRED_FIELD}")

    return errors


def validate_ingredient_command(command) -> Tuple[bool, list]:
    """
    Validate an ingredient command before it is applied to a recipe.

    Args:
        command: IngredientCommand to validate

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if command.recipe_id is None:
        errors.append(f"Recipe: {ERROR_REQUIRED_FIELD}")

    errors.extend(_validate_ingredient_fields(command))

    return len(errors) == 0, errors


def validate_recipe_command(command) -> Tuple[bool, list]:  # noqa: C901
    """
    Validate a recipe command.

    Ingredient commands nested in the recipe are validated individually;
    their recipe_id is not required because the recipe may not exist yet.

    Args:
        command: RecipeCommand to validate

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    is_valid, error = validate_required_string(command.description, "Description")
    if not is_valid:
        errors.append(error)
    else:
        is_valid, error = validate_string_length(
            command.description, MAX_DESCRIPTION_LENGTH, "Description"
        )
        if not is_valid:
            errors.append(error)

    for field_name, value in (
        ("Prep time", command.prep_time),
        ("Cook time", command.cook_time),
        ("Servings", command.servings),
    ):
        if value is not None:
            is_valid, error = validate_non_negative_number(value, field_name)
            if not is_valid:
                errors.append(error)

    is_valid, error = validate_string_length(command.source, MAX_DESCRIPTION_LENGTH, "Source")
    if not is_valid:
        errors.append(error)

    is_valid, error = validate_string_length(command.url, MAX_URL_LENGTH, "URL")
    if not is_valid:
        errors.append(error)

    for index, ingredient in enumerate(command.ingredients, start=1):
        errors.extend(
            f"Ingredient {index} {error}" for error in _validate_ingredient_fields(ingredient)
        )

    return len(errors) == 0, errors
