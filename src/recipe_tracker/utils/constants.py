"""
Constants for the Recipe Tracker application.

This module defines system-wide constants including:
- Application metadata
- Reference data seeded on initialization (units of measure, categories)
- Field limits used by validation
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Recipe Tracker"
APP_VERSION = "0.1.0"
DATABASE_VERSION = "1.0"
DATABASE_FILENAME = "recipe_tracker.db"

# ============================================================================
# Reference Data
# ============================================================================

# Units of measure available to every ingredient
UNITS_OF_MEASURE: List[str] = [
    "Teaspoon",
    "Tablespoon",
    "Cup",
    "Pinch",
    "Ounce",
    "Each",
    "Dash",
    "Pint",
]

# Recipe categories
RECIPE_CATEGORIES: List[str] = [
    "American",
    "Italian",
    "Mexican",
    "Fast Food",
]

# ============================================================================
# Field Limits
# ============================================================================

MAX_DESCRIPTION_LENGTH = 255
MAX_URL_LENGTH = 500
MAX_AMOUNT = 100000

# Ingredient amounts are stored with this many decimal places
AMOUNT_DECIMAL_PLACES = 3
