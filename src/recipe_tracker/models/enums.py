"""
Enumerations for recipe models.

- Difficulty: How demanding a recipe is to prepare
"""

from enum import Enum


class Difficulty(str, Enum):
    """
    Recipe difficulty.

    Values:
        EASY: Little or no technique required
        MODERATE: Some preparation steps
        KIND_OF_HARD: Several techniques or timed steps
        HARD: Advanced technique
    """

    EASY = "easy"
    MODERATE = "moderate"
    KIND_OF_HARD = "kind_of_hard"
    HARD = "hard"
