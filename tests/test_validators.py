"""Tests for input validation functions."""

from decimal import Decimal

import pytest

from recipe_tracker.services.commands import (
    IngredientCommand,
    RecipeCommand,
    UnitOfMeasureCommand,
)
from recipe_tracker.utils.validators import (
    validate_ingredient_command,
    validate_non_negative_number,
    validate_recipe_command,
    validate_required_string,
    validate_string_length,
)


class TestBasicValidators:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required_string_rejects_blank(self, value):
        is_valid, error = validate_required_string(value, "Name")
        assert not is_valid
        assert error.startswith("Name:")

    def test_required_string_accepts_text(self):
        assert validate_required_string("Flour") == (True, "")

    def test_string_length(self):
        assert validate_string_length("abc", 3) == (True, "")
        is_valid, error = validate_string_length("abcd", 3, "Code")
        assert not is_valid
        assert "3 characters" in error

    @pytest.mark.parametrize("value", [0, "1.5", Decimal("2"), 3.25])
    def test_non_negative_accepts(self, value):
        assert validate_non_negative_number(value)[0]

    @pytest.mark.parametrize("value", [-1, "abc", None, True, "NaN"])
    def test_non_negative_rejects(self, value):
        assert not validate_non_negative_number(value)[0]


class TestValidateIngredientCommand:
    def test_valid(self):
        command = IngredientCommand(
            recipe_id=1, description="Salt", amount=Decimal("0.5"), uom=UnitOfMeasureCommand(id=1)
        )
        assert validate_ingredient_command(command) == (True, [])

    def test_collects_all_errors(self):
        command = IngredientCommand(description=None, amount=None)
        is_valid, errors = validate_ingredient_command(command)
        assert not is_valid
        assert len(errors) == 4

    def test_uom_without_id_rejected(self):
        command = IngredientCommand(
            recipe_id=1, description="Salt", amount=1, uom=UnitOfMeasureCommand(description="Cup")
        )
        is_valid, errors = validate_ingredient_command(command)
        assert not is_valid
        assert errors == ["Unit of measure: This field is required"]

    def test_amount_out_of_range(self):
        command = IngredientCommand(
            recipe_id=1, description="Salt", amount=10**9, uom=UnitOfMeasureCommand(id=1)
        )
        is_valid, errors = validate_ingredient_command(command)
        assert not is_valid
        assert "Amount: Must be between" in errors[0]


class TestValidateRecipeCommand:
    def test_valid_minimal(self):
        assert validate_recipe_command(RecipeCommand(description="Soup")) == (True, [])

    def test_negative_times_rejected(self):
        is_valid, errors = validate_recipe_command(
            RecipeCommand(description="Soup", prep_time=-5, servings=-1)
        )
        assert not is_valid
        assert any(e.startswith("Prep time") for e in errors)
        assert any(e.startswith("Servings") for e in errors)

    def test_nested_ingredients_validated(self):
        command = RecipeCommand(
            description="Soup",
            ingredients=[IngredientCommand(description="Water", amount=-1)],
        )
        is_valid, errors = validate_recipe_command(command)
        assert not is_valid
        assert len(errors) == 2

    def test_nested_ingredients_get_length_and_range_checks(self):
        command = RecipeCommand(
            description="Soup",
            ingredients=[
                IngredientCommand(
                    description="Water", amount=Decimal("0.5"), uom=UnitOfMeasureCommand(id=1)
                ),
                IngredientCommand(
                    description="x" * 256, amount=10**9, uom=UnitOfMeasureCommand(id=1)
                ),
            ],
        )
        is_valid, errors = validate_recipe_command(command)
        assert not is_valid
        assert len(errors) == 2
        assert errors[0].startswith("Ingredient 2 Description: Must be 255 characters or less")
        assert errors[1].startswith("Ingredient 2 Amount: Must be between")
