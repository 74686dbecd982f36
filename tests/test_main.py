"""Tests for the command-line entry point."""

from decimal import Decimal

from recipe_tracker.main import build_parser, main
from recipe_tracker.services import recipe_service


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: recipe-tracker" in capsys.readouterr().out


def test_parser_ids_are_ints():
    args = build_parser().parse_args(["show-ingredient", "1", "10"])
    assert (args.recipe_id, args.ingredient_id) == (1, 10)


def test_list_uoms(uoms, capsys):
    assert main(["list-uoms"]) == 0
    out = capsys.readouterr().out
    assert "Teaspoon" in out
    assert "Pint" in out


def test_list_recipes(flour_recipe, capsys):
    assert main(["list-recipes"]) == 0
    assert "Pancakes  (1 ingredients)" in capsys.readouterr().out


def test_show_ingredient(flour_recipe, flour, capsys):
    assert main(["show-ingredient", str(flour_recipe.id), str(flour.id)]) == 0
    assert "Flour" in capsys.readouterr().out


def test_show_missing_ingredient_reports_error(flour_recipe, capsys):
    assert main(["show-ingredient", str(flour_recipe.id), "999"]) == 1
    assert "Ingredient with ID 999 not found" in capsys.readouterr().err


def test_delete_ingredient(flour_recipe, flour, capsys):
    assert main(["delete-ingredient", str(flour_recipe.id), str(flour.id)]) == 0
    assert main(["delete-ingredient", str(flour_recipe.id), str(flour.id)]) == 0
    assert main(["show-ingredient", str(flour_recipe.id), str(flour.id)]) == 1


def test_save_ingredient_updates_in_place(flour_recipe, flour, uoms, capsys):
    recipe_id, flour_id = flour_recipe.id, flour.id
    argv = ["save-ingredient", str(recipe_id), "Sugar", "1.5", str(uoms["Cup"].id)]
    assert main(argv + ["--id", str(flour_id)]) == 0
    out = capsys.readouterr().out
    assert f"Saved ingredient {flour_id}:" in out
    assert "Cup  Sugar" in out

    ingredients = recipe_service.find_by_id(recipe_id).ingredients
    assert {(i.id, i.description, i.amount) for i in ingredients} == {
        (flour_id, "Sugar", Decimal("1.5"))
    }


def test_save_ingredient_appends_without_id(flour_recipe, flour, uoms, capsys):
    recipe_id, flour_id = flour_recipe.id, flour.id
    argv = ["save-ingredient", str(recipe_id), "Salt", "0.25", str(uoms["Teaspoon"].id)]
    assert main(argv) == 0
    assert "Salt" in capsys.readouterr().out

    ingredients = recipe_service.find_by_id(recipe_id).ingredients
    assert len(ingredients) == 2
    salt = next(i for i in ingredients if i.description == "Salt")
    assert salt.id != flour_id
    assert salt.amount == Decimal("0.25")


def test_save_ingredient_invalid_amount_reports_error(flour_recipe, uoms, capsys):
    argv = ["save-ingredient", str(flour_recipe.id), "Salt", "lots", str(uoms["Cup"].id)]
    assert main(argv) == 1
    assert "Amount: Must be a valid number" in capsys.readouterr().err
