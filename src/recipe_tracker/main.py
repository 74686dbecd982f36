"""
Command-line entry point for Recipe Tracker.

Usage Examples:
    # Create tables and seed units of measure and categories
    recipe-tracker init

    # Load the sample recipes
    recipe-tracker load-sample

    # List recipes and units of measure
    recipe-tracker list-recipes
    recipe-tracker list-uoms

    # Update ingredient 3 of recipe 1, or append a new one
    recipe-tracker save-ingredient 1 "Kosher salt" 0.5 1 --id 3
    recipe-tracker save-ingredient 1 "Lime juice" 1 2

    # Show or delete one ingredient of a recipe
    recipe-tracker show-ingredient 1 3
    recipe-tracker delete-ingredient 1 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from recipe_tracker.services import ingredient_service, recipe_service, unit_of_measure_service
from recipe_tracker.services.commands import IngredientCommand, UnitOfMeasureCommand
from recipe_tracker.services.database import initialize_app_database
from recipe_tracker.services.exceptions import ServiceError
from recipe_tracker.utils.config import get_config
from recipe_tracker.utils.sample_data import load_sample_recipes


def cmd_init(args) -> int:
    initialize_app_database()
    print(f"Database ready at {get_config().database_url}")
    return 0


def cmd_load_sample(args) -> int:
    initialize_app_database()
    created = load_sample_recipes()
    print(f"Loaded {created} sample recipe(s)")
    return 0


def cmd_list_recipes(args) -> int:
    recipes = sorted(recipe_service.get_recipes(), key=lambda recipe: recipe.id)
    if not recipes:
        print("No recipes found")
        return 0
    for recipe in recipes:
        print(f"{recipe.id:>4}  {recipe.description}  ({len(recipe.ingredients)} ingredients)")
    return 0


def cmd_list_uoms(args) -> int:
    for uom in sorted(unit_of_measure_service.list_all_uoms(), key=lambda uom: uom.id):
        print(f"{uom.id:>4}  {uom.description}")
    return 0


def cmd_show_ingredient(args) -> int:
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(
        args.recipe_id, args.ingredient_id
    )
    uom = ingredient.uom.description if ingredient.uom is not None else ""
    print(f"{ingredient.id:>4}  {ingredient.amount} {uom}  {ingredient.description}")
    return 0


def cmd_save_ingredient(args) -> int:
    command = IngredientCommand(
        id=args.id,
        recipe_id=args.recipe_id,
        description=args.description,
        amount=args.amount,
        uom=UnitOfMeasureCommand(id=args.uom_id),
    )
    saved = ingredient_service.save_ingredient_command(command)
    uom = saved.uom.description if saved.uom is not None else ""
    print(f"Saved ingredient {saved.id}: {saved.amount} {uom}  {saved.description}")
    return 0


def cmd_delete_ingredient(args) -> int:
    ingredient_service.delete_by_id(args.recipe_id, args.ingredient_id)
    print(f"Ingredient {args.ingredient_id} removed from recipe {args.recipe_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="recipe-tracker",
        description="Manage recipes and their ingredients",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    init_parser = subparsers.add_parser("init", help="Create tables and seed reference data")
    init_parser.set_defaults(func=cmd_init)

    sample_parser = subparsers.add_parser("load-sample", help="Load the sample recipes")
    sample_parser.set_defaults(func=cmd_load_sample)

    list_parser = subparsers.add_parser("list-recipes", help="List all recipes")
    list_parser.set_defaults(func=cmd_list_recipes)

    uom_parser = subparsers.add_parser("list-uoms", help="List units of measure")
    uom_parser.set_defaults(func=cmd_list_uoms)

    show_parser = subparsers.add_parser("show-ingredient", help="Show one ingredient of a recipe")
    show_parser.add_argument("recipe_id", type=int)
    show_parser.add_argument("ingredient_id", type=int)
    show_parser.set_defaults(func=cmd_show_ingredient)

    save_parser = subparsers.add_parser(
        "save-ingredient",
        help="Update an ingredient of a recipe, or append it when --id is not in the recipe",
    )
    save_parser.add_argument("recipe_id", type=int)
    save_parser.add_argument("description")
    save_parser.add_argument("amount")
    save_parser.add_argument("uom_id", type=int)
    save_parser.add_argument("--id", type=int, default=None, help="Ingredient ID to update")
    save_parser.set_defaults(func=cmd_save_ingredient)

    delete_parser = subparsers.add_parser(
        "delete-ingredient", help="Remove an ingredient from a recipe"
    )
    delete_parser.add_argument("recipe_id", type=int)
    delete_parser.add_argument("ingredient_id", type=int)
    delete_parser.set_defaults(func=cmd_delete_ingredient)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ServiceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
