"""Command line interface for searching a recipe file and building a shopping list."""

import argparse
import logging
from typing import List, Optional

from recipe_utils.ingredients.normalization import normalize_ingredient
from recipe_utils.ingredients.pairing import MIN_PAIR_COUNT, pairs_to_dataframe
from recipe_utils.session import RecipeSession
from recipe_utils.shopping.shopping_list import UNKNOWN

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-utils",
        description="Search recipes, explore ingredient pairings and build shopping lists",
    )
    parser.add_argument(
        "--recipes",
        type=str,
        required=True,
        help="Path to the recipe text file",
    )
    parser.add_argument(
        "--min-count",
        type=int,
        default=MIN_PAIR_COUNT,
        help="Minimum number of times a pair must occur to be counted",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable informational logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Find recipes by ingredient")
    search.add_argument("term", nargs="?", default="", help="Ingredient text to look for")

    lookup = subparsers.add_parser("lookup", help="Show a recipe by name")
    lookup.add_argument("name", help="Part of the recipe name")

    pairings = subparsers.add_parser(
        "pairings", help="Show ingredients commonly paired with an ingredient"
    )
    pairings.add_argument("term", help="Ingredient to find pairings for")

    pairs = subparsers.add_parser("pairs", help="List all recurring ingredient pairs")
    pairs.add_argument("--output", type=str, help="Write the pairs to this CSV file")

    shopping = subparsers.add_parser(
        "shopping-list", help="Build a shopping list from whole recipes"
    )
    shopping.add_argument("names", nargs="+", help="Recipe names to shop for")
    shopping.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="INGREDIENT",
        help="Ingredient to leave off the list (repeatable)",
    )
    shopping.add_argument("--output", type=str, help="Save the list to this file")
    shopping.add_argument(
        "--with-location",
        action="store_true",
        help="Include store and aisle on each line",
    )
    return parser


def cmd_search(session: RecipeSession, args: argparse.Namespace) -> int:
    recipes = session.search_by_ingredient(args.term)
    if not recipes:
        print("No recipes found for the ingredient.")
        return 0
    for recipe in recipes:
        print(recipe.name)
    return 0


def cmd_lookup(session: RecipeSession, args: argparse.Namespace) -> int:
    recipe = session.lookup_by_name(args.name)
    if recipe is None:
        print("Recipe not found")
        return 1

    print(f"Ingredients for {recipe.name}:")
    for ingredient in recipe.ingredients:
        entry = session.store_list.get(normalize_ingredient(ingredient))
        if entry is None:
            print(f"  - {ingredient}")
        else:
            print(f"  - {ingredient} ({entry.store}, Aisle {entry.aisle})")
    return 0


def cmd_pairings(session: RecipeSession, args: argparse.Namespace) -> int:
    results = session.search_pairings(args.term)
    if not results:
        print("No pairings found")
        return 0
    for result in results:
        print(f"{result.ingredient} ({result.count} recipes)")
        for pair in result.pairs:
            print(f"  {pair}")
    return 0


def cmd_pairs(session: RecipeSession, args: argparse.Namespace) -> int:
    if args.output:
        df = pairs_to_dataframe(session.pairs)
        df.to_csv(args.output, index=False)
        print(f"Wrote {len(df)} pairs to {args.output}")
        return 0
    for pair in session.pairs:
        print(f"{pair.count:>4}  {pair.pair}")
    return 0


def cmd_shopping_list(session: RecipeSession, args: argparse.Namespace) -> int:
    status = 0
    for name in args.names:
        if session.add_recipe_to_shopping_list(name) is None:
            logger.warning(f"Recipe not found: {name}")
            status = 1
    for ingredient in args.remove:
        session.remove_from_shopping_list(ingredient)

    if args.output:
        path = session.shopping_list.save(args.output, args.with_location)
        print(f"Saved {len(session.shopping_list)} ingredients to {path}")
    else:
        print(session.export_shopping_list(args.with_location))

    unknown = sum(1 for item in session.shopping_list if item.store == UNKNOWN)
    if unknown:
        logger.info(f"{unknown} ingredients have no store list entry")
    return status


COMMANDS = {
    "search": cmd_search,
    "lookup": cmd_lookup,
    "pairings": cmd_pairings,
    "pairs": cmd_pairs,
    "shopping-list": cmd_shopping_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the recipe-utils command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        session = RecipeSession.from_file(args.recipes, min_pair_count=args.min_count)
    except OSError as e:
        logger.error(f"Could not read recipe file {args.recipes}: {e}")
        return 1

    return COMMANDS[args.command](session, args)


if __name__ == "__main__":
    raise SystemExit(main())
