"""Recipe parsing and search utilities."""

from .parsing import (
    ParsedRecipes,
    Recipe,
    StoreEntry,
    parse_recipe_file,
    parse_recipe_text,
)
from .search import lookup_by_name, search_by_ingredient

__all__ = [
    "Recipe",
    "StoreEntry",
    "ParsedRecipes",
    "parse_recipe_text",
    "parse_recipe_file",
    "search_by_ingredient",
    "lookup_by_name",
]
