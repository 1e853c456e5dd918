"""Recipe lookups by ingredient and by name."""

from typing import Iterable, List, Optional

from recipe_utils.recipes.parsing import Recipe


def search_by_ingredient(recipes: Iterable[Recipe], term: str) -> List[Recipe]:
    """Find recipes with an ingredient containing ``term``.

    Matching is a case-insensitive substring test against the raw ingredient
    text, not the normalized form.

    Args:
        recipes: Recipes to search.
        term: Text to look for. An empty term matches every recipe.

    Returns:
        Matching recipes in their original order.
    """
    term = term.lower().strip()
    if not term:
        return list(recipes)
    return [r for r in recipes if any(term in ing.lower() for ing in r.ingredients)]


def lookup_by_name(recipes: Iterable[Recipe], term: str) -> Optional[Recipe]:
    """Return the first recipe whose name contains ``term``, or None."""
    term = term.lower().strip()
    return next((r for r in recipes if term in r.name.lower()), None)
