"""Ingredient co-occurrence analysis."""

import logging
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from recipe_utils.ingredients.models import IngredientPair, PairingResult
from recipe_utils.ingredients.normalization import normalize_ingredient

logger = logging.getLogger(__name__)

# A pair has to recur to be reported, either inside one recipe or across recipes
MIN_PAIR_COUNT = 2


def analyze_pairs(recipes: Iterable, min_count: int = MIN_PAIR_COUNT) -> List[IngredientPair]:
    """Count how often normalized ingredients appear together in recipes.

    Every unordered pair of ingredient positions within a recipe contributes
    one to the count of its pair key. Counts accumulate across recipes, and
    two ingredients that normalize to the same text still form a pair.

    Args:
        recipes: Recipes to analyze. Anything with an ``ingredients`` sequence
            of raw ingredient strings works.
        min_count: Minimum total count for a pair to be kept.

    Returns:
        Pairs ordered by count, highest first. Ties keep the order in which
        the pairs were first seen.
    """
    counts: Dict[Tuple[str, str], int] = {}

    for recipe in recipes:
        if len(recipe.ingredients) < 2:
            continue
        normalized = [normalize_ingredient(ing) for ing in recipe.ingredients]
        for i in range(len(normalized)):
            for j in range(i + 1, len(normalized)):
                key = tuple(sorted((normalized[i], normalized[j])))
                counts[key] = counts.get(key, 0) + 1

    pairs = [
        IngredientPair(ingredients=key, count=count)
        for key, count in counts.items()
        if count >= min_count
    ]
    pairs.sort(key=lambda p: p.count, reverse=True)

    logger.info(f"Kept {len(pairs)} of {len(counts)} ingredient pairs (min count {min_count})")
    return pairs


def search_pairings(pairs: Iterable[IngredientPair], term: str) -> List[PairingResult]:
    """Find the ingredients most often paired with ``term``.

    Args:
        pairs: The pair index produced by :func:`analyze_pairs`.
        term: Ingredient to search for. It is normalized before matching.

    Returns:
        One result per partner ingredient, with counts summed over every pair
        it shares with ``term``, ordered by count, highest first. An empty or
        blank term returns an empty list.

    Examples:
        Given pairs ``"pepper, salt": 3`` and ``"garlic, salt": 2``, searching
        "salt" yields pepper (3) followed by garlic (2).
    """
    if not term.strip():
        return []

    search_term = normalize_ingredient(term.strip())
    results: Dict[str, PairingResult] = {}

    for pair in pairs:
        if search_term not in pair.ingredients:
            continue
        for ingredient in pair.ingredients:
            if ingredient == search_term:
                continue
            result = results.get(ingredient)
            if result is None:
                result = results[ingredient] = PairingResult(
                    ingredient=ingredient, count=0, pairs=[]
                )
            result.count += pair.count
            result.pairs.append(pair.pair)

    return sorted(results.values(), key=lambda r: r.count, reverse=True)


def pairs_to_dataframe(pairs: Iterable[IngredientPair]) -> pd.DataFrame:
    """Convert a pair index into a DataFrame.

    Args:
        pairs: Pairs produced by :func:`analyze_pairs`.

    Returns:
        DataFrame with columns: pair, ingredient_a, ingredient_b, count
    """
    rows = [
        {
            "pair": p.pair,
            "ingredient_a": p.ingredients[0],
            "ingredient_b": p.ingredients[1],
            "count": p.count,
        }
        for p in pairs
    ]
    return pd.DataFrame(rows, columns=["pair", "ingredient_a", "ingredient_b", "count"])
