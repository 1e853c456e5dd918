"""Ingredient normalization and pairing utilities."""

from .models import IngredientPair, PairingResult
from .normalization import normalize_ingredient
from .pairing import (
    MIN_PAIR_COUNT,
    analyze_pairs,
    pairs_to_dataframe,
    search_pairings,
)

__all__ = [
    "normalize_ingredient",
    "IngredientPair",
    "PairingResult",
    "MIN_PAIR_COUNT",
    "analyze_pairs",
    "search_pairings",
    "pairs_to_dataframe",
]
