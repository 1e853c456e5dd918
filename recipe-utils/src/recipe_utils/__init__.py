"""Recipe Utils - Utilities for recipe text parsing, ingredient pairing and shopping lists."""

__version__ = "0.1.0"

from . import ingredients, recipes, shopping
from .session import RecipeSession

__all__ = ["ingredients", "recipes", "shopping", "RecipeSession"]
