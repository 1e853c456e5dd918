"""Shopping list utilities."""

from .shopping_list import UNKNOWN, SelectedIngredient, ShoppingList

__all__ = ["UNKNOWN", "SelectedIngredient", "ShoppingList"]
