"""In-memory session state for a loaded recipe file."""

import logging
import pathlib
from typing import Dict, List, Optional, Union

from recipe_utils.ingredients.models import IngredientPair, PairingResult
from recipe_utils.ingredients.pairing import MIN_PAIR_COUNT, analyze_pairs, search_pairings
from recipe_utils.recipes.parsing import (
    ParsedRecipes,
    Recipe,
    StoreEntry,
    parse_recipe_file,
    parse_recipe_text,
)
from recipe_utils.recipes.search import lookup_by_name, search_by_ingredient
from recipe_utils.shopping.shopping_list import ShoppingList

logger = logging.getLogger(__name__)


class RecipeSession:
    """Recipes, store list, pair index and shopping list for one loaded file.

    Loading new text replaces all state, including the shopping list.

    Attributes:
        recipes: Parsed recipes in file order
        store_list: Mapping of normalized ingredient name to StoreEntry
        pairs: Ingredient pairs ordered by count
        shopping_list: Ingredients selected so far
    """

    def __init__(self, min_pair_count: int = MIN_PAIR_COUNT):
        self.min_pair_count = min_pair_count
        self.recipes: List[Recipe] = []
        self.store_list: Dict[str, StoreEntry] = {}
        self.pairs: List[IngredientPair] = []
        self.shopping_list = ShoppingList(self.store_list)

    @classmethod
    def from_file(
        cls, path: Union[str, pathlib.Path], min_pair_count: int = MIN_PAIR_COUNT
    ) -> "RecipeSession":
        session = cls(min_pair_count=min_pair_count)
        session.load_file(path)
        return session

    def load_text(self, text: str) -> None:
        self._load(parse_recipe_text(text))

    def load_file(self, path: Union[str, pathlib.Path]) -> None:
        logger.info(f"Loading recipes from {path}")
        self._load(parse_recipe_file(path))

    def _load(self, parsed: ParsedRecipes) -> None:
        self.recipes = parsed.recipes
        self.store_list = parsed.store_list
        self.pairs = analyze_pairs(self.recipes, min_count=self.min_pair_count)
        self.shopping_list = ShoppingList(self.store_list)

    def search_by_ingredient(self, term: str) -> List[Recipe]:
        return search_by_ingredient(self.recipes, term)

    def lookup_by_name(self, term: str) -> Optional[Recipe]:
        return lookup_by_name(self.recipes, term)

    def search_pairings(self, term: str) -> List[PairingResult]:
        return search_pairings(self.pairs, term)

    def add_to_shopping_list(self, ingredient: str, recipe: str) -> bool:
        return self.shopping_list.add(ingredient, recipe)

    def add_recipe_to_shopping_list(self, name: str) -> Optional[Recipe]:
        """Add every ingredient of the recipe matching ``name``.

        Returns:
            The recipe that was added, or None if no recipe matched.
        """
        recipe = self.lookup_by_name(name)
        if recipe is None:
            return None
        for ingredient in recipe.ingredients:
            self.shopping_list.add(ingredient, recipe.name)
        return recipe

    def remove_from_shopping_list(self, ingredient: str) -> int:
        return self.shopping_list.remove(ingredient)

    def export_shopping_list(self, include_location: bool = False) -> str:
        return self.shopping_list.export(include_location)
