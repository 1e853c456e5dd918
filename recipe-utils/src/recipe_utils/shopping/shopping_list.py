"""Shopping list built from selected recipe ingredients."""

import dataclasses
import logging
import pathlib
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

import pandas as pd

from recipe_utils.ingredients.normalization import normalize_ingredient
from recipe_utils.recipes.parsing import StoreEntry

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
DEFAULT_EXPORT_FILENAME = "selected_ingredients.txt"


@dataclasses.dataclass(frozen=True)
class SelectedIngredient:
    ingredient: str
    recipe: str
    store: str = UNKNOWN
    aisle: str = UNKNOWN

    def format_line(self, include_location: bool = False) -> str:
        if not include_location:
            return self.ingredient
        return f"{self.ingredient} ({self.store}, Aisle {self.aisle})"


class ShoppingList:
    """Ingredients picked from recipes, annotated with store and aisle.

    An ingredient is listed at most once per recipe. Store and aisle come
    from the store list, keyed by normalized ingredient name, and fall back
    to "Unknown" when the ingredient isn't listed.

    Attributes:
        store_list: Mapping of normalized ingredient name to StoreEntry
    """

    def __init__(self, store_list: Optional[Mapping[str, StoreEntry]] = None):
        self.store_list = store_list if store_list is not None else {}
        self._items: List[SelectedIngredient] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SelectedIngredient]:
        return iter(self._items)

    @property
    def items(self) -> Tuple[SelectedIngredient, ...]:
        return tuple(self._items)

    def add(self, ingredient: str, recipe: str) -> bool:
        """Add an ingredient picked from a recipe.

        Args:
            ingredient: Raw ingredient text.
            recipe: Name of the recipe it came from.

        Returns:
            True if added, False if the pair was already on the list.
        """
        if any(i.ingredient == ingredient and i.recipe == recipe for i in self._items):
            return False

        entry = self.store_list.get(normalize_ingredient(ingredient))
        if entry is None:
            selected = SelectedIngredient(ingredient=ingredient, recipe=recipe)
        else:
            selected = SelectedIngredient(
                ingredient=ingredient,
                recipe=recipe,
                store=entry.store,
                aisle=entry.aisle,
            )
        self._items.append(selected)
        logger.debug(f"Added {ingredient!r} from {recipe!r} ({selected.store})")
        return True

    def remove(self, ingredient: str) -> int:
        """Remove an ingredient from the list for every recipe that added it.

        Returns:
            Number of entries removed.
        """
        before = len(self._items)
        self._items = [i for i in self._items if i.ingredient != ingredient]
        return before - len(self._items)

    def clear(self) -> None:
        self._items = []

    def export(self, include_location: bool = False) -> str:
        """Serialize the list as text, one ingredient per line."""
        return "\n".join(i.format_line(include_location) for i in self._items)

    def save(
        self,
        path: Union[str, pathlib.Path] = DEFAULT_EXPORT_FILENAME,
        include_location: bool = False,
    ) -> pathlib.Path:
        """Write the exported list to ``path`` and return the path."""
        path = pathlib.Path(path)
        path.write_text(self.export(include_location), encoding="utf-8")
        logger.info(f"Wrote {len(self._items)} ingredients to {path}")
        return path

    def group_by_store(self) -> Dict[str, List[SelectedIngredient]]:
        """Group entries by store, each group ordered by aisle.

        Stores are ordered by name, with "Unknown" last.
        """
        grouped: Dict[str, List[SelectedIngredient]] = {}
        for item in self._items:
            grouped.setdefault(item.store, []).append(item)

        stores = sorted(grouped, key=lambda s: (s == UNKNOWN, s.lower()))
        return {
            store: sorted(grouped[store], key=lambda i: _aisle_sort_key(i.aisle))
            for store in stores
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Return the list as a DataFrame with columns ingredient, recipe, store, aisle."""
        return pd.DataFrame(
            [dataclasses.asdict(i) for i in self._items],
            columns=["ingredient", "recipe", "store", "aisle"],
        )


def _aisle_sort_key(aisle: str) -> Tuple[int, float, str]:
    # Numeric aisles first in numeric order, then named aisles, then Unknown
    if aisle == UNKNOWN:
        return (2, 0.0, "")
    try:
        return (0, float(aisle), "")
    except ValueError:
        return (1, 0.0, aisle.lower())
