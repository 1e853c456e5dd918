import dataclasses
from typing import List, Tuple

PAIR_SEPARATOR = ", "


@dataclasses.dataclass(frozen=True)
class IngredientPair:
    ingredients: Tuple[str, str]  # normalized, lexicographically ordered
    count: int

    @property
    def pair(self) -> str:
        return PAIR_SEPARATOR.join(self.ingredients)


@dataclasses.dataclass
class PairingResult:
    ingredient: str
    count: int
    pairs: List[str]
