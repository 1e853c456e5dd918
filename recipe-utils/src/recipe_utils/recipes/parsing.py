"""Recipe text parsing utilities."""

import dataclasses
import enum
import logging
import pathlib
import re
from typing import Dict, List, Optional, Tuple, Union

from recipe_utils.ingredients.normalization import normalize_ingredient

logger = logging.getLogger(__name__)

STORE_LIST_MARKER = "Store List:"

# Blocks are separated by at least one empty (or whitespace-only) line
_BLOCK_SEPARATOR_RE = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
_LINE_RE = re.compile(r"\r?\n")
# Single line only: "." stops at newlines and "$" anchors at the block end
_RECIPE_HEADER_RE = re.compile(r"^Recipe\s*\d+\s*:\s*(.+)$", re.IGNORECASE)
_INGREDIENTS_HEADER_RE = re.compile(r"^Ingredients:", re.IGNORECASE)
_STORE_LINE_RE = re.compile(r"^(.+?):\s*(.+?),\s*Aisle\s+(.+)$", re.IGNORECASE)


@dataclasses.dataclass(frozen=True)
class Recipe:
    """Dataclass for holding parsed recipe data."""

    name: str
    ingredients: Tuple[str, ...]
    instructions: str = ""


@dataclasses.dataclass(frozen=True)
class StoreEntry:
    """Where an ingredient is bought."""

    store: str
    aisle: str


@dataclasses.dataclass
class ParsedRecipes:
    recipes: List[Recipe] = dataclasses.field(default_factory=list)
    store_list: Dict[str, StoreEntry] = dataclasses.field(default_factory=dict)


class ParserState(enum.Enum):
    EXPECTING_BLOCK = "expecting_block"
    EXPECTING_STORE_LIST_BODY = "expecting_store_list_body"
    EXPECTING_INGREDIENTS_BODY = "expecting_ingredients_body"


def split_blocks(text: str) -> List[str]:
    """Split text into non-empty blocks separated by blank lines."""
    return [block for block in _BLOCK_SEPARATOR_RE.split(text) if block.strip()]


def parse_recipe_header(block: str) -> Optional[str]:
    """Return the recipe name from a ``Recipe <N>: <Name>`` block, or None."""
    match = _RECIPE_HEADER_RE.match(block.strip())
    if not match:
        return None
    return match.group(1).strip()


def parse_ingredients_block(block: str) -> Tuple[str, ...]:
    """Extract the "- " prefixed ingredient lines of an ingredients block.

    An optional leading ``Ingredients:`` line is dropped. Lines not starting
    with "-" are ignored. Ingredients are lower-cased.

    Examples:
        >>> parse_ingredients_block("Ingredients:\\n- Salt\\n- Water")
        ('salt', 'water')
    """
    lines = [line.strip() for line in _LINE_RE.split(block)]
    lines = [line for line in lines if line]
    if lines and _INGREDIENTS_HEADER_RE.match(lines[0]):
        lines = lines[1:]

    return tuple(
        re.sub(r"^-\s*", "", line).lower() for line in lines if line.startswith("-")
    )


def parse_store_list_block(block: str, store_list: Dict[str, StoreEntry]) -> None:
    """Add ``<name>: <store>, Aisle <aisle>`` lines to ``store_list``.

    Entries are keyed by normalized ingredient name, and a later line for the
    same ingredient replaces an earlier one. Lines that don't match are
    skipped.
    """
    for line in _LINE_RE.split(block):
        line = line.strip()
        if not line:
            continue
        match = _STORE_LINE_RE.match(line)
        if not match:
            logger.debug(f"Skipping unparseable store list line: {line!r}")
            continue
        name, store, aisle = (group.strip() for group in match.groups())
        key = normalize_ingredient(name)
        if key in store_list:
            logger.debug(f"Store list entry for {key!r} replaced")
        store_list[key] = StoreEntry(store=store, aisle=aisle)


def parse_recipe_text(text: str) -> ParsedRecipes:
    """Parse recipe text into recipes and an optional store list.

    The text is a sequence of blank-line separated blocks. A
    ``Recipe <N>: <Name>`` block is followed by its ingredients block, and a
    ``Store List:`` block is followed by the store list body. Blocks that
    don't fit are skipped, so one malformed block never spoils the rest.

    Args:
        text: Raw recipe file contents.

    Returns:
        A ParsedRecipes object with recipes in file order.
    """
    parsed = ParsedRecipes()
    state = ParserState.EXPECTING_BLOCK
    recipe_name = None

    for block in split_blocks(text):
        if state is ParserState.EXPECTING_STORE_LIST_BODY:
            parse_store_list_block(block, parsed.store_list)
            state = ParserState.EXPECTING_BLOCK
        elif state is ParserState.EXPECTING_INGREDIENTS_BODY:
            parsed.recipes.append(
                Recipe(name=recipe_name, ingredients=parse_ingredients_block(block))
            )
            recipe_name = None
            state = ParserState.EXPECTING_BLOCK
        elif block.lstrip().startswith(STORE_LIST_MARKER):
            state = ParserState.EXPECTING_STORE_LIST_BODY
        else:
            recipe_name = parse_recipe_header(block)
            if recipe_name is None:
                logger.debug(f"Skipping unrecognized block: {block[:40]!r}")
            else:
                state = ParserState.EXPECTING_INGREDIENTS_BODY

    if state is not ParserState.EXPECTING_BLOCK:
        logger.debug(f"Input ended in state {state.name}; trailing block dropped")

    logger.info(
        f"Parsed {len(parsed.recipes)} recipes and "
        f"{len(parsed.store_list)} store list entries"
    )
    return parsed


def parse_recipe_file(path: Union[str, pathlib.Path]) -> ParsedRecipes:
    """Read a UTF-8 recipe text file and parse it.

    Args:
        path: Path to the recipe text file.

    Returns:
        A ParsedRecipes object.
    """
    text = pathlib.Path(path).read_text(encoding="utf-8")
    return parse_recipe_text(text)
