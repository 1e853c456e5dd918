"""Ingredient normalization utilities."""

import re

# Parenthetical notes like "(2 lbs)" or "(optional)"
_PARENTHETICAL_RE = re.compile(r"\(.*?\)")
_DIGITS_RE = re.compile(r"\d+")
_NON_ALPHA_RE = re.compile(r"[^a-z\s]")


def normalize_ingredient(ingredient_text: str) -> str:
    """Normalize ingredient text for consistent matching.

    Lower-cases the text and removes parenthetical notes, digits and any
    character that is not a lowercase letter or whitespace. Two ingredient
    strings refer to the same ingredient when they normalize to the same
    value. The result may be an empty string.

    Args:
        ingredient_text: The raw ingredient description text.

    Returns:
        Normalized ingredient text suitable for pairing and store lookups.

    Examples:
        >>> normalize_ingredient("Tomatoes (2 lbs)!!")
        'tomatoes'
        >>> normalize_ingredient("2 cloves Garlic, minced")
        'cloves garlic minced'
    """
    text = ingredient_text.lower()
    text = _PARENTHETICAL_RE.sub("", text)
    text = _DIGITS_RE.sub("", text)
    text = _NON_ALPHA_RE.sub("", text)
    return text.strip()
