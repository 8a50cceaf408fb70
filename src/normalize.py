"""
Ingredient text normalization.

Turns raw ingredient lines scraped from recipe pages ("2 sdm kecap manis",
"1 1/2 cups flour (sifted)") into bare ingredient names suitable for
matching against a pantry.
"""

import re
from typing import Optional


# Unit and filler words that may precede an ingredient name.
# English first, then Indonesian (the default source site is Cookpad ID).
UNIT_WORDS = {
    # English
    "cup", "cups", "c", "tablespoon", "tablespoons", "tbsp", "tbs", "tbl",
    "teaspoon", "teaspoons", "tsp", "gram", "grams", "g", "gr", "kg",
    "kilogram", "kilograms", "ml", "l", "liter", "liters", "litre", "litres",
    "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds", "pinch",
    "dash", "clove", "cloves", "slice", "slices", "piece", "pieces", "can",
    "cans", "package", "packages", "pack", "stick", "sticks", "bunch",
    "handful", "large", "medium", "small", "of", "a", "an",
    # Indonesian
    "sdm", "sdt", "sendok", "gelas", "siung",
    "lembar", "batang", "butir", "ekor", "potong", "ruas", "bungkus",
    "ons", "genggam", "mangkok", "piring", "secukupnya", "sejumput",
}

# Units that are also words in ingredient names ("buah naga", "teh celup").
# Stripped only right after an amount or another unit ("2 buah", "sendok teh").
CONTEXTUAL_UNIT_WORDS = {"buah", "teh", "makan"}

# Numeric amounts: 2, 1.5, 1,5, 1/2, ½, 1-2, 2x, 200g
_FRACTION_CHARS = "½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅛⅜⅝⅞"
_QUANTITY_RE = re.compile(rf"^[\d{_FRACTION_CHARS}]+(?:[.,/\-–][\d{_FRACTION_CHARS}]+)*(?P<unit>[a-z]*)$")
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_DIGITS_RE = re.compile(rf"[\d{_FRACTION_CHARS}]+")
_WHITESPACE_RE = re.compile(r"\s+")

MIN_INGREDIENT_LENGTH = 2


def _is_quantity_or_unit(token: str) -> bool:
    """True if a token is an amount, a unit word, or an amount glued to a unit."""
    token = token.lower().strip(".,:;-–")
    if not token:
        return True
    if token in UNIT_WORDS:
        return True
    match = _QUANTITY_RE.match(token)
    if match is None:
        return False
    unit = match.group("unit")
    return not unit or unit in UNIT_WORDS or unit in CONTEXTUAL_UNIT_WORDS or unit == "x"


def clean_ingredient(text) -> Optional[str]:
    """
    Reduce a raw ingredient line to the ingredient name.

    Strips parenthetical asides, leading quantity/unit tokens and any
    remaining digits. Best effort only: malformed input never raises.

    Examples:
        "2 cups flour" -> "flour"
        "(optional) salt" -> "salt"
        "1/2 tsp" -> None

    Returns:
        The cleaned name, or None if fewer than three characters remain
    """
    if not isinstance(text, str):
        return None

    text = _PARENTHETICAL_RE.sub(" ", text)
    tokens = text.split()

    stripped = False
    while tokens:
        if _is_quantity_or_unit(tokens[0]):
            tokens.pop(0)
            stripped = True
        elif stripped and tokens[0].lower().strip(".,:;-–") in CONTEXTUAL_UNIT_WORDS:
            tokens.pop(0)
        else:
            break

    cleaned = _DIGITS_RE.sub(" ", " ".join(tokens))
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip(" \t,.;:-–*•")

    if len(cleaned) > MIN_INGREDIENT_LENGTH:
        return cleaned
    return None


def normalize_pantry_item(text: str) -> str:
    """Normalize a pantry entry: trimmed and lower-cased."""
    return text.strip().lower()


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) into single spaces."""
    return _WHITESPACE_RE.sub(" ", text).strip()
