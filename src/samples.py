"""
Placeholder recipe generation.

Used whenever scraping produces nothing usable (server side) and when the
API cannot be reached at all (client side). Both call sites go through
generate_sample_recipes so they produce identical records.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import quote

import config
from models import Recipe, new_recipe_id, utc_now


DEFAULT_KEYWORD_INGREDIENTS: Dict[str, List[str]] = {
    "ayam": ["chicken", "garlic", "onion", "ginger", "oil", "salt", "pepper"],
    "nasi": ["rice", "water", "salt", "oil"],
    "ikan": ["fish", "lemon", "garlic", "salt", "pepper"],
    "daging": ["beef", "onion", "garlic", "soy sauce", "pepper"],
    "sayur": ["vegetables", "garlic", "oil", "salt"],
    "sup": ["broth", "vegetables", "garlic", "salt", "pepper"],
    "goreng": ["oil", "garlic", "salt", "pepper"],
    "masak": ["oil", "onion", "garlic", "spices"],
    "pasta": ["pasta", "tomato sauce", "garlic", "olive oil", "basil"],
    "salad": ["lettuce", "tomato", "cucumber", "olive oil", "lemon"],
    "curry": ["curry powder", "coconut milk", "onion", "garlic", "ginger"],
}

DEFAULT_INGREDIENTS = ["main ingredient", "garlic", "onion", "oil", "salt", "pepper", "water"]

DEFAULT_INSTRUCTIONS = [
    "Prepare all ingredients and wash thoroughly",
    "Heat oil in a pan or wok over medium heat",
    "Add aromatics (garlic, onion, ginger) and sauté until fragrant",
    "Add main ingredients and cook until done",
    "Season with salt, pepper, and other spices to taste",
    "Serve hot with rice or bread",
]

# (image colour, cook time, servings) for each generated recipe
DEFAULT_VARIANTS: List[Tuple[str, str, str]] = [
    ("FF6B35", "30 min", "4"),
    ("F7931E", "45 min", "6"),
    ("4CAF50", "20 min", "2"),
]


@dataclass
class SampleConfig:
    """Tables and factories used by the placeholder generator."""
    keyword_ingredients: Dict[str, List[str]] = field(
        default_factory=lambda: dict(DEFAULT_KEYWORD_INGREDIENTS)
    )
    default_ingredients: List[str] = field(default_factory=lambda: list(DEFAULT_INGREDIENTS))
    instructions: List[str] = field(default_factory=lambda: list(DEFAULT_INSTRUCTIONS))
    variants: List[Tuple[str, str, str]] = field(default_factory=lambda: list(DEFAULT_VARIANTS))
    id_factory: Callable[[], str] = new_recipe_id
    clock: Callable[[], datetime] = utc_now


def search_url_for(search_term: str, origin: Optional[str] = None) -> str:
    """Build the source site's search URL for a term."""
    return (origin or config.SOURCE_ORIGIN) + config.SEARCH_PATH.format(term=quote(search_term, safe=""))


def sample_ingredients(text: str, sample_config: Optional[SampleConfig] = None) -> List[str]:
    """
    Pick ingredients for a title or search term by keyword.

    Every keyword found in the text (case-insensitive substring) contributes
    its ingredients; duplicates are dropped keeping first-seen order.
    Falls back to the default set when nothing matches.
    """
    sample_config = sample_config or SampleConfig()
    text_lower = text.lower()

    ingredients: List[str] = []
    for keyword, keyword_ingredients in sample_config.keyword_ingredients.items():
        if keyword.lower() in text_lower:
            ingredients.extend(keyword_ingredients)

    if not ingredients:
        ingredients = list(sample_config.default_ingredients)

    return list(dict.fromkeys(ingredients))


def generate_sample_recipes(
    search_term: str,
    sample_config: Optional[SampleConfig] = None,
    origin: Optional[str] = None,
) -> List[Recipe]:
    """
    Generate placeholder recipes for a search term.

    Args:
        search_term: The term the user searched for
        sample_config: Keyword tables and id/clock factories (defaults if omitted)
        origin: Source site origin used for the recipe URL

    Returns:
        One recipe per configured variant (three by default)
    """
    sample_config = sample_config or SampleConfig()
    url = search_url_for(search_term, origin)
    ingredients = sample_ingredients(search_term, sample_config)

    recipes = []
    for number, (colour, cook_time, servings) in enumerate(sample_config.variants, 1):
        recipes.append(Recipe(
            id=sample_config.id_factory(),
            title=f"{search_term} Recipe {number}",
            image=f"https://via.placeholder.com/400x300/{colour}/FFFFFF?text=Recipe+{number}",
            url=url,
            ingredients=list(ingredients),
            instructions=list(sample_config.instructions),
            cook_time=cook_time,
            servings=servings,
            scraped_at=sample_config.clock(),
        ))
    return recipes
