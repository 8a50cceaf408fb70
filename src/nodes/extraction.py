"""
Recipe extraction strategies.

Two selector-heuristic strategies turn raw HTML into Recipe records:
- CardExtractor: recipe cards on a search-results page
- DetailPageExtractor: a single recipe page

Both are reached through extract_recipes(), which picks the strategy
from the EXTRACTORS registry. The markup of the source site is unversioned,
so every field has a documented default and missing elements are never
fatal.
"""

import logging
import re
from enum import Enum
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from models import Recipe
from normalize import clean_ingredient, normalize_whitespace
from nodes.html_utils import (
    element_text,
    extract_json_ld_recipe,
    first_text,
    image_source,
    parse_html,
    resolve_url,
)


logger = logging.getLogger(__name__)


class ExtractionStrategy(str, Enum):
    """Which kind of page is being extracted."""
    CARDS = "cards"
    DETAIL = "detail"


# ---------------------------------------------------------------------------
# Selectors (priority order)
# ---------------------------------------------------------------------------

CARD_SELECTORS = [".recipe-preview", ".recipe-card", '[class*="recipe"]']
CARD_TITLE_SELECTORS = ["h2", "h3", ".recipe-title", '[class*="title"]']

DETAIL_TITLE_SELECTORS = ["h1", ".recipe-title", '[class*="recipe-title"]', '[class*="title"]', "h2"]
IMAGE_CONTAINER_SELECTORS = [
    ".recipe-image img",
    '[class*="recipe-image"] img',
    '[class*="recipe-photo"] img',
    '[class*="recipe_image"] img',
    "picture img",
]
IMAGE_HINTS = ("recipe", "photo", "dish", "food")

INGREDIENT_SELECTORS = [
    '[itemprop="recipeIngredient"]',
    '[class*="ingredient"] li',
    '[class*="ingredient"]',
]
INSTRUCTION_SELECTORS = [
    '[itemprop="recipeInstructions"]',
    '[class*="step"] p',
    '[class*="instruction"] li',
    '[class*="step"]',
    "ol li",
]
SERVINGS_SELECTORS = ['[itemprop="recipeYield"]', '[class*="serving"]', '[class*="portion"]', '[class*="yield"]']
TIME_SELECTORS = ['[itemprop="totalTime"]', '[itemprop="cookTime"]', '[class*="time"]', '[class*="duration"]']

LINK_SELECTORS = ['a[href*="/recipe"]', 'a[href*="recipes"]', 'a[href*="/resep/"]']

# Section labels that show up inside ingredient lists
INGREDIENT_LABELS = {
    "ingredients", "ingredient", "bahan", "bahan-bahan", "bahan bahan",
    "bumbu", "bumbu halus", "for the sauce", "for the dressing",
}

DEFAULT_TITLE = "Untitled Recipe"
DEFAULT_SERVINGS = "4"
DEFAULT_COOK_TIME = "30 min"
MIN_INSTRUCTION_LENGTH = 10
MAX_TIME_TEXT_LENGTH = 40

_NUMBER_RE = re.compile(r"\d+")
_ISO_DURATION_RE = re.compile(r"^P(?:T)?(?:(\d+)H)?(?:(\d+)M)?", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Field heuristics
# ---------------------------------------------------------------------------

def _is_label(element: Tag, text: str) -> bool:
    """True for headings and section labels inside an ingredient list."""
    if element.name in ("h1", "h2", "h3", "h4", "h5", "h6"):
        return True
    classes = " ".join(element.get("class", [])).lower()
    if any(hint in classes for hint in ("title", "heading", "header", "section", "label")):
        return True
    return text.lower().rstrip(":") in INGREDIENT_LABELS


def extract_ingredients(root: Tag) -> List[str]:
    """
    Collect cleaned ingredient names from ingredient-list elements.

    Uses the first selector that yields anything. For the broad class
    selector only leaf elements count, so a wrapping list does not
    swallow its own items.
    """
    for selector in INGREDIENT_SELECTORS:
        elements = root.select(selector)
        if selector == '[class*="ingredient"]':
            elements = [el for el in elements if not el.select(selector)]

        ingredients = []
        for element in elements:
            text = element_text(element)
            if not text or _is_label(element, text):
                continue
            cleaned = clean_ingredient(text)
            if cleaned:
                ingredients.append(cleaned)

        if ingredients:
            return list(dict.fromkeys(ingredients))
    return []


def extract_instructions(root: Tag) -> List[str]:
    """Collect step texts longer than MIN_INSTRUCTION_LENGTH."""
    for selector in INSTRUCTION_SELECTORS:
        steps = [element_text(el) for el in root.select(selector)]
        steps = [step for step in steps if len(step) > MIN_INSTRUCTION_LENGTH]
        if steps:
            return list(dict.fromkeys(steps))
    return []


def extract_servings(root: Tag) -> str:
    """First number found in a serving/portion element."""
    for selector in SERVINGS_SELECTORS:
        for element in root.select(selector):
            match = _NUMBER_RE.search(element_text(element))
            if match:
                return match.group(0)
    return DEFAULT_SERVINGS


def extract_cook_time(root: Tag) -> str:
    """First short non-empty text in a time/duration element."""
    for selector in TIME_SELECTORS:
        for element in root.select(selector):
            text = element_text(element) or element.get("content", "")
            if text and len(text) <= MAX_TIME_TEXT_LENGTH:
                return format_duration(text)
    return DEFAULT_COOK_TIME


def format_duration(value: str) -> str:
    """Render an ISO-8601 duration (PT1H30M) as text; other values pass through."""
    match = _ISO_DURATION_RE.match(value.strip())
    if not match or not any(match.groups()):
        return value.strip()
    hours, minutes = match.groups()
    parts = []
    if hours and int(hours):
        parts.append(f"{int(hours)} h")
    if minutes and int(minutes):
        parts.append(f"{int(minutes)} min")
    return " ".join(parts) or value.strip()


def extract_image(soup: BeautifulSoup, origin: str) -> Optional[str]:
    """
    Find the recipe photo on a detail page.

    Priority: og:image meta tag, known recipe-image containers, any image
    whose attributes hint at a recipe photo, then the first image.
    """
    meta = soup.find("meta", attrs={"property": "og:image"})
    if meta and meta.get("content"):
        return resolve_url(meta["content"], origin)

    for selector in IMAGE_CONTAINER_SELECTORS:
        src = image_source(soup.select_one(selector))
        if src:
            return resolve_url(src, origin)

    images = soup.find_all("img")
    for img in images:
        hints = " ".join([
            img.get("alt", ""),
            " ".join(img.get("class", [])),
            img.get("src", "") or img.get("data-src", ""),
        ]).lower()
        if any(hint in hints for hint in IMAGE_HINTS):
            src = image_source(img)
            if src:
                return resolve_url(src, origin)

    for img in images:
        src = image_source(img)
        if src:
            return resolve_url(src, origin)
    return None


# ---------------------------------------------------------------------------
# Structured data
# ---------------------------------------------------------------------------

def _json_ld_image(value) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and value:
        return _json_ld_image(value[0])
    if isinstance(value, dict):
        return value.get("url")
    return None


def _json_ld_instructions(value) -> List[str]:
    if isinstance(value, str):
        return [value]
    steps: List[str] = []
    if isinstance(value, list):
        for item in value:
            steps.extend(_json_ld_instructions(item))
    elif isinstance(value, dict):
        if "itemListElement" in value:
            steps.extend(_json_ld_instructions(value["itemListElement"]))
        elif value.get("text"):
            steps.append(value["text"])
    return steps


def _from_json_ld(data: dict, origin: str) -> dict:
    """Map a schema.org Recipe to Recipe field values; missing keys are omitted."""
    fields = {}

    name = data.get("name")
    if isinstance(name, str) and name.strip():
        fields["title"] = normalize_whitespace(name)

    image = _json_ld_image(data.get("image"))
    if image:
        fields["image"] = resolve_url(image, origin)

    raw_ingredients = data.get("recipeIngredient") or []
    if isinstance(raw_ingredients, list):
        ingredients = [clean_ingredient(item) for item in raw_ingredients]
        ingredients = [item for item in ingredients if item]
        if ingredients:
            fields["ingredients"] = list(dict.fromkeys(ingredients))

    steps = [normalize_whitespace(step) for step in _json_ld_instructions(data.get("recipeInstructions"))]
    steps = [step for step in steps if len(step) > MIN_INSTRUCTION_LENGTH]
    if steps:
        fields["instructions"] = steps

    recipe_yield = data.get("recipeYield")
    if isinstance(recipe_yield, list) and recipe_yield:
        recipe_yield = recipe_yield[0]
    if recipe_yield is not None:
        match = _NUMBER_RE.search(str(recipe_yield))
        if match:
            fields["servings"] = match.group(0)

    duration = data.get("totalTime") or data.get("cookTime")
    if isinstance(duration, str) and duration.strip():
        fields["cook_time"] = format_duration(duration)

    return fields


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

class Extractor(Protocol):
    """Protocol for extraction strategies."""

    def extract(self, soup: BeautifulSoup, origin: str, page_url: Optional[str]) -> List[Recipe]:
        ...


class CardExtractor:
    """Extracts recipe cards from a search-results page."""

    def _card_link(self, card: Tag) -> Optional[str]:
        if card.name == "a" and card.get("href"):
            return card["href"]
        anchor = card.find("a", href=True)
        return anchor["href"] if anchor else None

    def extract(self, soup: BeautifulSoup, origin: str, page_url: Optional[str]) -> List[Recipe]:
        cards: List[Tag] = []
        for selector in CARD_SELECTORS:
            cards = soup.select(selector)
            if cards:
                logger.debug(f"Card selector {selector!r} matched {len(cards)} elements")
                break

        titled = [(card, first_text(card, CARD_TITLE_SELECTORS)) for card in cards]
        titled = [(card, title) for card, title in titled if title]

        # A broad selector also matches wrappers around several cards; keep the innermost
        wrappers = {id(parent) for card, _ in titled for parent in card.parents}

        recipes: List[Recipe] = []
        seen = set()
        for card, title in titled:
            if id(card) in wrappers:
                continue

            url = resolve_url(self._card_link(card), origin)
            if (title, url) in seen:
                continue
            seen.add((title, url))

            recipes.append(Recipe(
                title=title,
                image=resolve_url(image_source(card.find("img")), origin),
                url=url,
                ingredients=extract_ingredients(card),
                instructions=[],
                cook_time=extract_cook_time(card),
                servings=extract_servings(card),
            ))

        return recipes


class DetailPageExtractor:
    """Extracts a single recipe from its own page."""

    def extract(self, soup: BeautifulSoup, origin: str, page_url: Optional[str]) -> List[Recipe]:
        structured = {}
        json_ld = extract_json_ld_recipe(soup)
        if json_ld:
            structured = _from_json_ld(json_ld, origin)

        fields = {
            "title": first_text(soup, DETAIL_TITLE_SELECTORS) or DEFAULT_TITLE,
            "image": extract_image(soup, origin),
            "url": page_url,
            "ingredients": extract_ingredients(soup),
            "instructions": extract_instructions(soup),
            "servings": extract_servings(soup),
            "cook_time": extract_cook_time(soup),
        }
        fields.update(structured)

        return [Recipe(**fields)]


# Registry of extractors by strategy
EXTRACTORS: dict[ExtractionStrategy, Extractor] = {
    ExtractionStrategy.CARDS: CardExtractor(),
    ExtractionStrategy.DETAIL: DetailPageExtractor(),
}


def extract_recipes(
    html: str,
    origin: str,
    strategy: ExtractionStrategy = ExtractionStrategy.CARDS,
    page_url: Optional[str] = None,
) -> List[Recipe]:
    """
    Extract recipes from raw HTML.

    Args:
        html: Raw page content
        origin: Site origin used to resolve relative URLs
        strategy: CARDS for a search-results page, DETAIL for a recipe page
        page_url: URL the page was fetched from (becomes the recipe URL
            for detail pages)

    Returns:
        Zero or more recipes; candidates without a usable title are dropped
    """
    soup = parse_html(html)
    extractor = EXTRACTORS[ExtractionStrategy(strategy)]
    try:
        return extractor.extract(soup, origin, page_url)
    except ValidationError as e:
        logger.warning(f"Discarding invalid recipe from {page_url or 'page'}: {e}")
        return []


def extract_recipe_links(html: str, origin: str, limit: int) -> List[str]:
    """
    Collect links to individual recipe pages, resolved and deduplicated.

    Args:
        html: Raw search-results page
        origin: Site origin used to resolve relative links
        limit: Maximum number of links returned

    Returns:
        At most `limit` absolute URLs in document order
    """
    soup = parse_html(html)
    links: List[str] = []
    for selector in LINK_SELECTORS:
        for anchor in soup.select(selector):
            href = anchor.get("href", "").split("#")[0]
            url = resolve_url(href, origin)
            if url and url not in links:
                links.append(url)
            if len(links) >= limit:
                return links
    return links
