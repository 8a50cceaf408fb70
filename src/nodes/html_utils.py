"""
HTML content extraction utilities.

Low-level helpers shared by the extraction strategies: JSON-LD structured
data, prioritized selector lookups, image attributes and URL resolution.
"""

import json
from typing import Iterable, Optional

from bs4 import BeautifulSoup, Tag

from normalize import normalize_whitespace


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _find_recipe_node(data) -> Optional[dict]:
    """Find a schema.org Recipe object in decoded JSON-LD."""
    if isinstance(data, list):
        for item in data:
            found = _find_recipe_node(item)
            if found:
                return found
        return None

    if not isinstance(data, dict):
        return None

    item_type = data.get("@type")
    if item_type == "Recipe" or (isinstance(item_type, list) and "Recipe" in item_type):
        return data

    # Check @graph array
    if "@graph" in data:
        return _find_recipe_node(data["@graph"])
    return None


def extract_json_ld_recipe(soup: BeautifulSoup) -> Optional[dict]:
    """
    Extract recipe data from JSON-LD structured data if present.

    Args:
        soup: Parsed page

    Returns:
        The Recipe object as a dict, or None if not found
    """
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            continue

        recipe = _find_recipe_node(data)
        if recipe:
            return recipe

    return None


def element_text(element: Tag) -> str:
    """Visible text of an element with whitespace collapsed."""
    return normalize_whitespace(element.get_text(separator=" "))


def first_text(root: Tag, selectors: Iterable[str]) -> str:
    """
    Return the first non-empty text among a prioritized list of selectors.

    Each selector is tried in turn; within a selector, elements are tried
    in document order. Returns an empty string if nothing matches.
    """
    for selector in selectors:
        for element in root.select(selector):
            text = element_text(element)
            if text:
                return text
    return ""


def image_source(img: Optional[Tag]) -> Optional[str]:
    """Image URL from src, falling back to the lazy-load data-src attribute."""
    if img is None:
        return None
    for attr in ("src", "data-src", "data-original", "data-lazy-src"):
        value = img.get(attr)
        if value and not value.startswith("data:"):
            return value.strip()
    return None


def resolve_url(value: Optional[str], origin: str) -> Optional[str]:
    """
    Make a URL absolute relative to the site origin.

    Absolute URLs pass through unchanged, protocol-relative URLs get https.
    """
    if not value:
        return None
    value = value.strip()
    if value.startswith(("http://", "https://")):
        return value
    if value.startswith("//"):
        return f"https:{value}"
    if not value.startswith("/"):
        value = "/" + value
    return origin.rstrip("/") + value
