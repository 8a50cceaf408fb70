"""
Search-related graph nodes.

Fetches the source site's search page and extracts recipe cards and
candidate recipe links from it.
"""

import logging

import httpx
from langchain_core.runnables import RunnableConfig

from models import ScrapeState, ScrapeStrategy
from nodes.base import fetch_html, get_http_client, get_max_detail_pages, get_origin
from nodes.extraction import ExtractionStrategy, extract_recipe_links, extract_recipes
from samples import search_url_for
import ui


logger = logging.getLogger(__name__)


async def fetch_search_page(state: ScrapeState, config: RunnableConfig) -> dict:
    """
    Fetch the search-results page for the search term.

    Reads: search_term
    Writes: search_url, search_html, error (on failure)
    """
    search_term = state["search_term"]
    origin = get_origin(config)
    search_url = search_url_for(search_term, origin)

    ui.show_searching(search_term)

    try:
        html = await fetch_html(get_http_client(config), search_url)
    except httpx.HTTPError as e:
        logger.warning(f"Search page fetch failed for {search_url}: {e}")
        ui.show_fetch_error(str(e))
        return {
            "search_url": search_url,
            "search_html": None,
            "error": f"Failed to fetch {search_url}: {e}",
        }

    return {"search_url": search_url, "search_html": html}


def extract_cards(state: ScrapeState, config: RunnableConfig) -> dict:
    """
    Extract recipe cards and candidate detail links from the search page.

    Card extraction is skipped for the DETAILS strategy.

    Reads: search_html, search_url, strategy
    Writes: recipes, candidate_links
    """
    html = state.get("search_html")
    if not html:
        return {"recipes": [], "candidate_links": []}

    origin = get_origin(config)
    recipes = []
    if state["strategy"] != ScrapeStrategy.DETAILS:
        recipes = extract_recipes(html, origin, ExtractionStrategy.CARDS)
        ui.show_cards_found(len(recipes))

    links = extract_recipe_links(html, origin, limit=get_max_detail_pages(config) + 1)
    links = [link for link in links if link != state.get("search_url")]

    logger.debug(f"extract_cards: {len(recipes)} cards, {len(links)} candidate links")
    return {
        "recipes": recipes,
        "candidate_links": links[:get_max_detail_pages(config)],
    }
