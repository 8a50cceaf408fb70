"""
Detail page processing and fallback nodes.

Follows candidate links to individual recipe pages and guarantees the
graph never finishes with an empty result.
"""

import logging

import httpx
from langchain_core.runnables import RunnableConfig

from models import ScrapeState
from nodes.base import fetch_html, get_http_client, get_origin, get_sample_config
from nodes.extraction import ExtractionStrategy, extract_recipes
from samples import generate_sample_recipes
import ui


logger = logging.getLogger(__name__)


async def follow_recipe_links(state: ScrapeState, config: RunnableConfig) -> dict:
    """
    Fetch each candidate link in turn and extract a recipe from it.

    A page that fails to fetch or parse is skipped; the others continue.

    Reads: candidate_links, recipes
    Writes: recipes
    """
    links = state.get("candidate_links") or []
    client = get_http_client(config)
    origin = get_origin(config)

    recipes = list(state.get("recipes") or [])
    for url in links:
        ui.show_fetching_recipe(url)
        try:
            html = await fetch_html(client, url)
            recipes.extend(extract_recipes(html, origin, ExtractionStrategy.DETAIL, page_url=url))
        except httpx.HTTPError as e:
            logger.warning(f"Skipping {url}: {e}")
            ui.show_fetch_error(str(e))
        except Exception as e:
            logger.exception(f"Failed to parse {url}: {e}")
            ui.show_fetch_error(str(e))

    ui.show_details_found(len(recipes))
    return {"recipes": recipes}


def ensure_results(state: ScrapeState, config: RunnableConfig) -> dict:
    """
    Fall back to placeholder recipes when nothing was extracted.

    Reads: recipes, search_term
    Writes: recipes (only when empty)
    """
    recipes = state.get("recipes") or []
    if recipes:
        ui.show_scrape_complete(len(recipes))
        return {}

    ui.show_generating_samples()
    samples = generate_sample_recipes(
        state["search_term"],
        get_sample_config(config),
        origin=get_origin(config),
    )
    return {"recipes": samples}
