"""
Recipe scraping pipeline using LangGraph.

Workflow:
1. Fetch the source site's search page for the search term
2. Extract recipe cards from the search results
   - If no cards are found (or the DETAILS strategy is used), follow up
     to MAX_DETAIL_PAGES links to individual recipe pages and extract each
3. If nothing usable came out, generate placeholder recipes

Network and parse failures never escape: the worst case is placeholder data.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src directory to Python path for absolute imports
sys.path.insert(0, str(Path(__file__).parent))

import httpx
from langgraph.graph import START, END, StateGraph

import config
from models import Recipe, ScrapeState, ScrapeStrategy, dump_recipes
from samples import SampleConfig
from nodes import (
    fetch_search_page,
    extract_cards,
    route_after_cards,
    follow_recipe_links,
    ensure_results,
)
from nodes.base import create_http_client


logger = logging.getLogger(__name__)


def build_scrape_graph():
    """Build the scrape graph.

    fetch_search_page -> extract_cards -> (follow_recipe_links) -> ensure_results
    """
    builder = StateGraph(ScrapeState)

    builder.add_node("fetch_search_page", fetch_search_page)
    builder.add_node("extract_cards", extract_cards)
    builder.add_node("follow_recipe_links", follow_recipe_links)
    builder.add_node("ensure_results", ensure_results)

    builder.add_edge(START, "fetch_search_page")
    builder.add_edge("fetch_search_page", "extract_cards")
    builder.add_conditional_edges("extract_cards", route_after_cards)
    builder.add_edge("follow_recipe_links", "ensure_results")
    builder.add_edge("ensure_results", END)

    return builder.compile()


_graph = None


def get_scrape_graph():
    """Get the compiled scrape graph (built once)."""
    global _graph
    if _graph is None:
        _graph = build_scrape_graph()
    return _graph


async def scrape_recipes(
    search_term: str,
    strategy: ScrapeStrategy = ScrapeStrategy.AUTO,
    http_client: Optional[httpx.AsyncClient] = None,
    sample_config: Optional[SampleConfig] = None,
    origin: Optional[str] = None,
    max_detail_pages: Optional[int] = None,
) -> List[Recipe]:
    """Scrape recipes for a search term.

    Args:
        search_term: What to search for on the source site
        strategy: AUTO, CARDS or DETAILS (see ScrapeStrategy)
        http_client: Client to fetch pages with; a browser-like client is
            created (and closed) when omitted
        sample_config: Tables for the placeholder fallback
        origin: Source site origin, defaults to SOURCE_ORIGIN
        max_detail_pages: Upper bound on detail pages fetched

    Returns:
        Extracted recipes, or placeholder recipes if none could be extracted
    """
    initial_state: ScrapeState = {
        "search_term": search_term,
        "strategy": ScrapeStrategy(strategy),
        "search_url": None,
        "search_html": None,
        "candidate_links": None,
        "recipes": [],
        "error": None,
    }

    async def run(client: httpx.AsyncClient) -> List[Recipe]:
        run_config = {"configurable": {
            "http_client": client,
            "sample_config": sample_config,
            "origin": origin or config.SOURCE_ORIGIN,
            "max_detail_pages": max_detail_pages or config.MAX_DETAIL_PAGES,
        }}
        result = await get_scrape_graph().ainvoke(initial_state, config=run_config)
        if result.get("error"):
            logger.info(f"Scrape for {search_term!r} recovered from: {result['error']}")
        return result["recipes"]

    logger.info(f"Scraping recipes for {search_term!r} (strategy={initial_state['strategy'].value})")

    if http_client is not None:
        return await run(http_client)
    async with create_http_client() as client:
        return await run(client)


def main():
    """Scrape a search term and print the recipes as JSON."""
    parser = argparse.ArgumentParser(description="Scrape recipes from the source site")
    parser.add_argument("search_term", nargs="?", default="ayam masak merah", help="What to search for")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ScrapeStrategy],
        default=ScrapeStrategy.AUTO.value,
        help="Card extraction, detail-page following, or both",
    )
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL)

    recipes = asyncio.run(scrape_recipes(args.search_term, strategy=ScrapeStrategy(args.strategy)))
    print(json.dumps(dump_recipes(recipes), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
