"""
Graph node implementations for the scrape pipeline.

This package contains all node functions organized by workflow stage:
- routing: Conditional edge functions for graph routing
- search: Search page fetching and card extraction
- processing: Detail page following and placeholder fallback
- extraction: HTML extraction strategies used by the nodes
"""

from nodes.routing import (
    route_after_cards,
)

from nodes.search import (
    fetch_search_page,
    extract_cards,
)

from nodes.processing import (
    follow_recipe_links,
    ensure_results,
)

from nodes.extraction import (
    ExtractionStrategy,
    extract_recipes,
    extract_recipe_links,
)


__all__ = [
    # Routing
    "route_after_cards",
    # Search
    "fetch_search_page",
    "extract_cards",
    # Processing
    "follow_recipe_links",
    "ensure_results",
    # Extraction
    "ExtractionStrategy",
    "extract_recipes",
    "extract_recipe_links",
]
