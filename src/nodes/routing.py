"""
Routing functions for conditional graph edges.

These functions determine which path the graph takes based on state.
"""

from models import ScrapeState, ScrapeStrategy


def route_after_cards(state: ScrapeState) -> str:
    """
    Decide whether to follow links to detail pages.

    Returns:
        "ensure_results" if cards were found or the strategy forbids
        following links, "follow_recipe_links" otherwise
    """
    strategy = state["strategy"]
    if strategy == ScrapeStrategy.CARDS:
        return "ensure_results"
    if state.get("recipes") and strategy != ScrapeStrategy.DETAILS:
        return "ensure_results"
    if state.get("candidate_links"):
        return "follow_recipe_links"
    return "ensure_results"
