#!/usr/bin/env python3
"""
Command-line client for the MealMatch API.

Keeps the pantry and a mirror of the recipe collection in local storage and
ranks recipes against the pantry locally. When the server cannot be reached,
scraping falls back to locally generated sample recipes so the client stays
usable.

Usage:
    # Start the server in another terminal:
    uvicorn meal_match_server:app --port 8000

    python client.py pantry add chicken garlic
    python client.py scrape "ayam goreng"
    python client.py match
    python client.py show <recipe-id>
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

# Add src directory to Python path for absolute imports
sys.path.insert(0, str(Path(__file__).parent))

import httpx
from pydantic import TypeAdapter

import config
from matching import match_recipes
from models import Recipe, RecipeMatch
from pantry import LocalStorage, Pantry, RecipeCache
from samples import SampleConfig, generate_sample_recipes
import ui


logger = logging.getLogger(__name__)

_recipe_list = TypeAdapter(List[Recipe])

LOAD_ERROR = "Failed to load recipes. Please try again."
SCRAPE_ERROR = "Failed to scrape recipes. Please try again."
DELETE_ERROR = "Failed to delete recipe. Please try again."


class MealMatchClient:
    """Client-side state: recipes, pantry, and the last error message."""

    def __init__(
        self,
        base_url: str = config.API_URL,
        storage: Optional[LocalStorage] = None,
        http_client: Optional[httpx.Client] = None,
        sample_config: Optional[SampleConfig] = None,
    ):
        self.storage = storage or LocalStorage()
        self.pantry = Pantry(self.storage)
        self.cache = RecipeCache(self.storage)
        self.http = http_client or httpx.Client(base_url=base_url, timeout=120.0)
        self.sample_config = sample_config

        self.recipes: List[Recipe] = self.cache.load()
        self.error: Optional[str] = None
        self.pantry.load()

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _api(self, path: str) -> str:
        return f"{config.API_PREFIX}{path}"

    def load_recipes(self) -> List[Recipe]:
        """Reload the collection from the server, keeping the cache on failure."""
        self.error = None
        try:
            response = self.http.get(self._api("/recipes"))
            response.raise_for_status()
            self.recipes = _recipe_list.validate_python(response.json())
            self.cache.save(self.recipes)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Error loading recipes: {e}")
            self.error = LOAD_ERROR
        return self.recipes

    def scrape_recipes(self, search_term: str) -> List[Recipe]:
        """
        Ask the server to scrape a search term.

        Falls back to local sample recipes when the request fails.

        Returns:
            The recipes added to the collection
        """
        self.error = None
        search_term = search_term.strip()
        if not search_term:
            self.error = "Search term is required"
            return []

        try:
            response = self.http.post(self._api("/scrape"), json={"searchTerm": search_term})
            response.raise_for_status()
            new_recipes = _recipe_list.validate_python(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Error scraping recipes: {e}")
            self.error = SCRAPE_ERROR
            new_recipes = generate_sample_recipes(search_term, self.sample_config)
            ui.show_offline_fallback(len(new_recipes))

        self.recipes = self.recipes + new_recipes
        self.cache.save(self.recipes)
        return new_recipes

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe on the server and from the local mirror."""
        self.error = None
        try:
            response = self.http.delete(self._api(f"/recipes/{recipe_id}"))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Error deleting recipe {recipe_id}: {e}")
            self.error = DELETE_ERROR

        self.recipes = [recipe for recipe in self.recipes if recipe.id != recipe_id]
        self.cache.save(self.recipes)

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def matched_recipes(self) -> List[Union[Recipe, RecipeMatch]]:
        """Recipes ranked against the pantry (all recipes if the pantry is empty)."""
        return match_recipes(self.pantry.ingredients, self.recipes)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def run_pantry_command(client: MealMatchClient, action: str, items: List[str]) -> None:
    if action == "add":
        for item in items:
            if client.pantry.add(item):
                ui.show_ingredient_added(item.strip().lower())
    elif action == "remove":
        for item in items:
            client.pantry.remove(item)
            ui.show_ingredient_removed(item.strip().lower())
    elif action == "clear":
        client.pantry.clear()
        ui.show_ingredients_cleared()
    ui.show_pantry(client.pantry.ingredients)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MealMatch command-line client")
    parser.add_argument("--api-url", default=config.API_URL, help="MealMatch API base URL")
    commands = parser.add_subparsers(dest="command", required=True)

    pantry_parser = commands.add_parser("pantry", help="Manage your ingredients")
    pantry_parser.add_argument("action", choices=["add", "remove", "clear", "list"])
    pantry_parser.add_argument("items", nargs="*", help="Ingredients to add or remove")

    commands.add_parser("recipes", help="List all recipes")

    scrape_parser = commands.add_parser("scrape", help="Scrape recipes for a search term")
    scrape_parser.add_argument("search_term", nargs="+")

    commands.add_parser("match", help="Rank recipes against your ingredients")

    show_parser = commands.add_parser("show", help="Show a recipe")
    show_parser.add_argument("recipe_id")

    delete_parser = commands.add_parser("delete", help="Delete a recipe")
    delete_parser.add_argument("recipe_id")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)

    with MealMatchClient(base_url=args.api_url) as client:
        if args.command == "pantry":
            run_pantry_command(client, args.action, args.items)
            return 0

        if args.command == "scrape":
            new_recipes = client.scrape_recipes(" ".join(args.search_term))
            if client.error and not new_recipes:
                ui.show_error(client.error)
                return 1
            ui.show_recipes_added(len(new_recipes))
            ui.show_recipe_list(new_recipes)
            return 0

        if args.command == "delete":
            client.delete_recipe(args.recipe_id)
            if client.error:
                ui.show_error(client.error)
                return 1
            ui.show_recipe_deleted(args.recipe_id)
            return 0

        client.load_recipes()
        if client.error:
            ui.show_error(client.error)
        else:
            ui.show_recipes_loaded(len(client.recipes))

        if args.command == "recipes":
            ui.show_recipe_list(client.recipes)
        elif args.command == "match":
            ui.show_pantry(client.pantry.ingredients)
            ui.show_recipe_list(client.matched_recipes())
        elif args.command == "show":
            recipe = client.get_recipe(args.recipe_id)
            if recipe is None:
                ui.show_recipe_not_found(args.recipe_id)
                return 1
            ui.show_recipe_detail(recipe, client.pantry.ingredients)
    return 0


if __name__ == "__main__":
    sys.exit(main())
