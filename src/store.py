"""
Flat-file recipe store.

The whole collection lives in one JSON array on disk. Every mutation reads
the file, changes the list and rewrites the file in full. There is a single
writer (the API process), so there is no locking.

Read failures degrade to an empty collection and write failures are logged
without retry: after a failed write the response already sent to the caller
may not match what is on disk.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

import config
from models import Recipe, dump_recipes


logger = logging.getLogger(__name__)


class RecipeStore:
    """Recipes persisted as a JSON array in a single file."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else config.RECIPES_FILE

    def ensure_exists(self) -> None:
        """Initialize the store file with an empty array if it is missing."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
            logger.info(f"Initialized recipe store at {self.path}")
        except OSError as e:
            logger.error(f"Error initializing recipe store {self.path}: {e}")

    def load(self) -> List[Recipe]:
        """Read every recipe; unreadable files and invalid records are skipped."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading recipes from {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error reading recipes from {self.path}: expected a JSON array")
            return []

        recipes = []
        for item in data:
            try:
                recipes.append(Recipe.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid recipe record in {self.path}: {e}")
        return recipes

    def save(self, recipes: Iterable[Recipe]) -> bool:
        """Rewrite the whole store. Returns False (after logging) on failure."""
        payload = dump_recipes(recipes)
        try:
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Error writing recipes to {self.path}: {e}")
            return False
        return True

    def add_new(self, recipes: Iterable[Recipe]) -> List[Recipe]:
        """
        Append recipes whose URL is not already stored.

        Only URLs present before this call count as duplicates; recipes
        without a URL are always added.

        Returns:
            The recipes that were appended
        """
        existing = self.load()
        existing_urls = {recipe.url for recipe in existing if recipe.url}

        new_recipes = [r for r in recipes if not r.url or r.url not in existing_urls]
        if new_recipes:
            self.save(existing + new_recipes)

        logger.debug(f"add_new: {len(new_recipes)} new recipes, {len(existing)} existing")
        return new_recipes

    def delete(self, recipe_id: str) -> bool:
        """
        Remove the recipe with the given id.

        Returns:
            True if a recipe was removed; a missing id leaves the file untouched
        """
        recipes = self.load()
        remaining = [recipe for recipe in recipes if recipe.id != recipe_id]
        if len(remaining) == len(recipes):
            return False
        self.save(remaining)
        return True

    def get(self, recipe_id: str) -> Recipe | None:
        for recipe in self.load():
            if recipe.id == recipe_id:
                return recipe
        return None
