"""
Client-local persisted state.

LocalStorage keeps JSON text under fixed keys in a single file, the way a
browser's localStorage would. The pantry and the mirrored recipe cache are
stored there independently of each other.
"""

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

import config
from models import Recipe, dump_recipes
from normalize import normalize_pantry_item


logger = logging.getLogger(__name__)


PANTRY_KEY = "myIngredients"
RECIPES_KEY = "recipes"


class LocalStorage:
    """String values under string keys, persisted as one JSON object."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else config.LOCAL_STORAGE_FILE

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading local storage {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing local storage {self.path}: {e}")

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class Pantry:
    """The user's available ingredients: lower-cased, trimmed, no duplicates."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage
        self.ingredients: List[str] = []

    def load(self) -> List[str]:
        """Load the saved pantry, keeping the current one if nothing is saved."""
        saved = self.storage.get_item(PANTRY_KEY)
        if saved:
            try:
                items = json.loads(saved)
            except json.JSONDecodeError as e:
                logger.warning(f"Ignoring unreadable pantry: {e}")
                return self.ingredients
            if isinstance(items, list):
                self.ingredients = [item for item in items if isinstance(item, str)]
        return self.ingredients

    def save(self) -> None:
        self.storage.set_item(PANTRY_KEY, json.dumps(self.ingredients, ensure_ascii=False))

    def add(self, ingredient: str) -> bool:
        """Add an ingredient. Returns False for blanks and duplicates."""
        cleaned = normalize_pantry_item(ingredient)
        if not cleaned or cleaned in self.ingredients:
            return False
        self.ingredients.append(cleaned)
        self.save()
        return True

    def remove(self, ingredient: str) -> None:
        cleaned = normalize_pantry_item(ingredient)
        self.ingredients = [item for item in self.ingredients if item != cleaned]
        self.save()

    def clear(self) -> None:
        self.ingredients = []
        self.save()


class RecipeCache:
    """Local mirror of the server's recipe collection for offline use."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load(self) -> List[Recipe]:
        saved = self.storage.get_item(RECIPES_KEY)
        if not saved:
            return []
        try:
            items = json.loads(saved)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable recipe cache: {e}")
            return []

        recipes = []
        for item in items if isinstance(items, list) else []:
            try:
                recipes.append(Recipe.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid cached recipe: {e}")
        return recipes

    def save(self, recipes: List[Recipe]) -> None:
        self.storage.set_item(RECIPES_KEY, json.dumps(dump_recipes(recipes), ensure_ascii=False))
