"""
UI abstraction layer for MealMatch.

This module provides display functions for the scraper and the CLI client.
Set CLI_MODE=false in .env to disable terminal output (e.g. under the API server).
"""

from typing import List, Sequence, Union

import config
from matching import ingredient_matches
from models import Recipe, RecipeMatch


def _print(text: str) -> None:
    """Print only if CLI mode is enabled."""
    if config.CLI_MODE:
        print(text)


# --- Scraper Status Messages ---

def show_searching(search_term: str) -> None:
    _print(f"🔍 Scraping recipes for: {search_term}")


def show_cards_found(count: int) -> None:
    _print(f"📋 Found {count} recipe cards")


def show_fetching_recipe(url: str) -> None:
    _print(f"🔗 Fetching recipe from: {url}")


def show_details_found(count: int) -> None:
    _print(f"📄 Extracted {count} recipes from detail pages")


def show_generating_samples() -> None:
    _print("🧪 No recipes found, generating sample data...")


def show_scrape_complete(count: int) -> None:
    _print(f"✅ Found {count} recipes")


# --- Client Status Messages ---

def show_recipes_loaded(count: int) -> None:
    _print(f"📚 Loaded {count} recipes")


def show_recipes_added(count: int) -> None:
    _print(f"✅ Added {count} new recipes")


def show_offline_fallback(count: int) -> None:
    _print(f"📴 Server unreachable, generated {count} sample recipes locally")


def show_recipe_deleted(recipe_id: str) -> None:
    _print(f"🗑️  Deleted recipe {recipe_id}")


def show_ingredient_added(ingredient: str) -> None:
    _print(f"✅ Added '{ingredient}' to your ingredients")


def show_ingredient_removed(ingredient: str) -> None:
    _print(f"✅ Removed '{ingredient}' from your ingredients")


def show_ingredients_cleared() -> None:
    _print("✅ Cleared all ingredients")


# --- Error Messages ---

def show_error(message: str) -> None:
    _print(f"❌ {message}")


def show_fetch_error(error: str) -> None:
    _print(f"❌ Failed to fetch page: {error}")


def show_recipe_not_found(recipe_id: str) -> None:
    _print(f"❌ Recipe not found: {recipe_id}")


# --- Formatting ---

def format_pantry(ingredients: Sequence[str]) -> str:
    """Format the pantry for display. Returns the formatted text."""
    if not ingredients:
        return "\n🧺 Your ingredient list is empty. Add some with 'pantry add'."
    text = f"\n🧺 My Ingredients ({len(ingredients)}):\n"
    for ingredient in ingredients:
        text += f"  • {ingredient}\n"
    return text.rstrip("\n")


def show_pantry(ingredients: Sequence[str]) -> str:
    text = format_pantry(ingredients)
    _print(text)
    return text


def format_recipe_list(recipes: Sequence[Union[Recipe, RecipeMatch]]) -> str:
    """Format recipes (scored or not) as a numbered list."""
    if not recipes:
        return "\n🍽️  No recipes found."
    text = f"\n🍽️  Recipes ({len(recipes)}):\n"
    for i, recipe in enumerate(recipes, 1):
        text += f"{i}. **{recipe.title}** ({recipe.cook_time}, serves {recipe.servings})\n"
        if isinstance(recipe, RecipeMatch):
            text += f"   🎯 {recipe.match_percentage:.0f}% match"
            if recipe.missing_ingredients:
                text += f", missing: {', '.join(recipe.missing_ingredients)}"
            text += "\n"
        text += f"   🆔 {recipe.id}\n"
    return text.rstrip("\n")


def show_recipe_list(recipes: Sequence[Union[Recipe, RecipeMatch]]) -> str:
    text = format_recipe_list(recipes)
    _print(text)
    return text


def format_recipe_detail(recipe: Recipe, pantry: List[str] | None = None) -> str:
    """Format a single recipe with ingredients and steps."""
    pantry = [item.lower() for item in pantry or []]
    text = f"\n🍲 {recipe.title}\n"
    text += "=" * 45 + "\n"
    text += f"⏱️  {recipe.cook_time}   👥 {recipe.servings}\n"
    if recipe.url:
        text += f"🔗 {recipe.url}\n"
    text += "\n🛒 Ingredients:\n"
    for ingredient in recipe.ingredients:
        have = ingredient_matches(ingredient, pantry)
        text += f"  {'✅' if have else '⬜'} {ingredient}\n"
    if recipe.instructions:
        text += "\n📝 Instructions:\n"
        for i, step in enumerate(recipe.instructions, 1):
            text += f"  {i}. {step}\n"
    text += "=" * 45
    return text


def show_recipe_detail(recipe: Recipe, pantry: List[str] | None = None) -> str:
    text = format_recipe_detail(recipe, pantry)
    _print(text)
    return text
