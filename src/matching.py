"""
Pantry-to-recipe matching and ranking.

Matching is deliberately loose: a pantry entry matches a recipe ingredient
when either string contains the other, case-insensitively. "onion" matches
"red onion", and "pepper" matches both "black pepper" and "bell pepper".
"""

from typing import Iterable, List, Sequence, Union

from models import Recipe, RecipeMatch
from normalize import normalize_pantry_item


def _prepare_pantry(pantry: Iterable[str]) -> List[str]:
    items = [normalize_pantry_item(item) for item in pantry]
    return [item for item in items if item]


def ingredient_matches(ingredient: str, pantry: Sequence[str]) -> bool:
    """True if any pantry entry is contained in the ingredient or vice versa."""
    ingredient_lower = ingredient.lower()
    return any(
        item in ingredient_lower or ingredient_lower in item
        for item in pantry
    )


def score_recipe(pantry: Iterable[str], recipe: Recipe) -> RecipeMatch:
    """
    Score a single recipe against a pantry.

    Returns:
        RecipeMatch carrying the recipe fields plus matched and missing
        ingredients and the match percentage (0 when the recipe lists
        no ingredients)
    """
    pantry_items = _prepare_pantry(pantry)

    matched = [ing for ing in recipe.ingredients if ingredient_matches(ing, pantry_items)]
    missing = [ing for ing in recipe.ingredients if ing not in matched]

    if recipe.ingredients:
        percentage = len(matched) / len(recipe.ingredients) * 100
    else:
        percentage = 0.0

    return RecipeMatch(
        **recipe.model_dump(),
        matched_ingredients=matched,
        missing_ingredients=missing,
        match_percentage=percentage,
    )


def match_recipes(
    pantry: Iterable[str],
    recipes: Sequence[Recipe],
) -> List[Union[Recipe, RecipeMatch]]:
    """
    Rank recipes by how much of each the pantry covers.

    An empty pantry means "show everything": the recipes come back
    unscored in their original order. Otherwise recipes without a single
    matched ingredient are dropped and the rest are sorted by descending
    match percentage; ties keep their original relative order.
    """
    pantry_items = _prepare_pantry(pantry)
    if not pantry_items:
        return list(recipes)

    scored = [score_recipe(pantry_items, recipe) for recipe in recipes]
    scored = [match for match in scored if match.matched_ingredients]

    # sorted() is stable
    return sorted(scored, key=lambda match: match.match_percentage, reverse=True)
