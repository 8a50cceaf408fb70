"""Tests for placeholder recipe generation."""

from html_fixtures import FIXED_TIME
from models import Recipe
from samples import (
    DEFAULT_INGREDIENTS,
    DEFAULT_INSTRUCTIONS,
    SampleConfig,
    generate_sample_recipes,
    sample_ingredients,
    search_url_for,
)


def test_generates_three_recipes(sample_config):
    recipes = generate_sample_recipes("ayam goreng", sample_config, origin="https://cookpad.test")

    assert len(recipes) == 3
    assert [r.title for r in recipes] == [
        "ayam goreng Recipe 1",
        "ayam goreng Recipe 2",
        "ayam goreng Recipe 3",
    ]
    assert [(r.cook_time, r.servings) for r in recipes] == [
        ("30 min", "4"), ("45 min", "6"), ("20 min", "2"),
    ]
    assert [r.id for r in recipes] == ["sample-1", "sample-2", "sample-3"]
    assert all(r.scraped_at == FIXED_TIME for r in recipes)
    assert all(r.url == "https://cookpad.test/search/ayam%20goreng" for r in recipes)
    assert all(r.instructions == DEFAULT_INSTRUCTIONS for r in recipes)
    assert len(DEFAULT_INSTRUCTIONS) == 6


def test_keywords_combine_without_duplicates():
    ingredients = sample_ingredients("Ayam Goreng")

    # ayam first, then the goreng ingredients not already present
    assert ingredients == ["chicken", "garlic", "onion", "ginger", "oil", "salt", "pepper"]


def test_keywords_preserve_first_seen_order():
    config = SampleConfig(keyword_ingredients={
        "fish": ["fish", "lemon"],
        "taco": ["tortilla", "lemon", "cabbage"],
    })

    assert sample_ingredients("fish taco", config) == ["fish", "lemon", "tortilla", "cabbage"]


def test_unknown_term_uses_default_ingredients():
    assert sample_ingredients("quiche lorraine") == DEFAULT_INGREDIENTS


def test_generation_is_deterministic_apart_from_ids_and_time():
    first = generate_sample_recipes("pasta salad")
    second = generate_sample_recipes("pasta salad")

    assert [r.ingredients for r in first] == [r.ingredients for r in second]
    assert [r.title for r in first] == [r.title for r in second]
    assert {r.id for r in first}.isdisjoint({r.id for r in second})


def test_injected_tables_replace_defaults(sample_config):
    sample_config.keyword_ingredients = {"toast": ["bread", "butter"]}
    sample_config.default_ingredients = ["water"]

    recipes = generate_sample_recipes("French Toast", sample_config)

    assert recipes[0].ingredients == ["bread", "butter"]


def test_samples_are_valid_recipes():
    for recipe in generate_sample_recipes("sup"):
        assert isinstance(recipe, Recipe)
        assert Recipe.model_validate(recipe.model_dump(by_alias=True)) == recipe


def test_search_url_escapes_term():
    assert search_url_for("nasi/goreng", "https://x.test") == "https://x.test/search/nasi%2Fgoreng"
