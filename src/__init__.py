"""
MealMatch - recipe scraping and pantry matching
"""

import sys
from pathlib import Path

# Add src directory to Python path for absolute imports
sys.path.insert(0, str(Path(__file__).parent))

from scraper import build_scrape_graph, scrape_recipes
from matching import match_recipes, score_recipe
from models import Recipe, RecipeMatch, ScrapeStrategy
from normalize import clean_ingredient
from samples import SampleConfig, generate_sample_recipes

__all__ = [
    "build_scrape_graph",
    "scrape_recipes",
    "match_recipes",
    "score_recipe",
    "Recipe",
    "RecipeMatch",
    "ScrapeStrategy",
    "clean_ingredient",
    "SampleConfig",
    "generate_sample_recipes",
]
