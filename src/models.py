"""
Data models and state definitions for MealMatch.

Recipes travel over the wire and into the JSON store with camelCase keys
(cookTime, scrapedAt, ...); Python code uses the snake_case attribute names.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TypedDict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_recipe_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Recipe(BaseModel):
    """A single scraped or synthesized recipe."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_recipe_id, description="Unique opaque identifier")
    title: str = Field(description="The recipe title, never empty")
    image: Optional[str] = Field(default=None, description="Absolute image URL")
    url: Optional[str] = Field(default=None, description="Absolute source URL, used for deduplication")
    ingredients: List[str] = Field(default_factory=list, description="Normalized ingredient names")
    instructions: List[str] = Field(default_factory=list, description="Ordered preparation steps")
    cook_time: str = Field(default="30 min", alias="cookTime")
    servings: str = Field(default="4")
    scraped_at: datetime = Field(default_factory=utc_now, alias="scrapedAt")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value


class RecipeMatch(Recipe):
    """A recipe scored against a pantry."""
    matched_ingredients: List[str] = Field(default_factory=list, alias="matchedIngredients")
    missing_ingredients: List[str] = Field(default_factory=list, alias="missingIngredients")
    match_percentage: float = Field(default=0.0, alias="matchPercentage")


class ScrapeRequest(BaseModel):
    """Body of POST /scrape."""
    model_config = ConfigDict(populate_by_name=True)

    search_term: Optional[str] = Field(default=None, alias="searchTerm")


class ScrapeStrategy(str, Enum):
    """How the scrape pipeline looks for recipes on the source site."""
    AUTO = "auto"          # cards first, follow links when cards give nothing
    CARDS = "cards"        # search-result cards only
    DETAILS = "details"    # always follow links to detail pages


# Graph state definition

class ScrapeState(TypedDict):
    """State for the scrape graph."""
    search_term: str
    strategy: ScrapeStrategy

    # Search page
    search_url: Optional[str]
    search_html: Optional[str]
    candidate_links: Optional[List[str]]

    # Output
    recipes: List[Recipe]
    error: Optional[str]


def dump_recipes(recipes) -> list[dict]:
    """Serialize recipes to JSON-ready dicts with their wire (camelCase) keys."""
    return [recipe.model_dump(mode="json", by_alias=True) for recipe in recipes]
