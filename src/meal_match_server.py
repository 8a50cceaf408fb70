"""
FastAPI server for MealMatch.

Endpoints:
- GET /recipes - Full recipe collection
- GET /recipes/{recipe_id} - A single recipe
- POST /scrape - Scrape recipes for {searchTerm}, store and return the new ones
- DELETE /recipes/{recipe_id} - Remove a recipe
- GET /health - Health check

All paths are prefixed with API_PREFIX when it is set (e.g. "/api").

Usage: uvicorn meal_match_server:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, List, Optional

from fastapi import APIRouter, Depends, FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

import config
from models import Recipe, ScrapeRequest
from scraper import scrape_recipes
from server.responses import error_response, success_response
from store import RecipeStore


logger = logging.getLogger(__name__)


Scraper = Callable[[str], Awaitable[List[Recipe]]]


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

_store: Optional[RecipeStore] = None


def get_store() -> RecipeStore:
    """Get the shared recipe store."""
    global _store
    if _store is None:
        _store = RecipeStore(config.RECIPES_FILE)
    return _store


def get_scraper() -> Scraper:
    """Get the scrape function used by POST /scrape."""
    return scrape_recipes


# ---------------------------------------------------------------------------
# FastAPI App
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Make sure the store file exists before serving."""
    logger.info("FastAPI lifespan startup - initializing recipe store...")
    store_factory = app.dependency_overrides.get(get_store, get_store)
    store_factory().ensure_exists()
    yield
    logger.info("FastAPI lifespan shutdown")


router = APIRouter(prefix=config.API_PREFIX)


@router.get("/recipes", response_model=List[Recipe])
def list_recipes(store: RecipeStore = Depends(get_store)):
    """Return every stored recipe."""
    return store.load()


@router.get("/recipes/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)):
    recipe = store.get(recipe_id)
    if recipe is None:
        return error_response(404, "Recipe not found")
    return recipe


@router.post("/scrape", response_model=List[Recipe])
async def scrape(
    request: Optional[ScrapeRequest] = None,
    store: RecipeStore = Depends(get_store),
    scraper: Scraper = Depends(get_scraper),
):
    """
    Scrape recipes for a search term.

    Newly found recipes are deduplicated by URL against the store and
    appended to it. Only the recipes that were added are returned.
    """
    search_term = (request.search_term or "").strip() if request else ""
    if not search_term:
        return error_response(400, "Search term is required")

    logger.debug(f"/scrape endpoint called: search_term={search_term!r}")

    try:
        recipes = await scraper(search_term)
        return await run_in_threadpool(store.add_new, recipes)
    except Exception as e:
        logger.exception(f"Scraping error: {e}")
        return error_response(500, "Failed to scrape recipes")


@router.delete("/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)):
    """Delete a recipe. Deleting an unknown id is not an error."""
    removed = store.delete(recipe_id)
    logger.debug(f"delete_recipe {recipe_id}: removed={removed}")
    return success_response()


@router.get("/health")
def health_check(store: RecipeStore = Depends(get_store)):
    """Health check endpoint."""
    return {"status": "ok", "recipes": len(store.load())}


app = FastAPI(
    title="MealMatch API",
    description="Recipe scraping and storage for ingredient matching",
    lifespan=lifespan
)

# CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
