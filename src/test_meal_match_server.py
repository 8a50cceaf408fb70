"""Tests for the MealMatch API, run in-process with FastAPI's TestClient."""

import inspect
import json

import httpx

import pytest
from fastapi.testclient import TestClient

import meal_match_server
from meal_match_server import app, get_scraper, get_store
from models import Recipe
from scraper import scrape_recipes
from store import RecipeStore


class FakeScraper:
    """Returns queued results in order and records the terms it was asked for."""

    def __init__(self, *results):
        self.results = list(results)
        self.terms = []

    async def __call__(self, search_term: str):
        self.terms.append(search_term)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def store(tmp_path) -> RecipeStore:
    return RecipeStore(tmp_path / "recipes.json")


@pytest.fixture
def api(store):
    """TestClient wired to a temporary store; set api.scraper to fake scraping."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        client.scraper = FakeScraper()
        app.dependency_overrides[get_scraper] = lambda: client.scraper
        yield client
    app.dependency_overrides.clear()


def test_startup_creates_store_file(api, store):
    assert json.loads(store.path.read_text()) == []


def test_health(api):
    resp = api.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "recipes": 0}


def test_list_recipes_returns_whole_collection(api, store, make_recipe):
    store.add_new([make_recipe("A", ["rice"], url="https://x.test/a"), make_recipe("B")])

    resp = api.get("/recipes")

    assert resp.status_code == 200
    body = resp.json()
    assert [r["title"] for r in body] == ["A", "B"]
    assert body[0]["ingredients"] == ["rice"]
    assert body[0]["cookTime"] == "30 min"
    assert body[0]["scrapedAt"]


def test_get_single_recipe(api, store, make_recipe):
    recipe = make_recipe("A")
    store.add_new([recipe])

    assert api.get(f"/recipes/{recipe.id}").json()["title"] == "A"
    missing = api.get("/recipes/unknown")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Recipe not found"}


def test_scrape_returns_and_stores_new_recipes(api, store, make_recipe):
    found = [make_recipe("Soto", url="https://x.test/1"), make_recipe("Rawon", url="https://x.test/2")]
    api.scraper = FakeScraper(found)

    resp = api.post("/scrape", json={"searchTerm": "  soto  "})

    assert resp.status_code == 200
    assert [r["title"] for r in resp.json()] == ["Soto", "Rawon"]
    assert api.scraper.terms == ["soto"]
    assert [r.title for r in store.load()] == ["Soto", "Rawon"]


def test_scrape_twice_keeps_one_record_per_url(api, store, make_recipe):
    api.scraper = FakeScraper(
        [make_recipe("First", url="https://x.test/1")],
        [make_recipe("Second", url="https://x.test/1"), make_recipe("New", url="https://x.test/2")],
    )

    api.post("/scrape", json={"searchTerm": "soto"})
    resp = api.post("/scrape", json={"searchTerm": "soto"})

    assert [r["title"] for r in resp.json()] == ["New"]
    stored = store.load()
    assert [r.title for r in stored if r.url == "https://x.test/1"] == ["First"]
    assert len(stored) == 2


@pytest.mark.parametrize("body", [{}, {"searchTerm": ""}, {"searchTerm": "   "}, None])
def test_scrape_requires_search_term(api, body):
    resp = api.post("/scrape", json=body) if body is not None else api.post("/scrape")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Search term is required"}
    assert api.scraper.terms == []


def test_scrape_unexpected_failure_returns_500(api, store):
    api.scraper = FakeScraper(RuntimeError("boom"))

    resp = api.post("/scrape", json={"searchTerm": "soto"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to scrape recipes"}
    assert store.load() == []


def test_delete_recipe(api, store, make_recipe):
    keep, drop = make_recipe("Keep"), make_recipe("Drop")
    store.add_new([keep, drop])

    resp = api.delete(f"/recipes/{drop.id}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert store.load() == [keep]


def test_delete_unknown_recipe_still_succeeds(api, store, make_recipe):
    store.add_new([make_recipe("Keep")])
    before = store.path.read_text()

    resp = api.delete("/recipes/does-not-exist")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert store.path.read_text() == before


def test_scrape_with_real_pipeline_falls_back_to_samples(api, store):
    """With the source site unreachable the endpoint still answers with placeholders."""

    def refuse(request):
        raise httpx.ConnectError("offline", request=request)

    async def offline_scrape(search_term):
        async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as client:
            return await scrape_recipes(search_term, http_client=client)

    app.dependency_overrides[get_scraper] = lambda: offline_scrape

    resp = api.post("/scrape", json={"searchTerm": "nasi goreng"})

    assert resp.status_code == 200
    body = resp.json()
    assert [r["title"] for r in body] == [f"nasi goreng Recipe {n}" for n in (1, 2, 3)]
    assert body[0]["ingredients"][:4] == ["rice", "water", "salt", "oil"]
    assert all(Recipe.model_validate(r) for r in body)
    assert len(store.load()) == 3


@pytest.mark.parametrize("handler", ["list_recipes", "get_recipe", "delete_recipe", "health_check"])
def test_store_handlers_run_in_threadpool(handler):
    # FastAPI runs plain def handlers off the event loop
    assert not inspect.iscoroutinefunction(getattr(meal_match_server, handler))
