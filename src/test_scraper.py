"""Tests for the scrape graph, with the source site faked by httpx.MockTransport."""

import asyncio

import httpx

from html_fixtures import (
    DETAIL_PAGE,
    DETAIL_PAGE_JSON_LD,
    ORIGIN,
    SEARCH_PAGE_WITH_CARDS,
    SEARCH_PAGE_WITH_LINKS,
)
from models import ScrapeStrategy
from nodes.routing import route_after_cards
from scraper import scrape_recipes


class FakeSite:
    """Serves canned pages by URL and records what was requested."""

    def __init__(self, pages: dict, failing: set = frozenset()):
        self.pages = pages
        self.failing = failing
        self.requested = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url in self.failing:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.pages:
            return httpx.Response(200, text=self.pages[url])
        return httpx.Response(404, text="not found")

    def scrape(self, search_term: str, **kwargs):
        async def run():
            transport = httpx.MockTransport(self.handler)
            async with httpx.AsyncClient(transport=transport) as client:
                return await scrape_recipes(search_term, http_client=client, origin=ORIGIN, **kwargs)
        return asyncio.run(run())


def search_url(term: str) -> str:
    return f"{ORIGIN}/search/{term}"


NASI_URL = f"{ORIGIN}/id/resep/201-nasi-goreng"
SOTO_URL = f"{ORIGIN}/id/resep/202-soto-ayam"


def test_cards_found_on_search_page():
    site = FakeSite({search_url("ayam"): SEARCH_PAGE_WITH_CARDS})

    recipes = site.scrape("ayam")

    assert [r.title for r in recipes] == ["Ayam Goreng Kuning", "Sayur Asem"]
    assert site.requested == [search_url("ayam")]


def test_follows_links_when_no_cards():
    site = FakeSite({
        search_url("nasi"): SEARCH_PAGE_WITH_LINKS,
        NASI_URL: DETAIL_PAGE,
        SOTO_URL: DETAIL_PAGE_JSON_LD,
    })

    recipes = site.scrape("nasi")

    assert [r.title for r in recipes] == ["Nasi Goreng Kampung", "Soto Ayam Lamongan"]
    assert [r.url for r in recipes] == [NASI_URL, SOTO_URL]
    assert site.requested == [search_url("nasi"), NASI_URL, SOTO_URL]


def test_failed_detail_page_is_skipped():
    site = FakeSite(
        {search_url("nasi"): SEARCH_PAGE_WITH_LINKS, SOTO_URL: DETAIL_PAGE_JSON_LD},
        failing={NASI_URL},
    )

    recipes = site.scrape("nasi")

    assert [r.url for r in recipes] == [SOTO_URL]


def test_detail_page_error_status_is_skipped():
    site = FakeSite({search_url("nasi"): SEARCH_PAGE_WITH_LINKS, NASI_URL: DETAIL_PAGE})

    recipes = site.scrape("nasi")

    # SOTO_URL answers 404
    assert [r.url for r in recipes] == [NASI_URL]


def test_unreachable_site_falls_back_to_samples(sample_config):
    site = FakeSite({}, failing={search_url("ayam")})

    recipes = site.scrape("ayam", sample_config=sample_config)

    assert [r.id for r in recipes] == ["sample-1", "sample-2", "sample-3"]
    assert recipes[0].title == "ayam Recipe 1"
    assert recipes[0].ingredients[0] == "chicken"
    assert recipes[0].url == search_url("ayam")


def test_empty_extraction_falls_back_to_samples(sample_config):
    site = FakeSite({search_url("kue"): "<html><body><p>Tidak ada hasil</p></body></html>"})

    recipes = site.scrape("kue", sample_config=sample_config)

    assert len(recipes) == 3
    assert all(r.title.startswith("kue Recipe") for r in recipes)


def test_cards_strategy_never_follows_links(sample_config):
    site = FakeSite({search_url("nasi"): SEARCH_PAGE_WITH_LINKS, NASI_URL: DETAIL_PAGE})

    recipes = site.scrape("nasi", strategy=ScrapeStrategy.CARDS, sample_config=sample_config)

    assert site.requested == [search_url("nasi")]
    assert [r.id for r in recipes] == ["sample-1", "sample-2", "sample-3"]


def test_details_strategy_skips_cards():
    detail_urls = [f"{ORIGIN}/id/resep/{n}" for n in ("101-ayam-goreng", "102-sayur-asem", "103")]
    pages = {search_url("ayam"): SEARCH_PAGE_WITH_CARDS}
    pages.update({url: DETAIL_PAGE for url in detail_urls})
    site = FakeSite(pages)

    recipes = site.scrape("ayam", strategy=ScrapeStrategy.DETAILS)

    assert [r.url for r in recipes] == detail_urls
    assert all(r.title == "Nasi Goreng Kampung" for r in recipes)


def test_detail_fetches_are_bounded():
    links = "".join(f'<a href="/id/resep/{n}">Resep {n}</a>' for n in range(10))
    pages = {search_url("mie"): f"<html><body>{links}</body></html>"}
    pages.update({f"{ORIGIN}/id/resep/{n}": DETAIL_PAGE for n in range(10)})
    site = FakeSite(pages)

    recipes = site.scrape("mie", max_detail_pages=3)

    assert len(recipes) == 3
    assert len(site.requested) == 4


def test_route_after_cards():
    base = {"strategy": ScrapeStrategy.AUTO, "recipes": [], "candidate_links": ["x"]}

    assert route_after_cards(base) == "follow_recipe_links"
    assert route_after_cards({**base, "recipes": ["card"]}) == "ensure_results"
    assert route_after_cards({**base, "candidate_links": []}) == "ensure_results"
    assert route_after_cards({**base, "strategy": ScrapeStrategy.CARDS}) == "ensure_results"
    assert route_after_cards({**base, "strategy": ScrapeStrategy.DETAILS, "recipes": ["card"]}) == "follow_recipe_links"
