"""
Shared infrastructure for scrape graph nodes.

Provides the HTTP client factory, page fetching and access to values
injected through the graph run config.
"""

import logging
from typing import Any

import httpx
from langchain_core.runnables import RunnableConfig

import config as settings
from samples import SampleConfig


logger = logging.getLogger(__name__)


def create_http_client(**kwargs) -> httpx.AsyncClient:
    """
    Create an async HTTP client with browser-like headers.

    This helps avoid 403 errors from sites that block non-browser requests.
    """
    default_headers = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.5",
    }

    # Merge any provided headers with defaults
    headers = {**default_headers, **kwargs.pop("headers", {})}
    timeout = kwargs.pop("timeout", settings.HTTP_TIMEOUT)

    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=timeout,
        headers=headers,
        **kwargs
    )


async def fetch_html(client: httpx.AsyncClient, url: str) -> str:
    """
    Fetch a page and return its body.

    Raises:
        httpx.HTTPError: on network failure or a non-2xx status
    """
    logger.debug(f"Fetching {url}")
    response = await client.get(url)
    response.raise_for_status()
    return response.text


def _configurable(config: RunnableConfig | None) -> dict[str, Any]:
    if not config:
        return {}
    return config.get("configurable", {}) or {}


def get_http_client(config: RunnableConfig | None) -> httpx.AsyncClient:
    """Get the HTTP client injected into the graph run."""
    client = _configurable(config).get("http_client")
    if client is None:
        raise ValueError("http_client must be provided in the run config")
    return client


def get_origin(config: RunnableConfig | None) -> str:
    """Get the source site origin for this run."""
    return _configurable(config).get("origin") or settings.SOURCE_ORIGIN


def get_sample_config(config: RunnableConfig | None) -> SampleConfig | None:
    return _configurable(config).get("sample_config")


def get_max_detail_pages(config: RunnableConfig | None) -> int:
    return _configurable(config).get("max_detail_pages") or settings.MAX_DETAIL_PAGES
