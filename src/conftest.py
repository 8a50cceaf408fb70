"""Shared fixtures for the MealMatch tests."""

import itertools

import pytest

from html_fixtures import FIXED_TIME
from models import Recipe
from samples import SampleConfig


@pytest.fixture
def sample_config() -> SampleConfig:
    """Placeholder generator config with predictable ids and timestamps."""
    counter = itertools.count(1)
    return SampleConfig(
        id_factory=lambda: f"sample-{next(counter)}",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def make_recipe():
    """Build a Recipe with sensible defaults."""
    def _make(title="Test Recipe", ingredients=None, url=None, **kwargs):
        return Recipe(title=title, ingredients=ingredients or [], url=url, **kwargs)
    return _make
