"""Tests for ingredient text normalization."""

import pytest

from normalize import clean_ingredient, normalize_pantry_item, normalize_whitespace


@pytest.mark.parametrize("raw, expected", [
    ("2 cups flour", "flour"),
    ("(optional) salt", "salt"),
    ("1 1/2 cups of sugar", "sugar"),
    ("½ tsp ground cumin", "ground cumin"),
    ("200g chicken breast", "chicken breast"),
    ("3 siung bawang putih", "bawang putih"),
    ("2 sdm kecap manis", "kecap manis"),
    ("1-2 large eggs (beaten)", "eggs"),
    ("  olive oil  ", "olive oil"),
    ("flour", "flour"),
])
def test_clean_ingredient_strips_quantities_and_asides(raw, expected):
    assert clean_ingredient(raw) == expected


@pytest.mark.parametrize("raw", [
    "1/2 tsp",
    "2 cups",
    "ab",
    "3 x 4",
    "(to taste)",
    "",
    "   ",
])
def test_clean_ingredient_rejects_unusable_lines(raw):
    assert clean_ingredient(raw) is None


@pytest.mark.parametrize("raw, expected", [
    ("buah naga", "buah naga"),
    ("teh celup", "teh celup"),
    ("2 buah tomat", "tomat"),
    ("1 sendok teh garam", "garam"),
    ("2 sendok makan gula pasir", "gula pasir"),
    ("3buah apel", "apel"),
])
def test_unit_words_that_name_ingredients_need_an_amount_first(raw, expected):
    assert clean_ingredient(raw) == expected


def test_clean_ingredient_removes_digits_inside_the_name():
    assert clean_ingredient("chicken 2 thighs") == "chicken thighs"


def test_clean_ingredient_tolerates_non_string_input():
    assert clean_ingredient(None) is None
    assert clean_ingredient(42) is None


def test_clean_ingredient_tolerates_unbalanced_parenthesis():
    assert clean_ingredient("2 cups flour (sifted") == "flour (sifted"


def test_normalize_pantry_item():
    assert normalize_pantry_item("  Red Onion ") == "red onion"


def test_normalize_whitespace():
    assert normalize_whitespace("a\n  b\t c ") == "a b c"
