"""Tests for edit distance and similarity."""

import pytest

from wine_sieve.search import edit_distance, normalize_text, similarity

PAIRS = [
    ("cabernet", "cabernot"),
    ("kitten", "sitting"),
    ("", "merlot"),
    ("syrah", "shiraz"),
    ("", ""),
    ("rosé", "rose"),
]


def test_normalize_lowercases_and_removes_whitespace():
    assert normalize_text("  Pinot \t Noir\n") == "pinotnoir"


def test_cabernet_typo():
    assert edit_distance("cabernet", "cabernot") == 1
    assert similarity("cabernet", "cabernot") == pytest.approx(0.875)


def test_classic_distance():
    assert edit_distance("kitten", "sitting") == 3


def test_distance_to_empty_is_length():
    assert edit_distance("", "merlot") == 6
    assert edit_distance("merlot", "") == 6


@pytest.mark.parametrize("a, b", PAIRS)
def test_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


@pytest.mark.parametrize("a, b", PAIRS)
def test_similarity_is_bounded(a, b):
    assert 0.0 <= similarity(a, b) <= 1.0


def test_identical_strings_are_fully_similar():
    assert similarity("malbec", "malbec") == 1.0
    assert similarity("", "") == 1.0


def test_similarity_to_empty_is_zero():
    assert similarity("malbec", "") == 0.0
