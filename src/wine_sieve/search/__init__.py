"""Fuzzy search utilities for wine-sieve."""

from wine_sieve.search.distance import edit_distance, normalize_text, similarity
from wine_sieve.search.engine import (
    DEFAULT_THRESHOLD,
    FuzzyConfig,
    FuzzyMatcher,
    is_fuzzy_match,
    match_any,
    search_records,
)
from wine_sieve.search.types import MatchResult

__all__ = [
    "DEFAULT_THRESHOLD",
    "FuzzyConfig",
    "FuzzyMatcher",
    "MatchResult",
    "edit_distance",
    "is_fuzzy_match",
    "match_any",
    "normalize_text",
    "search_records",
    "similarity",
]
