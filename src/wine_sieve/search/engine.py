"""Typo-tolerant text search over catalog records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from wine_sieve.schema import Wine
from wine_sieve.search.distance import normalize_text, similarity
from wine_sieve.search.types import MatchResult, SearchField

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7

SEARCH_FIELDS: tuple[SearchField, ...] = (
    "wine_name",
    "country",
    "subregion",
    "grape_or_style",
    "wine_type",
    "aromas",
)


@dataclass(frozen=True)
class FuzzyConfig:
    threshold: float = DEFAULT_THRESHOLD


class FuzzyMatcher:
    """Ordered match chain: containment, then word-level, then whole-string similarity."""

    def __init__(self, config: FuzzyConfig | None = None):
        self.config = config or FuzzyConfig()

    def match(self, query: str, target: str) -> MatchResult:
        normalized_query = normalize_text(query)
        normalized_target = normalize_text(target)

        result = (
            self._match_contains(query, target, normalized_query, normalized_target)
            or self._match_words(query, target)
            or self._match_similarity(query, target, normalized_query, normalized_target)
        )
        if result:
            return result

        return MatchResult(
            query=query,
            target=target,
            matched=False,
            method="none",
            score=similarity(normalized_query, normalized_target),
        )

    def is_match(self, query: str, target: str) -> bool:
        return self.match(query, target).matched

    def matched_fields(self, query: str, record: Wine) -> list[SearchField]:
        fields: list[SearchField] = []
        for field in SEARCH_FIELDS:
            value = getattr(record, field)
            if field == "aromas":
                if any(self.is_match(query, aroma) for aroma in value):
                    fields.append(field)
            elif value is not None and self.is_match(query, value):
                fields.append(field)
        return fields

    def match_any(self, query: str, record: Wine) -> bool:
        for field in SEARCH_FIELDS:
            value = getattr(record, field)
            if field == "aromas":
                if any(self.is_match(query, aroma) for aroma in value):
                    return True
            elif value is not None and self.is_match(query, value):
                return True
        return False

    def search(self, records: Iterable[Wine], query: str) -> list[Wine]:
        if not query or not query.strip():
            logger.debug("blank query, search inactive")
            return []

        result = [record for record in records if self.match_any(query, record)]
        logger.debug("search %r matched %d records", query, len(result))
        return result

    def _match_contains(
        self,
        query: str,
        target: str,
        normalized_query: str,
        normalized_target: str,
    ) -> MatchResult | None:
        if normalized_query in normalized_target:
            return MatchResult(query=query, target=target, matched=True, method="contains", score=1.0)
        return None

    def _match_words(self, query: str, target: str) -> MatchResult | None:
        query_words = query.lower().split()
        target_words = target.lower().split()
        if not query_words or not target_words:
            return None

        weakest = 1.0
        for query_word in query_words:
            best = self._best_word_score(query_word, target_words)
            if best is None:
                return None
            weakest = min(weakest, best)

        return MatchResult(query=query, target=target, matched=True, method="word", score=weakest)

    def _best_word_score(self, query_word: str, target_words: list[str]) -> float | None:
        best: float | None = None
        for target_word in target_words:
            if query_word in target_word or target_word in query_word:
                return 1.0
            score = similarity(normalize_text(query_word), normalize_text(target_word))
            if score >= self.config.threshold and (best is None or score > best):
                best = score
        return best

    def _match_similarity(
        self,
        query: str,
        target: str,
        normalized_query: str,
        normalized_target: str,
    ) -> MatchResult | None:
        score = similarity(normalized_query, normalized_target)
        if score >= self.config.threshold:
            return MatchResult(query=query, target=target, matched=True, method="similarity", score=score)
        return None


def is_fuzzy_match(query: str, field: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when ``query`` approximately matches ``field``."""

    return FuzzyMatcher(config=FuzzyConfig(threshold=threshold)).is_match(query, field)


def match_any(query: str, record: Wine, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when ``query`` matches any searchable field of ``record``."""

    return FuzzyMatcher(config=FuzzyConfig(threshold=threshold)).match_any(query, record)


def search_records(
    records: Iterable[Wine],
    query: str,
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[Wine]:
    """Return records matching ``query`` in input order.

    An empty or whitespace-only query means no search is active and yields
    an empty list rather than the whole catalog.
    """

    return FuzzyMatcher(config=FuzzyConfig(threshold=threshold)).search(records, query)
