"""Combined filter and search view."""

from collections.abc import Sequence

from wine_sieve.filtering import FilterConfig, FilterEngine
from wine_sieve.schema import FilterState, Wine
from wine_sieve.search.engine import FuzzyConfig, FuzzyMatcher


def browse(
    records: Sequence[Wine],
    state: FilterState | None = None,
    query: str | None = None,
    *,
    filter_config: FilterConfig | None = None,
    fuzzy_config: FuzzyConfig | None = None,
) -> list[Wine]:
    """Return records passing both the filters and the text search.

    Args:
        records: Catalog snapshot.
        state: Filter predicates. None applies no filtering.
        query: Free-text query. None or blank applies no search.
        filter_config: Absence handling for the filter engine.
        fuzzy_config: Similarity threshold for the search.

    Returns:
        Matching records in catalog order.
    """
    filter_engine = FilterEngine(config=filter_config)
    matcher = FuzzyMatcher(config=fuzzy_config)
    searching = bool(query and query.strip())

    result: list[Wine] = []
    for record in records:
        if state is not None and not filter_engine.matches(record, state):
            continue
        if searching and not matcher.match_any(query, record):
            continue
        result.append(record)
    return result
