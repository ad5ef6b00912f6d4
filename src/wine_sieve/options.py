"""Derive filter option lists from a catalog."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from wine_sieve.schema import SELECT_DIMENSIONS, OptionSets, SelectDimension, Wine


def derive_options(records: Sequence[Wine]) -> OptionSets:
    """Collect the distinct values of every categorical and tag dimension.

    Strings are sorted ascending; vintages are sorted most recent first.
    Absent values and blank strings are dropped.
    """

    return OptionSets(
        wine_types=_distinct_sorted(record.wine_type for record in records),
        countries=_distinct_sorted(record.country for record in records),
        subregions=_distinct_sorted(record.subregion for record in records),
        vintages=sorted(
            {record.vintage for record in records if record.vintage is not None},
            reverse=True,
        ),
        grape_varieties=_distinct_sorted(record.grape_or_style for record in records),
        aromas=_distinct_sorted(aroma for record in records for aroma in record.aromas),
    )


def narrow_subregions(records: Sequence[Wine], selected_countries: Iterable[str]) -> list[str]:
    """Sub-regions owned by records from the selected countries.

    An empty selection returns the full sub-region list.
    """

    countries = set(selected_countries)
    if not countries:
        return _distinct_sorted(record.subregion for record in records)
    return _distinct_sorted(
        record.subregion for record in records if record.country in countries
    )


def facet_counts(records: Sequence[Wine], dimension: SelectDimension) -> list[tuple[str | int, int]]:
    """Number of records per distinct value, most common first."""

    attribute, _ = SELECT_DIMENSIONS[dimension]
    counter: Counter[str | int] = Counter()
    for record in records:
        value = getattr(record, attribute)
        if dimension == "aroma":
            counter.update(set(aroma for aroma in value if _present(aroma)))
        elif _present(value):
            counter[value] += 1
    return sorted(counter.items(), key=lambda item: (-item[1], item[0]))


def _present(value: str | int | None) -> bool:
    if value is None:
        return False
    return not isinstance(value, str) or bool(value.strip())


def _distinct_sorted(values: Iterable[str | None]) -> list[str]:
    return sorted({value for value in values if _present(value)})
