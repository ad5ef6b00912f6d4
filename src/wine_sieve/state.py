"""Whole-dimension updates of a FilterState."""

from __future__ import annotations

from collections.abc import Sequence

from wine_sieve.options import narrow_subregions
from wine_sieve.schema import (
    RANGE_DIMENSIONS,
    SELECT_DIMENSIONS,
    FilterState,
    RangeDimension,
    SelectDimension,
    Wine,
)


def initial_filters() -> FilterState:
    return FilterState()


def reset_filters() -> FilterState:
    return initial_filters()


def toggle_value(state: FilterState, dimension: SelectDimension, value: str | int) -> FilterState:
    """Add ``value`` to a multi-select dimension, or remove it if already selected."""

    _, field = SELECT_DIMENSIONS[dimension]
    current: tuple = getattr(state, field)
    if value in current:
        updated = tuple(item for item in current if item != value)
    else:
        updated = (*current, value)
    return state.model_copy(update={field: updated})


def set_range(state: FilterState, dimension: RangeDimension, low: float, high: float) -> FilterState:
    """Replace one range pair; the result is validated like a fresh FilterState."""

    _, field = RANGE_DIMENSIONS[dimension]
    return FilterState.model_validate({**state.model_dump(), field: (low, high)})


def toggle_country(state: FilterState, country: str, records: Sequence[Wine]) -> FilterState:
    """Toggle a country and drop sub-regions orphaned by its removal.

    A selected sub-region survives the removal when a still-selected country
    also owns it.
    """

    updated = toggle_value(state, "country", country)
    if country in updated.countries:
        return updated

    removed_owned = {record.subregion for record in records if record.country == country}
    still_owned = set(narrow_subregions(records, updated.countries)) if updated.countries else set()
    subregions = tuple(
        subregion
        for subregion in updated.subregions
        if subregion not in removed_owned or subregion in still_owned
    )
    return updated.model_copy(update={"subregions": subregions})
