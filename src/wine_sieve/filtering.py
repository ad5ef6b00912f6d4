"""Predicate filter engine over catalog records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from wine_sieve.schema import RANGE_DIMENSIONS, FilterState, Range, Wine

logger = logging.getLogger(__name__)

_CATEGORICAL_DIMENSIONS = (
    ("wine_type", "wine_type", "wine_types"),
    ("country", "country", "countries"),
    ("subregion", "subregion", "subregions"),
    ("grape_or_style", "grape_or_style", "grape_varieties"),
)


@dataclass(frozen=True)
class FilterConfig:
    """How absent attributes are treated.

    With the defaults a record missing a numeric attribute or a vintage is
    never excluded on that attribute, so unrated wines survive the default
    full-scale ranges. Set either flag to False to make absence fail.
    """

    absent_passes_ranges: bool = True
    absent_passes_vintage: bool = True


class FilterEngine:
    """Evaluates a FilterState conjunction against records."""

    def __init__(self, config: FilterConfig | None = None):
        self.config = config or FilterConfig()

    def filter(self, records: Iterable[Wine], state: FilterState) -> list[Wine]:
        result = [record for record in records if self.matches(record, state)]
        logger.debug("filter kept %d records", len(result))
        return result

    def matches(self, record: Wine, state: FilterState) -> bool:
        return (
            self._ranges_pass(record, state)
            and self._categories_pass(record, state)
            and self._vintage_passes(record.vintage, state.vintages)
            and self._aromas_pass(record.aromas, state.aromas)
        )

    def explain(self, record: Wine, state: FilterState) -> list[str]:
        """Return the dimensions on which ``record`` fails, in evaluation order."""

        failed: list[str] = []
        for dimension, (attribute, field) in RANGE_DIMENSIONS.items():
            if not self._range_passes(getattr(record, attribute), getattr(state, field)):
                failed.append(dimension)
        for dimension, attribute, field in _CATEGORICAL_DIMENSIONS:
            if not self._category_passes(getattr(record, attribute), getattr(state, field)):
                failed.append(dimension)
        if not self._vintage_passes(record.vintage, state.vintages):
            failed.append("vintage")
        if not self._aromas_pass(record.aromas, state.aromas):
            failed.append("aroma")
        return failed

    def _ranges_pass(self, record: Wine, state: FilterState) -> bool:
        return all(
            self._range_passes(getattr(record, attribute), getattr(state, field))
            for attribute, field in RANGE_DIMENSIONS.values()
        )

    def _categories_pass(self, record: Wine, state: FilterState) -> bool:
        return all(
            self._category_passes(getattr(record, attribute), getattr(state, field))
            for _, attribute, field in _CATEGORICAL_DIMENSIONS
        )

    def _range_passes(self, value: float | None, bounds: Range) -> bool:
        if value is None:
            return self.config.absent_passes_ranges
        low, high = bounds
        return low <= value <= high

    @staticmethod
    def _category_passes(value: str | None, selected: tuple[str, ...]) -> bool:
        return not selected or value in selected

    def _vintage_passes(self, vintage: int | None, selected: tuple[int, ...]) -> bool:
        if not selected:
            return True
        if vintage is None:
            return self.config.absent_passes_vintage
        return vintage in selected

    @staticmethod
    def _aromas_pass(aromas: list[str], selected: tuple[str, ...]) -> bool:
        if not selected:
            return True
        return any(aroma in selected for aroma in aromas)


def filter_records(
    records: Iterable[Wine],
    state: FilterState,
    *,
    config: FilterConfig | None = None,
) -> list[Wine]:
    """Return the records satisfying every predicate in ``state``, in input order."""

    return FilterEngine(config=config).filter(records, state)
