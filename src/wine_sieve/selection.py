"""Bounded selection of wines for side-by-side comparison."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable

from wine_sieve.exceptions import SelectionLimitError
from wine_sieve.schema import Wine

logger = logging.getLogger(__name__)

DEFAULT_MAX_SELECTION = 5

SelectionKey = Callable[[Wine], Hashable]


def name_key(record: Wine) -> Hashable:
    # Two vintages of the same label share this key.
    return record.wine_name


def composite_key(record: Wine) -> Hashable:
    return (record.wine_name, record.vintage, record.subregion)


class SelectionSet:
    """Toggle set capped at ``max_size`` entries."""

    def __init__(self, max_size: int = DEFAULT_MAX_SELECTION, key: SelectionKey = name_key):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.key = key
        self._keys: list[Hashable] = []

    def __contains__(self, record: Wine) -> bool:
        return self.key(record) in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    @property
    def keys(self) -> tuple[Hashable, ...]:
        return tuple(self._keys)

    @property
    def is_full(self) -> bool:
        return len(self._keys) >= self.max_size

    def toggle(self, record: Wine) -> bool:
        """Select ``record`` or deselect it; return True when it is now selected.

        Raises:
            SelectionLimitError: adding would exceed ``max_size``.
        """
        record_key = self.key(record)
        if record_key in self._keys:
            self._keys.remove(record_key)
            return False
        if self.is_full:
            raise SelectionLimitError(f"At most {self.max_size} wines can be compared at once")
        self._keys.append(record_key)
        logger.debug("selected %r (%d/%d)", record_key, len(self._keys), self.max_size)
        return True

    def clear(self) -> None:
        self._keys.clear()

    def selected(self, records: Iterable[Wine]) -> list[Wine]:
        """Records whose key is selected, in catalog order."""
        chosen = set(self._keys)
        return [record for record in records if self.key(record) in chosen]
