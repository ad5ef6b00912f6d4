"""Environment-driven settings for wine-sieve."""

from __future__ import annotations

import os
from dataclasses import dataclass

from wine_sieve.filtering import FilterConfig
from wine_sieve.search.engine import DEFAULT_THRESHOLD, FuzzyConfig
from wine_sieve.selection import SelectionSet


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SieveSettings:
    catalog_path: str | None = None
    fuzzy_threshold: float = DEFAULT_THRESHOLD
    absent_passes_ranges: bool = True
    max_selection: int = 5
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "SieveSettings":
        return cls(
            catalog_path=os.getenv("WINE_SIEVE_CATALOG_PATH") or None,
            fuzzy_threshold=max(
                0.0,
                min(1.0, _safe_float(os.getenv("WINE_SIEVE_FUZZY_THRESHOLD"), DEFAULT_THRESHOLD)),
            ),
            absent_passes_ranges=_parse_bool(os.getenv("WINE_SIEVE_ABSENT_PASSES"), True),
            max_selection=max(1, _safe_int(os.getenv("WINE_SIEVE_MAX_SELECTION"), 5)),
            log_level=(os.getenv("WINE_SIEVE_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"),
        )

    def filter_config(self) -> FilterConfig:
        return FilterConfig(absent_passes_ranges=self.absent_passes_ranges)

    def fuzzy_config(self) -> FuzzyConfig:
        return FuzzyConfig(threshold=self.fuzzy_threshold)

    def selection_set(self) -> SelectionSet:
        return SelectionSet(max_size=self.max_selection)
