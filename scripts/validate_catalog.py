"""Validate a wine catalog file.

Checks:
1. Every record validates against the Wine schema (profile scales 1-5).
2. Each sub-region is owned by a single country (warning only).
3. Duplicate wine names are reported, since name-keyed selection conflates them (warning only).

Usage:
  python scripts/validate_catalog.py [path/to/wines.json]
"""

from __future__ import annotations

import sys
from collections import defaultdict
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG = ROOT / "src" / "wine_sieve" / "data" / "wines.json"

from wine_sieve.catalog import load_catalog  # noqa: E402
from wine_sieve.exceptions import CatalogError  # noqa: E402
from wine_sieve.schema import Wine  # noqa: E402


def fail(message: str) -> None:
    print(f"[catalog-check] ERROR: {message}")
    raise SystemExit(1)


def warn(message: str) -> None:
    print(f"[catalog-check] WARNING: {message}")


def find_shared_subregions(wines: tuple[Wine, ...]) -> dict[str, set[str]]:
    owners: dict[str, set[str]] = defaultdict(set)
    for wine in wines:
        if wine.subregion and wine.country:
            owners[wine.subregion].add(wine.country)
    return {subregion: countries for subregion, countries in owners.items() if len(countries) > 1}


def find_duplicate_names(wines: tuple[Wine, ...]) -> dict[str, int]:
    counts: dict[str, int] = defaultdict(int)
    for wine in wines:
        counts[wine.wine_name] += 1
    return {name: count for name, count in counts.items() if count > 1}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else DEFAULT_CATALOG

    try:
        wines = load_catalog(path)
    except CatalogError as e:
        fail(str(e))

    for subregion, countries in sorted(find_shared_subregions(wines).items()):
        warn(f"Sub-region {subregion!r} is shared by {', '.join(sorted(countries))}")
    for name, count in sorted(find_duplicate_names(wines).items()):
        warn(f"Wine name {name!r} appears {count} times")

    print(f"[catalog-check] OK ({len(wines)} wines)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
