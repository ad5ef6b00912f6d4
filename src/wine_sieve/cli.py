"""Command-line interface for wine-sieve."""

import argparse
import json
import logging
import sys

from pydantic import TypeAdapter, ValidationError

from wine_sieve import __version__
from wine_sieve.catalog import load_catalog
from wine_sieve.config import SieveSettings
from wine_sieve.core import browse
from wine_sieve.exceptions import WineSieveError
from wine_sieve.filtering import FilterConfig
from wine_sieve.options import derive_options, narrow_subregions
from wine_sieve.schema import FilterState, Wine
from wine_sieve.search.engine import FuzzyConfig, FuzzyMatcher

_RANGE_FLAGS = ("price", "alcohol", "tannin", "sweetness", "acidity", "body")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = SieveSettings.from_env()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        wines = load_catalog(args.catalog or settings.catalog_path)
        if args.command == "search":
            threshold = args.threshold if args.threshold is not None else settings.fuzzy_threshold
            result = FuzzyMatcher(config=FuzzyConfig(threshold=threshold)).search(wines, args.query)
            _print_wines(result, as_json=args.json)
        elif args.command == "filter":
            state = _state_from_args(args)
            filter_config = FilterConfig(
                absent_passes_ranges=settings.absent_passes_ranges and not args.strict_absent,
                absent_passes_vintage=not args.strict_absent,
            )
            result = browse(
                wines,
                state,
                args.query,
                filter_config=filter_config,
                fuzzy_config=settings.fuzzy_config(),
            )
            _print_wines(result, as_json=args.json)
        else:
            _print_options(wines, args.country or [], as_json=args.json)
    except (WineSieveError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wine-sieve",
        description="Filter and fuzzy-search a wine catalog",
    )
    parser.add_argument(
        "--catalog",
        help="Path to a JSON catalog (default: WINE_SIEVE_CATALOG_PATH, then the packaged sample)",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"wine-sieve {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Typo-tolerant text search")
    search.add_argument("query", help="Free-text query")
    search.add_argument("--threshold", type=float, help="Similarity threshold (default: 0.7)")

    filter_cmd = commands.add_parser("filter", help="Filter by attributes")
    filter_cmd.add_argument("--type", dest="wine_types", action="append", default=[])
    filter_cmd.add_argument("--country", dest="countries", action="append", default=[])
    filter_cmd.add_argument("--subregion", dest="subregions", action="append", default=[])
    filter_cmd.add_argument("--vintage", dest="vintages", type=int, action="append", default=[])
    filter_cmd.add_argument("--grape", dest="grape_varieties", action="append", default=[])
    filter_cmd.add_argument("--aroma", dest="aromas", action="append", default=[])
    for name in _RANGE_FLAGS:
        filter_cmd.add_argument(
            f"--{name}",
            nargs=2,
            type=float,
            metavar=("MIN", "MAX"),
            help=f"Inclusive {name} range",
        )
    filter_cmd.add_argument(
        "--strict-absent",
        action="store_true",
        help="Exclude wines missing a filtered attribute",
    )
    filter_cmd.add_argument("--query", help="Also require a fuzzy text match")

    options = commands.add_parser("options", help="List available filter options")
    options.add_argument(
        "--country",
        action="append",
        help="Narrow sub-regions to these countries",
    )

    return parser


def _state_from_args(args: argparse.Namespace) -> FilterState:
    data: dict[str, object] = {
        "wine_types": args.wine_types,
        "countries": args.countries,
        "subregions": args.subregions,
        "vintages": args.vintages,
        "grape_varieties": args.grape_varieties,
        "aromas": args.aromas,
    }
    for name in _RANGE_FLAGS:
        bounds = getattr(args, name)
        if bounds:
            data[f"{name}_range"] = tuple(bounds)
    return FilterState.model_validate(data)


def _print_wines(wines: list[Wine], *, as_json: bool) -> None:
    if as_json:
        payload = TypeAdapter(list[Wine]).dump_json(wines, indent=2, exclude_none=True)
        print(payload.decode("utf-8"))
        return

    print()
    print(f"  {len(wines)} wine(s)")
    print()
    for wine in wines:
        print(f"  {wine.wine_name}")
        details = [
            ("Vintage", wine.vintage),
            ("Origin", _format_origin(wine)),
            ("Type", wine.wine_type),
            ("Grape", wine.grape_or_style),
            ("Aromas", ", ".join(wine.aromas) or None),
            ("Price", f"{wine.price_krw:,.0f} KRW" if wine.price_krw is not None else None),
        ]
        for label, value in details:
            display = value if value else "-"
            print(f"    {label + ':':<9} {display}")
        print()


def _print_options(wines: tuple[Wine, ...], countries: list[str], *, as_json: bool) -> None:
    options = derive_options(wines)
    if countries:
        options = options.model_copy(update={"subregions": narrow_subregions(wines, countries)})

    if as_json:
        print(json.dumps(options.model_dump(), ensure_ascii=False, indent=2))
        return

    print()
    for label, values in options.model_dump().items():
        display = ", ".join(str(value) for value in values) or "-"
        print(f"  {label + ':':<17} {display}")
    print()


def _format_origin(wine: Wine) -> str | None:
    parts = [p for p in [wine.country, wine.subregion] if p]
    return " / ".join(parts) if parts else None


if __name__ == "__main__":
    sys.exit(main())
