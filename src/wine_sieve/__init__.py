"""wine-sieve: Filter and fuzzy-search an in-memory wine catalog."""

from wine_sieve.catalog import load_catalog
from wine_sieve.core import browse
from wine_sieve.filtering import FilterConfig, filter_records
from wine_sieve.options import derive_options, narrow_subregions
from wine_sieve.schema import FilterState, OptionSets, Wine
from wine_sieve.search import is_fuzzy_match, search_records

__version__ = "0.1.0"

__all__ = [
    "browse",
    "derive_options",
    "filter_records",
    "is_fuzzy_match",
    "load_catalog",
    "narrow_subregions",
    "search_records",
    "FilterConfig",
    "FilterState",
    "OptionSets",
    "Wine",
    "__version__",
]
