"""Custom exceptions for wine-sieve."""


class WineSieveError(Exception):
    """Base exception for wine-sieve."""

    pass


class CatalogError(WineSieveError):
    """Raised when a catalog file cannot be read or holds invalid records."""

    pass


class SelectionLimitError(WineSieveError):
    """Raised when a selection set is already full."""

    pass
