"""Catalog repository for wine records."""

from __future__ import annotations

import json
import logging
from importlib.resources import files
from pathlib import Path

from pydantic import ValidationError

from wine_sieve.exceptions import CatalogError
from wine_sieve.schema import Wine

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Loads wine records from a JSON file or the packaged sample catalog."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        self.wines: tuple[Wine, ...] = self._load_wines()

    def _load_wines(self) -> tuple[Wine, ...]:
        data = self._read_payload()
        if not isinstance(data, list):
            raise CatalogError(f"Catalog must contain a list of records: {self._source}")

        wines: list[Wine] = []
        for index, item in enumerate(data):
            try:
                wines.append(Wine.model_validate(item))
            except ValidationError as e:
                raise CatalogError(f"Invalid record at index {index} in {self._source}: {e}") from e

        logger.info("loaded %d wines from %s", len(wines), self._source)
        return tuple(wines)

    def _read_payload(self) -> object:
        try:
            if self.path is None:
                text = files("wine_sieve.data").joinpath("wines.json").read_text(encoding="utf-8")
            else:
                text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {self._source}: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog is not valid JSON: {self._source}: {e}") from e

    @property
    def _source(self) -> str:
        return str(self.path) if self.path is not None else "packaged sample catalog"


def load_catalog(path: str | Path | None = None) -> tuple[Wine, ...]:
    """Load and validate a catalog; defaults to the packaged sample."""

    return CatalogRepository(path=path).wines
