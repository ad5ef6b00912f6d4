"""Data models for wine-sieve."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

RangeDimension = Literal["price", "alcohol", "tannin", "sweetness", "acidity", "body"]
SelectDimension = Literal["wine_type", "country", "subregion", "vintage", "grape_or_style", "aroma"]
Range = tuple[float, float]

# dimension -> (Wine attribute, FilterState field)
RANGE_DIMENSIONS: dict[RangeDimension, tuple[str, str]] = {
    "price": ("price_krw", "price_range"),
    "alcohol": ("alcohol", "alcohol_range"),
    "tannin": ("tannin", "tannin_range"),
    "sweetness": ("sweetness", "sweetness_range"),
    "acidity": ("acidity", "acidity_range"),
    "body": ("body", "body_range"),
}

SELECT_DIMENSIONS: dict[SelectDimension, tuple[str, str]] = {
    "wine_type": ("wine_type", "wine_types"),
    "country": ("country", "countries"),
    "subregion": ("subregion", "subregions"),
    "vintage": ("vintage", "vintages"),
    "grape_or_style": ("grape_or_style", "grape_varieties"),
    "aroma": ("aromas", "aromas"),
}


class Wine(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(frozen=True)

    wine_name: str
    country: str | None = None
    subregion: str | None = None
    vintage: int | None = None
    wine_type: str | None = None
    grape_or_style: str | None = None
    alcohol: float | None = Field(default=None, ge=0)
    tannin: float | None = Field(default=None, ge=1, le=5)
    sweetness: float | None = Field(default=None, ge=1, le=5)
    acidity: float | None = Field(default=None, ge=1, le=5)
    body: float | None = Field(default=None, ge=1, le=5)
    aromas: list[str] = Field(default_factory=list)
    price_krw: float | None = Field(default=None, ge=0)


class FilterState(BaseModel):
    """Current conjunction of per-dimension predicates.

    Ranges are inclusive on both ends. An empty selection tuple places no
    restriction on its dimension.
    """

    model_config = ConfigDict(frozen=True)

    price_range: Range = (0, 500000)
    alcohol_range: Range = (0, 25)
    tannin_range: Range = (1, 5)
    sweetness_range: Range = (1, 5)
    acidity_range: Range = (1, 5)
    body_range: Range = (1, 5)

    wine_types: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()
    subregions: tuple[str, ...] = ()
    vintages: tuple[int, ...] = ()
    grape_varieties: tuple[str, ...] = ()
    aromas: tuple[str, ...] = ()

    @field_validator(
        "price_range",
        "alcohol_range",
        "tannin_range",
        "sweetness_range",
        "acidity_range",
        "body_range",
    )
    @classmethod
    def _check_range_order(cls, value: Range) -> Range:
        low, high = value
        if low > high:
            raise ValueError(f"range minimum {low} exceeds maximum {high}")
        return value


class OptionSets(BaseModel):
    """Distinct option values derived from a catalog."""

    wine_types: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    subregions: list[str] = Field(default_factory=list)
    vintages: list[int] = Field(default_factory=list)
    grape_varieties: list[str] = Field(default_factory=list)
    aromas: list[str] = Field(default_factory=list)
