"""Data models for fuzzy match output."""

from typing import Literal

from pydantic import BaseModel, Field

Method = Literal["contains", "word", "similarity", "none"]
SearchField = Literal["wine_name", "country", "subregion", "grape_or_style", "wine_type", "aromas"]


class MatchResult(BaseModel):
    """Outcome of matching one query against one target string."""

    query: str
    target: str
    matched: bool = False
    method: Method = "none"
    score: float = Field(default=0.0, ge=0.0, le=1.0)
