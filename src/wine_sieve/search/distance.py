"""String normalization and edit-distance similarity."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_text(value: str) -> str:
    """Lower-case ``value`` and strip every whitespace character out of it."""
    return _WHITESPACE.sub("", value.lower())


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insertion, deletion and substitution costs."""

    rows, cols = len(a) + 1, len(b) + 1
    distance = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        distance[i][0] = i
    for j in range(cols):
        distance[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            distance[i][j] = min(
                distance[i - 1][j] + 1,
                distance[i][j - 1] + 1,
                distance[i - 1][j - 1] + cost,
            )
    return distance[-1][-1]


def similarity(a: str, b: str) -> float:
    """Return ``1 - edit_distance / longest length``; two empty strings score 1."""

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - edit_distance(a, b) / longest
