# code_fuzzy_match/types.py
from __future__ import annotations

"""
types.py.

Does: Define the small value types shared by the classifier and the matcher.
Returns: WordBoundary (why a target index starts a word) and MatchResult.
"""

from dataclasses import dataclass
from enum import IntEnum


class WordBoundary(IntEnum):
    """Reason a target position begins a word, lowest to highest precedence."""

    NONE = 0
    CAMEL = 1
    SEPARATOR = 2
    START = 3


@dataclass(frozen=True)
class MatchResult:
    """
    Does: Hold the score of one successful match.
    Returns: `positions` is one strictly increasing target index per query
             character, or None when the caller skipped reconstruction.
    """

    score: int
    positions: tuple[int, ...] | None = None


__all__ = ["WordBoundary", "MatchResult"]

__docformat__ = "google"
