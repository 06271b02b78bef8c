"""
code_fuzzy_match
================

Does: Fuzzy subsequence matching for command palettes, file pickers and symbol search.
Returns: Matcher / fuzzy_match / fuzzy_score plus classification and weight helpers.
Used by: Callers that score one candidate per call and sort the results themselves.
"""

from code_fuzzy_match.fuzzy import (
    DEFAULT_WEIGHTS,
    ClassifiedTarget,
    Matcher,
    ScoreWeights,
    WeightsError,
    classify,
    fuzzy_match,
    fuzzy_score,
    is_separator,
    load_weights,
    word_starts,
)
from code_fuzzy_match.types import MatchResult, WordBoundary

__all__: list[str] = [
    "Matcher",
    "MatchResult",
    "WordBoundary",
    "ClassifiedTarget",
    "classify",
    "is_separator",
    "word_starts",
    "fuzzy_match",
    "fuzzy_score",
    "ScoreWeights",
    "DEFAULT_WEIGHTS",
    "load_weights",
    "WeightsError",
]
__version__ = "0.1.0"
__docformat__ = "google"
