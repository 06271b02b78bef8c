# src/code_fuzzy_match/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the classifier, score weights and the matcher.

Returns: Public API for word-boundary classification, weights loading,
and subsequence fuzzy matching.
Used by: The package root and the demo.
"""

from __future__ import annotations

# ── Classification ───────────────────────────────────────────────────────────
from .classify import (
    ClassifiedTarget,
    classify,
    is_separator,
    word_starts,
)

# ── Matching ─────────────────────────────────────────────────────────────────
from .matcher import (
    Matcher,
    fuzzy_match,
    fuzzy_score,
)

# ── Scoring ──────────────────────────────────────────────────────────────────
from .scoring import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    WeightsError,
    load_weights,
)

__all__ = [
    # Classification
    "ClassifiedTarget",
    "classify",
    "is_separator",
    "word_starts",
    # Matching
    "Matcher",
    "fuzzy_match",
    "fuzzy_score",
    # Scoring
    "DEFAULT_WEIGHTS",
    "ScoreWeights",
    "WeightsError",
    "load_weights",
]

__docformat__ = "google"
