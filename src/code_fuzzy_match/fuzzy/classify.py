# src/code_fuzzy_match/fuzzy/classify.py
from __future__ import annotations

"""
classify.py

Does: Character classification for targets: separators, and word starts as they
      appear in code identifiers (string start, after a separator, camelCase hump).
Returns: Per-index WordBoundary tuples wrapped in a ClassifiedTarget.
Used by: Matcher (bonus weighting) and callers that score one target many times.
"""

from dataclasses import dataclass

from code_fuzzy_match.types import WordBoundary

__all__ = [
    "ClassifiedTarget",
    "is_separator",
    "is_path_separator",
    "word_boundary",
    "classify",
    "word_starts",
]

__docformat__ = "google"

PATH_SEPARATORS = frozenset("/\\")


@dataclass(frozen=True)
class ClassifiedTarget:
    """A target string with its boundary and separator flags precomputed."""

    text: str
    boundaries: tuple[WordBoundary, ...]
    separators: tuple[bool, ...]

    def __len__(self) -> int:
        return len(self.text)


# ─────────────────────────────────────────────────────────────────────────────
# Character predicates
# ─────────────────────────────────────────────────────────────────────────────

def is_separator(ch: str) -> bool:
    """
    Does: True for anything that is neither a letter nor a digit ('_' and '-' included).
    """
    return not ch.isalnum()


def is_path_separator(ch: str) -> bool:
    return ch in PATH_SEPARATORS


def word_boundary(prev: str | None, ch: str, index: int) -> WordBoundary:
    """
    Does: Classify position `index` holding `ch`, given the character before it.
    Returns: START at index 0, SEPARATOR after a separator, CAMEL on a
             lower/digit → upper transition, else NONE.
    """
    if index == 0 or prev is None:
        return WordBoundary.START
    if is_separator(prev):
        return WordBoundary.SEPARATOR
    if ch.isupper() and (prev.islower() or prev.isdigit()):
        return WordBoundary.CAMEL
    return WordBoundary.NONE


# ─────────────────────────────────────────────────────────────────────────────
# Whole-target classification
# ─────────────────────────────────────────────────────────────────────────────

def classify(target: str) -> ClassifiedTarget:
    """
    Does: Compute boundary + separator flags for every index of `target`.
    Returns: ClassifiedTarget; empty tuples for an empty target.
    """
    boundaries: list[WordBoundary] = []
    prev: str | None = None
    for i, ch in enumerate(target):
        boundaries.append(word_boundary(prev, ch, i))
        prev = ch
    separators = tuple(is_separator(ch) for ch in target)
    return ClassifiedTarget(target, tuple(boundaries), separators)


def word_starts(target: str | ClassifiedTarget) -> list[int]:
    """Does: Indices of `target` that begin a word."""
    ct = target if isinstance(target, ClassifiedTarget) else classify(target)
    return [i for i, b in enumerate(ct.boundaries) if b is not WordBoundary.NONE]
