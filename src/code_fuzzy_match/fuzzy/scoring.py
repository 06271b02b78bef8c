# src/code_fuzzy_match/fuzzy/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Score weights for the matcher: per-character base, consecutive-run bonus,
      word-start bonuses (string start / after separator / camelCase), case bonus,
      separator bonuses, and the capped gap penalty. Weights can come from JSON.
Returns: ScoreWeights (frozen), DEFAULT_WEIGHTS, load_weights(), bonus lookups.
Used by: Matcher and the demo's --weights option.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from code_fuzzy_match.types import WordBoundary
from code_fuzzy_match.utils.config import load_config

__all__ = [
    "ScoreWeights",
    "DEFAULT_WEIGHTS",
    "WeightsError",
    "load_weights",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables (centralised) ───────────────────────────────────────────────────
MATCH = 16                 # every matched character
CONSECUTIVE = 12           # match right after the previous one
START_OF_STRING = 12       # first target character
AFTER_SEPARATOR = 10       # first character after '_', ' ', '.', ...
CAMEL_CASE = 8             # upper-case hump after lower/digit
CASE_MATCH = 1             # identical case, not only case-insensitive
SEPARATOR_MATCH = 4        # matched character is itself a separator
PATH_SEPARATOR_MATCH = 6   # matched character is '/' or '\'
GAP_PENALTY = 2            # per skipped target character between two matches
GAP_PENALTY_CAP = 8        # max penalty for a single gap (kept below MATCH)


class WeightsError(ValueError):
    """Raise when a set of weights is malformed or breaks the scoring invariants."""


@dataclass(frozen=True)
class ScoreWeights:
    """
    Does: Integer weights used by the DP scorer.

    Invariants (checked by validate()):
        all weights are non-negative integers, and gap_penalty_cap < match so
        that each matched character still adds a positive amount.
    """

    match: int = MATCH
    consecutive: int = CONSECUTIVE
    start_of_string: int = START_OF_STRING
    after_separator: int = AFTER_SEPARATOR
    camel_case: int = CAMEL_CASE
    case_match: int = CASE_MATCH
    separator_match: int = SEPARATOR_MATCH
    path_separator_match: int = PATH_SEPARATOR_MATCH
    gap_penalty: int = GAP_PENALTY
    gap_penalty_cap: int = GAP_PENALTY_CAP

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise WeightsError(f"{f.name}: expected int, got {type(value).__name__}")
            if value < 0:
                raise WeightsError(f"{f.name}: must be >= 0, got {value}")
        if self.gap_penalty_cap >= self.match:
            raise WeightsError(
                f"gap_penalty_cap ({self.gap_penalty_cap}) must be lower than match ({self.match})"
            )

    # ── Construction helpers ─────────────────────────────────────────────
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScoreWeights:
        """
        Does: Build weights from a partial mapping; missing keys keep defaults.
        Raises: WeightsError on unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise WeightsError(f"unknown weight(s): {', '.join(unknown)}")
        return replace(DEFAULT_WEIGHTS, **dict(data))

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    # ── Bonus lookups ────────────────────────────────────────────────────
    def boundary_bonus(self, boundary: WordBoundary) -> int:
        if boundary is WordBoundary.START:
            return self.start_of_string
        if boundary is WordBoundary.SEPARATOR:
            return self.after_separator
        if boundary is WordBoundary.CAMEL:
            return self.camel_case
        return 0

    def gap_cost(self, skipped: int) -> int:
        """Does: Penalty for `skipped` target characters between two matches."""
        return min(skipped * self.gap_penalty, self.gap_penalty_cap)


DEFAULT_WEIGHTS = ScoreWeights()


def _validate_weights(data: dict[str, Any]) -> dict[str, Any]:
    # load_config wraps anything raised here into ConfigParseError
    return ScoreWeights.from_mapping(data).to_dict()


def load_weights(file: str = "weights", *, base_dir: Path | None = None) -> ScoreWeights:
    """
    Does: Read <data>/<file> (".json" added to a bare name) and turn it into ScoreWeights.
    Returns: ScoreWeights; raises ConfigFileNotFound / ConfigParseError / ConfigTypeError.
    """
    data = load_config(file, base_dir=base_dir, validator=_validate_weights)
    weights = ScoreWeights(**data)
    log.debug("Loaded weights from %s: %s", file, data)
    return weights
