# src/code_fuzzy_match/fuzzy/matcher.py
from __future__ import annotations

"""
matcher.py

Does: Subsequence fuzzy matching with a dynamic-programming scorer. Words are
      treated as in code (after separators and camelCase humps), runs of
      consecutive characters are favored, scattered matches pay a capped gap cost.
Returns: Matcher (reusable scratch tables) and per-thread fuzzy_match/fuzzy_score helpers.
Used by: Command palettes, file pickers, symbol search; one call per candidate.
"""

import logging
import threading

from code_fuzzy_match.fuzzy.classify import ClassifiedTarget, classify, is_path_separator
from code_fuzzy_match.fuzzy.scoring import DEFAULT_WEIGHTS, ScoreWeights
from code_fuzzy_match.types import MatchResult

__all__ = [
    "Matcher",
    "fuzzy_match",
    "fuzzy_score",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

SCORE_MIN = float("-inf")


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _fold(ch: str) -> str:
    return ch.lower()


def _fold_path(ch: str) -> str:
    return "/" if ch == "\\" else ch.lower()


def _is_subsequence(needle: list[str], haystack: list[str]) -> bool:
    """Greedy in-order containment test on already folded characters."""
    pos = 0
    end = len(haystack)
    for ch in needle:
        while pos < end and haystack[pos] != ch:
            pos += 1
        if pos == end:
            return False
        pos += 1
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Matcher
# ─────────────────────────────────────────────────────────────────────────────

class Matcher:
    """
    Reusable fuzzy matcher.

    Holds two flat scratch tables indexed ``i * len(target) + j``:

    * ``score``: best total with query char ``i`` matched exactly at target index ``j``;
    * ``matched``: target index of query char ``i - 1`` on that best path.

    Both grow to the largest ``len(query) * len(target)`` seen and are never
    shrunk. Results never depend on earlier calls. Not safe to share between
    threads; use one Matcher per thread.
    """

    def __init__(
        self,
        weights: ScoreWeights | None = None,
        *,
        match_path_separators: bool = False,
    ):
        self.weights = weights or DEFAULT_WEIGHTS
        self.match_path_separators = match_path_separators
        self._score: list[float] = []
        self._matched: list[int] = []

    @classmethod
    def new(cls) -> Matcher:
        return cls()

    @property
    def capacity(self) -> int:
        """Number of DP cells currently allocated."""
        return len(self._score)

    def _reserve(self, cells: int) -> None:
        grow = cells - len(self._score)
        if grow > 0:
            self._score.extend([SCORE_MIN] * grow)
            self._matched.extend([-1] * grow)
            log.debug("Scratch grown to %d cells", cells)

    # ── Public API ───────────────────────────────────────────────────────
    def fuzzy_match(
        self,
        target: str | ClassifiedTarget,
        query: str,
        *,
        positions: bool = True,
    ) -> MatchResult | None:
        """
        Does: Match `query` as a case-insensitive subsequence of `target`.
        Returns: None when it is not one; else MatchResult with the score and,
                 unless positions=False, the matched target indices.
        """
        text = target.text if isinstance(target, ClassifiedTarget) else target
        n, m = len(query), len(text)

        if n == 0:
            return MatchResult(0, () if positions else None)
        if n > m:
            return None

        fold = _fold_path if self.match_path_separators else _fold
        t_fold = [fold(c) for c in text]
        q_fold = [fold(c) for c in query]
        if not _is_subsequence(q_fold, t_fold):
            return None

        ct = target if isinstance(target, ClassifiedTarget) else classify(text)
        self._reserve(n * m)
        end = self._fill(text, query, t_fold, q_fold, ct)
        if end < 0:
            return None

        best = self._score[(n - 1) * m + end]
        if not positions:
            return MatchResult(int(best))
        return MatchResult(int(best), self._positions(n, m, end))

    def score(self, target: str | ClassifiedTarget, query: str) -> int | None:
        """Does: Like fuzzy_match but only the score (None for no match)."""
        result = self.fuzzy_match(target, query, positions=False)
        return None if result is None else result.score

    # ── DP ───────────────────────────────────────────────────────────────
    def _fill(
        self,
        text: str,
        query: str,
        t_fold: list[str],
        q_fold: list[str],
        ct: ClassifiedTarget,
    ) -> int:
        """
        Does: Fill the scratch tables row by row.
        Returns: Column of the best final match (earliest on ties), or -1.
        """
        w = self.weights
        score, matched = self._score, self._matched
        n, m = len(query), len(text)

        boundary = [w.boundary_bonus(b) for b in ct.boundaries]
        char_gain = [
            w.match
            + (w.path_separator_match if is_path_separator(c)
               else w.separator_match if sep else 0)
            for c, sep in zip(text, ct.separators)
        ]
        gap, cap = w.gap_penalty, w.gap_penalty_cap

        start = 0        # first column worth visiting in this row
        prev_first = -1  # first valid column of the previous row
        for i in range(n):
            qc, q_orig = q_fold[i], query[i]
            row = i * m
            prev = row - m
            last = m - n + i  # leave room for the remaining query characters
            first_valid = -1

            # Running maxima over previous-row columns k <= j - 2:
            #   lin  = max(score[k] - gap * (j - 1 - k))
            #   flat = max(score[k]), which pays the capped penalty
            lin_val = flat_val = SCORE_MIN
            lin_arg = flat_arg = -1

            for j in range(start, last + 1):
                if i > 0:
                    k = j - 2
                    lin_val -= gap
                    if k >= prev_first:
                        d = score[prev + k]
                        if d - gap >= lin_val:
                            lin_val, lin_arg = d - gap, k
                        if d > flat_val:
                            flat_val, flat_arg = d, k

                if t_fold[j] != qc:
                    score[row + j] = SCORE_MIN
                    continue

                gain = char_gain[j] + (w.case_match if text[j] == q_orig else 0)
                if i == 0:
                    value, back = boundary[j], -1
                else:
                    value, back = SCORE_MIN, -1
                    adjacent = score[prev + j - 1]
                    if adjacent > SCORE_MIN:
                        value, back = adjacent + max(w.consecutive, boundary[j]), j - 1
                    gapped, gapped_arg = lin_val, lin_arg
                    if flat_val - cap > gapped:
                        gapped, gapped_arg = flat_val - cap, flat_arg
                    if gapped > SCORE_MIN and gapped + boundary[j] > value:
                        value, back = gapped + boundary[j], gapped_arg
                    if value == SCORE_MIN:
                        score[row + j] = SCORE_MIN
                        continue

                score[row + j] = value + gain
                matched[row + j] = back
                if first_valid < 0:
                    first_valid = j

            if first_valid < 0:
                return -1
            prev_first = first_valid
            start = first_valid + 1

        row = (n - 1) * m
        best_j, best = -1, SCORE_MIN
        for j in range(prev_first, m):
            if score[row + j] > best:
                best_j, best = j, score[row + j]
        return best_j

    def _positions(self, n: int, m: int, end: int) -> tuple[int, ...]:
        out = [0] * n
        j = end
        for i in range(n - 1, -1, -1):
            out[i] = j
            j = self._matched[i * m + j]
        return tuple(out)


# ─────────────────────────────────────────────────────────────────────────────
# Module-level helpers (one Matcher per thread)
# ─────────────────────────────────────────────────────────────────────────────

_LOCAL = threading.local()


def _default_matcher() -> Matcher:
    matcher = getattr(_LOCAL, "matcher", None)
    if matcher is None:
        matcher = _LOCAL.matcher = Matcher()
    return matcher


def fuzzy_match(target: str, query: str) -> MatchResult | None:
    """
    Does: Match with this thread's default Matcher.
    Returns: MatchResult (score + positions) or None.
    """
    return _default_matcher().fuzzy_match(target, query)


def fuzzy_score(target: str, query: str) -> int | None:
    """Does: Score only; None if `query` is not a subsequence of `target`."""
    return _default_matcher().score(target, query)
