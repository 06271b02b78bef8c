# tests/test_classify.py
from __future__ import annotations

import pytest

from code_fuzzy_match import WordBoundary, classify, is_separator, word_starts
from code_fuzzy_match.fuzzy.classify import is_path_separator, word_boundary

B = WordBoundary


# ─────────────────────────────────────────────────────────────────────────────
# Separators
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("ch", [" ", "_", "-", ".", "/", "\\", ":", "'", '"', "("])
def test_separators(ch):
    assert is_separator(ch) is True


@pytest.mark.parametrize("ch", ["a", "Z", "0", "é", "ß"])
def test_letters_and_digits_are_not_separators(ch):
    assert is_separator(ch) is False


def test_path_separators():
    assert is_path_separator("/") and is_path_separator("\\")
    assert not is_path_separator(".")


# ─────────────────────────────────────────────────────────────────────────────
# Word boundaries
# ─────────────────────────────────────────────────────────────────────────────

def test_word_boundary_rules():
    assert word_boundary(None, "x", 0) is B.START
    assert word_boundary("_", "x", 3) is B.SEPARATOR
    assert word_boundary("a", "B", 3) is B.CAMEL
    assert word_boundary("9", "B", 3) is B.CAMEL
    assert word_boundary("A", "B", 3) is B.NONE
    assert word_boundary("a", "b", 3) is B.NONE


def test_classify_code_identifiers():
    ct = classify("getHTTP_value2Go")
    assert ct.boundaries[0] is B.START
    assert ct.boundaries[3] is B.CAMEL          # H after lowercase 't'
    assert ct.boundaries[4] is B.NONE           # T after uppercase 'H'
    assert ct.boundaries[8] is B.SEPARATOR      # v after '_'
    assert ct.boundaries[14] is B.CAMEL         # G after digit '2'
    assert ct.separators[7] is True
    assert len(ct) == 16


def test_word_starts():
    assert word_starts("the quick-brown_fox") == [0, 4, 10, 16]
    assert word_starts("camelCaseWords") == [0, 5, 9]
    assert word_starts(classify("a b")) == [0, 2]


def test_empty_target_has_no_word_starts():
    ct = classify("")
    assert ct.boundaries == () and ct.separators == ()
    assert word_starts("") == []
