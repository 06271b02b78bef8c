# tests/test_scoring.py
"""Weights: validation, mapping/JSON loading through the data dir, and their effect on scores."""

from __future__ import annotations

import json

import pytest

from code_fuzzy_match import DEFAULT_WEIGHTS, Matcher, ScoreWeights, WeightsError, load_weights
from code_fuzzy_match.types import WordBoundary
from code_fuzzy_match.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
)


@pytest.fixture(autouse=True)
def _no_data_dir_env(monkeypatch):
    monkeypatch.delenv("CODE_FUZZY_MATCH_DATA_DIR", raising=False)
    clear_config_cache()


# ─────────────────────────────────────────────────────────────────────────────
# ScoreWeights
# ─────────────────────────────────────────────────────────────────────────────

def test_defaults_keep_gap_cap_below_match():
    assert DEFAULT_WEIGHTS.gap_penalty_cap < DEFAULT_WEIGHTS.match
    assert DEFAULT_WEIGHTS.consecutive >= DEFAULT_WEIGHTS.after_separator


@pytest.mark.parametrize(
    "kwargs",
    [
        {"gap_penalty_cap": 16},
        {"match": 4},
        {"consecutive": -1},
        {"case_match": 1.5},
        {"camel_case": True},
    ],
)
def test_invalid_weights_raise(kwargs):
    with pytest.raises(WeightsError):
        ScoreWeights(**kwargs)


def test_from_mapping_partial_and_unknown():
    w = ScoreWeights.from_mapping({"case_match": 3})
    assert w.case_match == 3
    assert w.match == DEFAULT_WEIGHTS.match
    with pytest.raises(WeightsError, match="unknown weight"):
        ScoreWeights.from_mapping({"bogus": 1})


def test_boundary_bonus_and_gap_cost():
    w = DEFAULT_WEIGHTS
    assert w.boundary_bonus(WordBoundary.START) == w.start_of_string
    assert w.boundary_bonus(WordBoundary.SEPARATOR) == w.after_separator
    assert w.boundary_bonus(WordBoundary.CAMEL) == w.camel_case
    assert w.boundary_bonus(WordBoundary.NONE) == 0
    assert w.gap_cost(0) == 0
    assert w.gap_cost(1) == w.gap_penalty
    assert w.gap_cost(1000) == w.gap_penalty_cap


# ─────────────────────────────────────────────────────────────────────────────
# load_weights
# ─────────────────────────────────────────────────────────────────────────────

def test_shipped_weights_match_defaults():
    assert load_weights() == DEFAULT_WEIGHTS


def test_load_weights_from_data_dir(tmp_path, monkeypatch):
    (tmp_path / "tuned.json").write_text(json.dumps({"consecutive": 20}), encoding="utf-8")
    monkeypatch.setenv("CODE_FUZZY_MATCH_DATA_DIR", str(tmp_path))
    w = load_weights("tuned")
    assert w.consecutive == 20
    assert w.after_separator == DEFAULT_WEIGHTS.after_separator


def test_load_weights_errors(tmp_path):
    (tmp_path / "bad_value.json").write_text(json.dumps({"gap_penalty_cap": 99}), encoding="utf-8")
    (tmp_path / "bad_shape.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    (tmp_path / "bad_json.json").write_text("{oops", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_weights("bad_value", base_dir=tmp_path)
    with pytest.raises(ConfigTypeError):
        load_weights("bad_shape", base_dir=tmp_path)
    with pytest.raises(ConfigParseError):
        load_weights("bad_json", base_dir=tmp_path)
    with pytest.raises(ConfigFileNotFound):
        load_weights("missing", base_dir=tmp_path)


def test_weights_change_ranking():
    # default: the unbroken run wins; with a huge camelCase bonus the humps do
    default = Matcher()
    assert default.score("xunx", "un") > default.score("getUserName", "un")
    tuned = Matcher(ScoreWeights(camel_case=60, consecutive=0))
    assert tuned.score("getUserName", "un") > tuned.score("xunx", "un")


def test_unrelated_data_dir_env_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert load_weights() == DEFAULT_WEIGHTS


def test_weights_file_keeps_its_own_extension(tmp_path):
    (tmp_path / "tuned.cfg").write_text(json.dumps({"case_match": 2}), encoding="utf-8")
    assert load_weights("tuned.cfg", base_dir=tmp_path).case_match == 2


def test_load_weights_is_cached_until_the_file_changes(tmp_path, monkeypatch):
    import os

    from code_fuzzy_match.utils import config as cfg

    path = tmp_path / "tuned.json"
    path.write_text(json.dumps({"case_match": 2}), encoding="utf-8")
    assert load_weights("tuned", base_dir=tmp_path).case_match == 2

    calls = []
    real_load = cfg.json.load
    monkeypatch.setattr(cfg.json, "load", lambda f: calls.append(1) or real_load(f))
    assert load_weights("tuned", base_dir=tmp_path).case_match == 2
    assert calls == []

    path.write_text(json.dumps({"case_match": 3}), encoding="utf-8")
    st = path.stat()
    os.utime(path, (st.st_atime, st.st_mtime + 5))
    assert load_weights("tuned", base_dir=tmp_path).case_match == 3
    assert calls == [1]
