# src/code_fuzzy_match/utils/config.py

"""Read JSON config files (score weights) from the package data/ directory.

The directory is `base_dir` when given, else $CODE_FUZZY_MATCH_DATA_DIR, else the
first `data/` found walking up from this package (the shipped weights).
Validated results are cached per (path, mtime, validator).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "resolve_config_path",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "CODE_FUZZY_MATCH_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop cached configs (tests, or after editing a file in place)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()


def _data_dir(start: Path | None = None) -> Path:
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    start = (start or Path(__file__)).resolve()
    tried = [p / "data" for p in start.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def resolve_config_path(file: str | os.PathLike[str], base_dir: Path | None = None) -> Path:
    """
    Does: Map a config name to a file under the data dir; a bare name gets '.json'.
    Raises: ConfigFileNotFound when the result escapes the data dir or does not exist.
    """
    data_dir = Path(base_dir).resolve() if base_dir is not None else _data_dir()
    name = os.fspath(file)
    if not Path(name).suffix:
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Parse <data>/<file> as a JSON object, run `validator` on it, and cache the result."""
    path = resolve_config_path(file, base_dir)
    try:
        key = (path, path.stat().st_mtime, validator)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return dict(_CONFIG_CACHE[key])

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config loaded: %s", path.name)
    return dict(data)
