# code_fuzzy_match/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the matcher.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Weights loading, the demo, and tests.
"""

from __future__ import annotations

from .config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    enable,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable",
    "reload_topics",
]
