"""
log.py.

Does: Topic-gated debug printer controlled by CODE_FUZZY_MATCH_DEBUG_TOPICS
(comma-separated topic names, or 'all').
Returns: Timestamped lines on stderr. Silent when no topic is enabled.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable", "enabled", "reload_topics"]

ENV_VAR = "CODE_FUZZY_MATCH_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable CODE_FUZZY_MATCH_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable(*topics: str) -> None:
    """Does: Turn topics on for this process (used by the demo's --debug flag)."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "matcher",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via CODE_FUZZY_MATCH_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
