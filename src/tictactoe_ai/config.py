"""Centralized settings for the engine front ends.

Environment-first, with defaults that match the classic browser game:
full-depth search and a short pause before the computer replies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

MIN_DEPTH = 1
MAX_DEPTH = 9
DEFAULT_DEPTH = MAX_DEPTH
DEFAULT_DELAY_MS = 500


@dataclass(frozen=True)
class Settings:
    depth: int = DEFAULT_DEPTH
    delay_ms: int = DEFAULT_DELAY_MS


def clamp_depth(depth: int) -> int:
    """Clamp a search depth to [1, 9]; deeper than the empty cells is meaningless."""
    return max(MIN_DEPTH, min(MAX_DEPTH, int(depth)))


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


def search_depth() -> int:
    return clamp_depth(_int_env("TTT_SEARCH_DEPTH", DEFAULT_DEPTH))


def ai_delay_ms() -> int:
    delay = _int_env("TTT_AI_DELAY_MS", DEFAULT_DELAY_MS)
    if delay < 0:
        logging.warning("Ignoring TTT_AI_DELAY_MS=%d: negative, using %d", delay, DEFAULT_DELAY_MS)
        return DEFAULT_DELAY_MS
    return delay


def load_settings() -> Settings:
    return Settings(depth=search_depth(), delay_ms=ai_delay_ms())
