"""Environment-driven settings.

Values are read once at import time. Unset or malformed variables fall
back to the default.
"""

from __future__ import annotations

import os
from typing import Optional


def _int_from_env(var_name: str, default: int) -> int:
    raw = os.getenv(var_name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _path_from_env(var_name: str) -> Optional[str]:
    raw = os.getenv(var_name)
    return raw or None


DEFAULT_MAX_DEPTH = 500

# Stays below the interpreter's default recursion limit of 1000.
MAX_DEPTH = _int_from_env("JCSKIT_MAX_DEPTH", DEFAULT_MAX_DEPTH)

# Oracle file of "<hex bits>,<expected text>" lines for the gated corpus test.
ES6_CORPUS_PATH = _path_from_env("JCSKIT_ES6_CORPUS")


def resolve_max_depth(max_depth: Optional[int]) -> int:
    """Return the explicit limit, or the environment default when None."""
    if max_depth is None:
        return MAX_DEPTH
    if max_depth < 1:
        raise ValueError(f"max_depth must be positive, got {max_depth}")
    return max_depth
