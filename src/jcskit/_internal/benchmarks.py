"""Performance sentinel documents and budgets (gated perf tests)."""

from __future__ import annotations

import os
from time import perf_counter
from typing import Any, Dict, List, Tuple

from jcskit.api import canonicalize


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_WIDE_OBJECT_MS = _budget_from_env("JCSKIT_MAX_WIDE_OBJECT_MS", 500.0)
MAX_NUMBER_ARRAY_MS = _budget_from_env("JCSKIT_MAX_NUMBER_ARRAY_MS", 500.0)
MAX_DEEP_NESTING_MS = _budget_from_env("JCSKIT_MAX_DEEP_NESTING_MS", 200.0)


def wide_object(width: int = 20000) -> Dict[str, Any]:
    """Object with many keys, mixing BMP and non-BMP characters."""
    return {
        f"{chr(0xE000 + i % 0x1000)}{chr(0x10000 + i)}{i}": {"i": i, "s": f"v\t{i}"}
        for i in range(width)
    }


def number_array(count: int = 50000) -> List[float]:
    """Array of numbers spanning fixed-point and exponential notation."""
    return [(i + 0.1) * 10.0 ** ((i % 60) - 30) for i in range(count)]


def deep_nesting(depth: int = 400) -> Any:
    value: Any = "leaf"
    for i in range(depth):
        value = [value] if i % 2 else {"k": value}
    return value


SENTINELS = {
    "wide_object": wide_object,
    "number_array": number_array,
    "deep_nesting": deep_nesting,
}


def run_sentinel_case(case: str) -> Tuple[float, bytes]:
    """Canonicalize a sentinel document and return elapsed ms plus output."""
    document = SENTINELS[case]()
    start = perf_counter()
    output = canonicalize(document)
    elapsed_ms = (perf_counter() - start) * 1000.0
    return elapsed_ms, output
