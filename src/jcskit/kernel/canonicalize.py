"""Recursive canonical serialization of JSON value trees.

Value model (native Python types only):
- None              -> null
- bool              -> true / false
- float, int        -> number (int is converted to a 64-bit double)
- str               -> string
- list, tuple       -> array, order preserved
- dict with str keys -> object, keys in UTF-16 code unit order

Anything else is rejected. Errors abort the whole call; the caller never
sees partial output.
"""

from typing import Any, List, Optional

from jcskit.config import resolve_max_depth
from jcskit.kernel.errors import (
    InfinityError,
    NestingTooDeepError,
    UnsupportedTypeError,
)
from jcskit.kernel.keys import sort_keys
from jcskit.kernel.numbers import format_number
from jcskit.kernel.strings import escape_string


def canonicalize_to_str(value: Any, max_depth: Optional[int] = None) -> str:
    """Return the canonical JSON text of value.

    Args:
        value: JSON value tree to serialize
        max_depth: Maximum array/object nesting (defaults to JCSKIT_MAX_DEPTH)

    Returns:
        Canonical JSON text, no trailing whitespace

    Raises:
        CanonicalizationError: If the tree holds unsupported types,
            non-finite numbers, or nests too deeply
    """
    limit = resolve_max_depth(max_depth)
    parts: List[str] = []
    try:
        _emit(parts, value, "$", 0, limit)
    except RecursionError:
        # An explicit limit above what the interpreter stack allows
        raise NestingTooDeepError(
            f"Nesting exceeds the interpreter recursion limit (max_depth={limit})"
        ) from None
    return "".join(parts)


def _to_double(value: int, path: str) -> float:
    try:
        return float(value)
    except OverflowError:
        raise InfinityError(
            "Integer is too large for a 64-bit double", path
        ) from None


def _emit(parts: List[str], value: Any, path: str, depth: int, max_depth: int) -> None:
    if value is None:
        parts.append("null")
    elif isinstance(value, bool):
        # bool before int: bool is an int subclass
        parts.append("true" if value else "false")
    elif isinstance(value, float):
        parts.append(format_number(value, path))
    elif isinstance(value, int):
        parts.append(format_number(_to_double(value, path), path))
    elif isinstance(value, str):
        parts.append(escape_string(value, path))
    elif isinstance(value, (list, tuple)):
        _check_depth(depth, max_depth, path)
        parts.append("[")
        for i, item in enumerate(value):
            if i:
                parts.append(",")
            _emit(parts, item, f"{path}[{i}]", depth + 1, max_depth)
        parts.append("]")
    elif isinstance(value, dict):
        _check_depth(depth, max_depth, path)
        for key in value:
            if not isinstance(key, str):
                raise UnsupportedTypeError(
                    f"Object keys must be strings, got {type(key).__name__}", path
                )
        parts.append("{")
        for i, key in enumerate(sort_keys(value, path, key_path=_child_path)):
            if i:
                parts.append(",")
            parts.append(escape_string(key, _child_path(path, key)))
            parts.append(":")
            _emit(parts, value[key], _child_path(path, key), depth + 1, max_depth)
        parts.append("}")
    else:
        raise UnsupportedTypeError(
            f"Unsupported type for canonicalization: {type(value).__name__}", path
        )


def _check_depth(depth: int, max_depth: int, path: str) -> None:
    if depth >= max_depth:
        raise NestingTooDeepError(
            f"Nesting exceeds maximum depth of {max_depth}", path
        )


def _child_path(path: str, key: str) -> str:
    if key.isidentifier():
        return f"{path}.{key}"
    return f"{path}[{key!r}]"
