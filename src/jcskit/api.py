"""Public API for jcskit.

High-level functions over the canonicalization kernel. Clients should use
these instead of importing from jcskit.kernel directly.
"""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel

from jcskit.codes import ErrorCode
from jcskit.kernel.canonicalize import canonicalize_to_str
from jcskit.kernel.errors import CanonicalizationError

logger = logging.getLogger("jcskit")


class FormatResult(BaseModel):
    """Result of format_value: canonical text or the reason there is none."""
    ok: bool
    text: str = ""  # Canonical JSON text; empty when ok is False
    error: Optional[ErrorCode] = None
    path: Optional[str] = None  # Location of the offending node, e.g. "$.a[2]"
    message: Optional[str] = None


def canonicalize(value: Any, *, max_depth: Optional[int] = None) -> bytes:
    """Canonicalize a JSON value tree to UTF-8 bytes.

    Raises:
        CanonicalizationError: For unsupported types, NaN/Infinity, or
            nesting deeper than max_depth
    """
    return canonicalize_to_str(value, max_depth).encode("utf-8")


def format_value(value: Any, *, max_depth: Optional[int] = None) -> FormatResult:
    """Canonicalize value, reporting failures in the result instead of raising.

    On failure no text is returned at all, never a partial serialization.
    """
    try:
        text = canonicalize_to_str(value, max_depth)
    except CanonicalizationError as e:
        logger.debug("Rejected value at %s: %s (%s)", e.path, e.message, e.code.value)
        return FormatResult(ok=False, error=e.code, path=e.path, message=e.message)
    return FormatResult(ok=True, text=text)


def append_canonical(
    buffer: Union[bytes, bytearray],
    value: Any,
    *,
    max_depth: Optional[int] = None,
) -> Union[bytes, bytearray]:
    """Append the canonical encoding of value to buffer.

    A bytearray is extended in place and returned; bytes are immutable, so a
    new bytes object is returned. If value cannot be canonicalized the error
    is raised before buffer is touched.
    """
    if not isinstance(buffer, (bytes, bytearray)):
        raise TypeError(f"buffer must be bytes or bytearray, got {type(buffer).__name__}")

    encoded = canonicalize(value, max_depth=max_depth)
    if isinstance(buffer, bytearray):
        buffer.extend(encoded)
        return buffer
    return buffer + encoded
