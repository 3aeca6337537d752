"""Error code constants for jcskit canonicalization failures.

These constants prevent stringly-typed error codes and ensure
client code matches on the correct failure kinds.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Canonicalization error codes."""

    # Input outside the six JSON value kinds
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"

    # Numbers without a canonical decimal form
    NAN = "NAN"
    INFINITY = "INFINITY"

    # Resource limits
    NESTING_TOO_DEEP = "NESTING_TOO_DEEP"

    # JSON text front-end
    DUPLICATE_KEY = "DUPLICATE_KEY"
    INVALID_JSON = "INVALID_JSON"
