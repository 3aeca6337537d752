"""Exception hierarchy for canonicalization failures.

Every failure is terminal for the call that raised it: callers never
receive partial output.
"""

from typing import Optional

from jcskit.codes import ErrorCode


class CanonicalizationError(ValueError):
    """Raised when a value cannot be canonicalized."""

    code: ErrorCode = ErrorCode.UNSUPPORTED_TYPE

    def __init__(self, message: str, path: Optional[str] = "$"):
        super().__init__(f"{message} (at {path})" if path is not None else message)
        self.message = message
        self.path = path


class UnsupportedTypeError(CanonicalizationError):
    """Raised for input outside the six JSON value kinds."""

    code = ErrorCode.UNSUPPORTED_TYPE


class NonFiniteNumberError(CanonicalizationError):
    """Raised for numbers that have no canonical decimal form."""


class NaNError(NonFiniteNumberError):
    code = ErrorCode.NAN


class InfinityError(NonFiniteNumberError):
    code = ErrorCode.INFINITY


class NestingTooDeepError(CanonicalizationError):
    """Raised when arrays/objects nest deeper than the configured limit."""

    code = ErrorCode.NESTING_TOO_DEEP


class DuplicateKeyError(CanonicalizationError):
    """Raised by the JSON text front-end when an object repeats a key."""

    code = ErrorCode.DUPLICATE_KEY


class InvalidJSONError(CanonicalizationError):
    """Raised by the JSON text front-end for text that does not parse."""

    code = ErrorCode.INVALID_JSON
