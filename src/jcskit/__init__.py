"""jcskit: byte-exact JSON canonicalization for hashing and signing."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jcskit")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from jcskit.api import canonicalize, format_value, append_canonical, FormatResult
from jcskit.codes import ErrorCode
from jcskit.hashing import hash_canonical
from jcskit.kernel.errors import (
    CanonicalizationError,
    UnsupportedTypeError,
    NonFiniteNumberError,
    NaNError,
    InfinityError,
    NestingTooDeepError,
)

__all__ = [
    "__version__",
    "canonicalize",
    "format_value",
    "append_canonical",
    "FormatResult",
    "ErrorCode",
    "hash_canonical",
    "CanonicalizationError",
    "UnsupportedTypeError",
    "NonFiniteNumberError",
    "NaNError",
    "InfinityError",
    "NestingTooDeepError",
]
