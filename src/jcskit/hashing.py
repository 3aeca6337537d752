"""Hash helpers over canonical JSON bytes.

Semantically equal documents hash equally regardless of whitespace, key
order or number spelling ("1.0" vs "1", "1E3" vs "1000").
"""

import hashlib
from pathlib import Path
from typing import Any, Optional, Union

from jcskit.api import canonicalize
from jcskit._internal.loads import load_json_path


def hash_canonical(value: Any, *, max_depth: Optional[int] = None) -> str:
    """Compute SHA256 hash of the canonical form of value.

    Returns:
        SHA256 hash as hex string (prefixed with "sha256:")

    Raises:
        CanonicalizationError: If value cannot be canonicalized
    """
    digest = hashlib.sha256(canonicalize(value, max_depth=max_depth)).hexdigest()
    return f"sha256:{digest}"


def compute_canonical_json_sha256(path: Union[str, Path]) -> str:
    """Compute SHA256 of canonicalized JSON file contents (bare hex digest)."""
    data = load_json_path(path)
    return hashlib.sha256(canonicalize(data)).hexdigest()
