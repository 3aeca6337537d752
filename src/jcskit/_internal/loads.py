"""JSON text front-end used by the CLI and hashing helpers.

The stdlib parser silently keeps the last of repeated keys; canonical input
must not contain duplicates, so they are rejected here.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from jcskit.kernel.errors import DuplicateKeyError, InvalidJSONError, NestingTooDeepError


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise DuplicateKeyError(f"Duplicate object key {key!r}", path=None)
        obj[key] = value
    return obj


def load_json_text(text: Union[str, bytes]) -> Any:
    """Parse JSON text into a value tree, rejecting duplicate keys."""
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}", path=None) from e
    except UnicodeDecodeError as e:
        raise InvalidJSONError(f"Invalid UTF-8 input: {e.reason}", path=None) from e
    except RecursionError:
        raise NestingTooDeepError("JSON text nests too deeply to parse", path=None) from None


def load_json_path(path: Union[str, Path]) -> Any:
    """Parse a UTF-8 JSON file."""
    return load_json_text(Path(path).read_bytes())
