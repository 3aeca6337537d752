"""Object key ordering by UTF-16 code units.

Python compares strings by code point. That disagrees with UTF-16 order
once characters above U+FFFF meet characters in U+E000..U+FFFF: the former
encode as surrogate pairs starting at 0xD800, so they sort *before* the
latter in UTF-16, but after them by code point.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from jcskit.kernel.errors import UnsupportedTypeError
from jcskit.kernel.strings import is_surrogate


def utf16_code_units(text: str, path: str = "$") -> Tuple[int, ...]:
    """Return the UTF-16 code unit sequence of text."""
    units = []
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            units.append(0xD800 | (code >> 10))
            units.append(0xDC00 | (code & 0x3FF))
        elif is_surrogate(code):
            raise UnsupportedTypeError(
                f"Lone surrogate U+{code:04X} in object key", path
            )
        else:
            units.append(code)
    return tuple(units)


def sort_keys(
    keys: Iterable[str],
    path: str = "$",
    key_path: Optional[Callable[[str, str], str]] = None,
) -> List[str]:
    """Return keys in canonical emission order.

    Tuples compare element by element with a strict prefix sorting first,
    which is exactly the UTF-16 comparison rule.

    key_path builds the error location of a key from the object path; without
    it errors are reported at the object itself.
    """
    def units(key: str) -> Tuple[int, ...]:
        return utf16_code_units(key, key_path(path, key) if key_path else path)

    return sorted(keys, key=units)
