"""Minimal string escaping for canonical JSON.

Only the quote, backslash and control characters below 0x20 are escaped.
Everything else, including "/", DEL, "<", ">", "&" and non-ASCII text, is
emitted verbatim.
"""

from jcskit.kernel.errors import UnsupportedTypeError

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def is_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDFFF


def escape_string(text: str, path: str = "$") -> str:
    """Return text as a quoted, minimally escaped JSON string.

    Raises:
        UnsupportedTypeError: If text contains a lone surrogate, which is not
            a Unicode scalar value and has no UTF-8 encoding
    """
    parts = ['"']
    for char in text:
        short = _SHORT_ESCAPES.get(char)
        if short is not None:
            parts.append(short)
            continue

        code = ord(char)
        if code < 0x20:
            parts.append(f"\\u{code:04x}")
        elif is_surrogate(code):
            raise UnsupportedTypeError(
                f"Lone surrogate U+{code:04X} is not a Unicode scalar value", path
            )
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)
