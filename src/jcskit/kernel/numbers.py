"""Number formatting following the ECMAScript Number::toString grammar.

Rules:
- Positive and negative zero both render as "0"
- NaN and Infinity are rejected
- Digits are the shortest string that round-trips to the same double
- 1e-6 <= |v| < 1e21 renders in fixed-point notation, everything else in
  exponential notation with an explicitly signed exponent ("1e+21", "1e-7")
"""

import math
from decimal import Decimal
from typing import Tuple

from jcskit.kernel.errors import InfinityError, NaNError


def format_number(value: float, path: str = "$") -> str:
    """Return the canonical decimal text of a 64-bit float.

    Args:
        value: The number to format
        path: Location of the number, used in error messages

    Returns:
        Canonical number text

    Raises:
        NaNError: If value is NaN
        InfinityError: If value is positive or negative infinity
    """
    # Covers -0.0 as well.
    if value == 0:
        return "0"
    if math.isnan(value):
        raise NaNError("NaN has no canonical representation", path)
    if math.isinf(value):
        raise InfinityError("Infinity has no canonical representation", path)

    sign = "-" if value < 0 else ""
    digits, point = shortest_digits(abs(value))
    return sign + _layout(digits, point)


def shortest_digits(value: float) -> Tuple[str, int]:
    """Split a positive finite float into its shortest round-trip digits.

    Returns (digits, point) such that value == 0.<digits> * 10**point, with
    no leading or trailing zeros in digits.

    repr() of a float is the correctly rounded shortest representation that
    parses back to the same bits; only its layout differs from ECMAScript.
    """
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, len(digits) + exponent


def _layout(digits: str, point: int) -> str:
    count = len(digits)

    if count <= point <= 21:
        # Integer: pad with zeros up to the decimal point
        return digits + "0" * (point - count)

    if 0 < point <= 21:
        return digits[:point] + "." + digits[point:]

    if -6 < point <= 0:
        return "0." + "0" * (-point) + digits

    exponent = point - 1
    exponent_sign = "+" if exponent >= 0 else "-"
    mantissa = digits[0]
    if count > 1:
        mantissa += "." + digits[1:]
    return f"{mantissa}e{exponent_sign}{abs(exponent)}"
