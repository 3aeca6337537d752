"""Tests for the ECMAScript number grammar."""

import struct

import pytest

from jcskit import format_value, ErrorCode
from jcskit.kernel.errors import InfinityError, NaNError, NonFiniteNumberError
from jcskit.kernel.numbers import format_number, shortest_digits


def _from_bits(bits: str) -> float:
    return struct.unpack(">d", bytes.fromhex(bits))[0]


# bit pattern -> canonical text
BIT_PATTERN_CASES = [
    ("0000000000000000", "0"),
    ("8000000000000000", "0"),
    ("7fefffffffffffff", "1.7976931348623157e+308"),
    ("ffefffffffffffff", "-1.7976931348623157e+308"),
    ("4340000000000000", "9007199254740992"),
    ("c340000000000000", "-9007199254740992"),
    ("4430000000000000", "295147905179352830000"),
    ("44b52d02c7e14af5", "9.999999999999997e+22"),
    ("44b52d02c7e14af6", "1e+23"),
    ("44b52d02c7e14af7", "1.0000000000000001e+23"),
    ("444b1ae4d6e2ef4e", "999999999999999700000"),
    ("444b1ae4d6e2ef4f", "999999999999999900000"),
    ("444b1ae4d6e2ef50", "1e+21"),
    ("3eb0c6f7a0b5ed8c", "9.999999999999997e-7"),
    ("3eb0c6f7a0b5ed8d", "0.000001"),
    ("41b3de4355555553", "333333333.3333332"),
    ("41b3de4355555554", "333333333.33333325"),
    ("41b3de4355555555", "333333333.3333333"),
    ("41b3de4355555556", "333333333.3333334"),
    ("41b3de4355555557", "333333333.33333343"),
    ("becbf647612f3696", "-0.0000033333333333333333"),
    ("43143ff3c1cb0959", "1424953923781206.2"),
    ("0000000000000001", "5e-324"),
    ("000fffffffffffff", "2.225073858507201e-308"),
]


@pytest.mark.parametrize("bits,expected", BIT_PATTERN_CASES)
def test_bit_pattern(bits, expected):
    value = _from_bits(bits)
    assert format_number(value) == expected

    result = format_value(value)
    assert result.ok is True
    assert result.text == expected


class TestNonFinite:
    """NaN and Infinity never produce a plausible-looking number."""

    @pytest.mark.parametrize("bits", ["7fffffffffffffff", "7ff8000000000000", "fff8000000000000"])
    def test_nan_rejected(self, bits):
        with pytest.raises(NaNError):
            format_number(_from_bits(bits))

    @pytest.mark.parametrize("bits", ["7ff0000000000000", "fff0000000000000"])
    def test_infinity_rejected(self, bits):
        with pytest.raises(InfinityError):
            format_number(_from_bits(bits))

    def test_nan_and_infinity_share_base_class(self):
        assert issubclass(NaNError, NonFiniteNumberError)
        assert issubclass(InfinityError, NonFiniteNumberError)

    def test_format_value_reports_codes(self):
        nan = format_value(_from_bits("7fffffffffffffff"))
        inf = format_value(_from_bits("7ff0000000000000"))

        assert nan.ok is False
        assert nan.error == ErrorCode.NAN
        assert nan.text == ""
        assert inf.ok is False
        assert inf.error == ErrorCode.INFINITY
        assert inf.text == ""


class TestNotationBoundaries:
    """Fixed-point vs exponential notation switch points."""

    def test_lower_boundary_is_fixed(self):
        assert format_number(1e-6) == "0.000001"

    def test_below_lower_boundary_is_exponential(self):
        assert format_number(1e-7) == "1e-7"
        assert format_number(-1.5e-7) == "-1.5e-7"

    def test_upper_boundary_is_exponential(self):
        assert format_number(1e21) == "1e+21"
        assert format_number(-1e21) == "-1e+21"

    def test_below_upper_boundary_is_fixed(self):
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(123e18) == "123000000000000000000"

    def test_exponent_has_no_leading_zero(self):
        assert format_number(1e-10) == "1e-10"
        assert format_number(2.5e100) == "2.5e+100"

    def test_fraction_without_trailing_zeros(self):
        assert format_number(4.50) == "4.5"
        assert format_number(0.1) == "0.1"
        assert format_number(0.002) == "0.002"

    def test_integral_floats_have_no_point(self):
        assert format_number(1.0) == "1"
        assert format_number(-56.0) == "-56"
        assert format_number(1e16) == "10000000000000000"

    def test_no_plus_on_mantissa(self):
        assert not format_number(5e300).startswith("+")


class TestShortestDigits:

    def test_integer_value(self):
        assert shortest_digits(100.0) == ("1", 3)

    def test_small_fraction(self):
        assert shortest_digits(0.00125) == ("125", -2)

    def test_large_value(self):
        assert shortest_digits(1e21) == ("1", 22)
