import math

import pytest

from jsrt.values import (
    INT_MAX,
    INT_MIN,
    UNDEFINED,
    Hint,
    JSTypeError,
    Undefined,
    compare,
    concat,
    format_int,
    loose_equal,
    number_to_int16,
    number_to_int32,
    number_to_integer,
    number_to_string,
    number_to_uint16,
    number_to_uint32,
    parse_int_prefix,
    strict_equal,
    string_to_float,
    string_to_number,
    to_boolean,
    to_number,
    to_primitive,
    to_string,
)


class Boxed:
    def __init__(self, value):
        self.value = value

    def valueOf(self):
        return self.value


class Named:
    def toString(self):
        return "named"


class Opaque:
    pass


def test_undefined_is_singleton():
    assert Undefined() is UNDEFINED


@pytest.mark.parametrize("n", [0, 7, 255, 4096, 123456789])
def test_parse_int_prefix_hex_round_trip(n):
    text = format(n, "x")
    assert parse_int_prefix(text, 16) == (float(n), len(text))


def test_parse_int_prefix_stops_at_invalid_digit():
    assert parse_int_prefix("12z", 10) == (12.0, 2)
    assert parse_int_prefix("z", 10) == (0.0, 0)


def test_number_to_integer():
    assert number_to_integer(math.nan) == 0
    assert number_to_integer(-3.7) == -3
    assert number_to_integer(math.inf) == INT_MAX
    assert number_to_integer(-math.inf) == INT_MIN


@pytest.mark.parametrize("n", [0, 1, -1, 2**31, 2**32 + 5, -(2**31) - 1, 3 * 2**32 - 7, 12345.9])
def test_int32_wraps_modulo(n):
    result = number_to_int32(n)
    assert INT_MIN <= result <= INT_MAX
    assert (result - math.trunc(n)) % 2**32 == 0
    assert number_to_uint32(n) == result % 2**32
    assert number_to_uint16(n) == result % 2**16
    assert -(2**15) <= number_to_int16(n) < 2**15
    assert number_to_int16(n) % 2**16 == number_to_uint16(n)


@pytest.mark.parametrize("n", [math.nan, math.inf, -math.inf, 0.0])
def test_int32_non_finite_is_zero(n):
    assert number_to_int32(n) == 0


@pytest.mark.parametrize("v", [0, 5, -5, 2147483647, -2147483648])
def test_format_int(v):
    assert format_int(v) == str(v)


def test_string_to_float_prefix():
    assert string_to_float("1.5e3x") == (float("1.5e3"), len("1.5e3"))
    assert string_to_float("-42rest") == (-42.0, 3)
    assert string_to_float("abc") == (0.0, 0)


def test_string_to_number():
    assert string_to_number("  42  ") == 42.0
    assert string_to_number("0x1A") == float(int("1A", 16))
    assert string_to_number(" Infinity ") == math.inf
    assert string_to_number("-Infinity") == -math.inf
    assert string_to_number("") == 0.0
    assert math.isnan(string_to_number("1e"))
    assert math.isnan(string_to_number("12abc"))
    assert math.isnan(string_to_number("0x"))


def test_number_to_string_special_values():
    assert number_to_string(math.nan) == "NaN"
    assert number_to_string(math.inf) == "Infinity"
    assert number_to_string(-math.inf) == "-Infinity"
    assert number_to_string(-0.0) == "0"
    assert number_to_string(123.0) == "123"
    assert number_to_string(0.1) == "0.1"
    assert number_to_string(1e20) == str(10**20)


@pytest.mark.parametrize("f", [0.1, 1 / 3, 1e21, 1.5e-7, 123.456, -2.5e-10, 2.0**53 + 2, 1e300, 5e-324, -7.25])
def test_number_to_string_round_trip(f):
    text = number_to_string(f)
    assert string_to_number(text) == f
    assert to_number(text) == f


def test_number_to_string_exponent_threshold():
    assert "e" in number_to_string(1e22)
    assert "e" not in number_to_string(1e-6)
    assert "e" in number_to_string(1e-7)


def test_to_boolean():
    assert to_boolean(UNDEFINED) is False
    assert to_boolean(None) is False
    assert to_boolean(math.nan) is False
    assert to_boolean(0) is False
    assert to_boolean("") is False
    assert to_boolean("0") is True
    assert to_boolean(Opaque()) is True


def test_to_number_and_to_string_basics():
    assert math.isnan(to_number(UNDEFINED))
    assert to_number(None) == 0.0
    assert to_number(True) == 1.0
    assert to_string(UNDEFINED) == "undefined"
    assert to_string(None) == "null"
    assert to_string(False) == "false"


def test_objects_convert_through_members():
    assert to_number(Boxed(7)) == 7.0
    assert to_string(Named()) == "named"
    assert to_number({"valueOf": lambda: "9"}) == 9.0
    assert to_string(Opaque()) == "[object]"


def test_strict_to_primitive_raises():
    with pytest.raises(JSTypeError):
        to_primitive(Opaque(), Hint.NUMBER, strict=True)


def test_concat():
    assert concat("a", 1) == "a1"
    assert concat(1, 2) == 3.0
    assert concat(Boxed(2), Boxed(3)) == 5.0
    assert concat(None, "x") == "nullx"


def test_compare():
    assert compare("a", "b") == -1
    assert compare("b", "a") == 1
    assert compare("a", "a") == 0
    assert compare(2, "10") == -1
    assert compare(math.nan, 1) is None
    assert compare(UNDEFINED, 0) is None


def test_loose_equal():
    assert loose_equal(None, UNDEFINED)
    assert loose_equal(1, "1")
    assert loose_equal(True, 1)
    assert loose_equal(Boxed(4), 4)
    assert not loose_equal(math.nan, math.nan)
    assert not loose_equal(None, 0)
    box = Boxed(1)
    assert loose_equal(box, box)
    assert not loose_equal(box, Boxed(1))


def test_strict_equal():
    assert not strict_equal(1, "1")
    assert strict_equal("x", "x")
    assert strict_equal(UNDEFINED, UNDEFINED)
    assert not strict_equal(None, UNDEFINED)
    assert not strict_equal(math.nan, math.nan)
    assert strict_equal(2, 2.0)