"""Primitive value semantics: type conversions, number formatting and comparisons.

Values are modelled with plain Python objects:

* :data:`UNDEFINED` (the single :class:`Undefined` instance) is ``undefined``;
* ``None`` is ``null``;
* ``bool`` is a boolean;
* ``int`` and ``float`` are numbers;
* ``str`` is a string;
* anything else is an object.

An object is turned into a primitive by calling its ``valueOf`` and
``toString`` members, looked up as mapping keys or as attributes, in the
order the conversion hint asks for.
"""

from __future__ import annotations

import enum
import math
import re
import unicodedata
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_TWO32 = 4294967296.0
_TWO31 = 2147483648.0


class Undefined:
    """The ``undefined`` value; there is only one instance."""

    _instance: Optional["Undefined"] = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined()


class JSTypeError(TypeError):
    """Raised where the language reports a TypeError."""


class Hint(enum.Enum):
    """Preferred result type for :func:`to_primitive`."""

    NONE = 0
    NUMBER = 1
    STRING = 2


# Value kinds

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (Undefined, bool, int, float, str))


def _kind(value: Any) -> str:
    if isinstance(value, Undefined):
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


# Integer conversions

_DIGIT_VALUES = {
    **{ch: ord(ch) - 0x30 for ch in "0123456789"},
    **{ch: ord(ch) - 0x61 + 10 for ch in "abcdefghijklmnopqrstuvwxyz"},
    **{ch: ord(ch) - 0x41 + 10 for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"},
}


def parse_int_prefix(text: str, base: int = 10) -> tuple[float, int]:
    """Read unsigned digits of ``base`` from the start of ``text``.

    Returns ``(value, consumed)``. The value is accumulated in floating
    point, so very long digit runs lose precision the same way doubles do.
    """
    value = 0.0
    consumed = 0
    for ch in text:
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= base or (base == 10 and digit >= 10):
            break
        value = value * base + digit
        consumed += 1
    return value, consumed


def number_to_integer(n: float) -> int:
    """Truncate ``n`` towards zero, clamped to the 32-bit signed range."""
    if n == 0 or math.isnan(n):
        return 0
    if n < INT_MIN:
        return INT_MIN
    if n > INT_MAX:
        return INT_MAX
    return int(n)


def number_to_int32(n: float) -> int:
    """ToInt32: wrap ``n`` modulo 2**32 into the signed 32-bit range."""
    n = float(n)
    if not math.isfinite(n) or n == 0:
        return 0
    n = math.fmod(n, _TWO32)
    n = math.floor(n) if n >= 0 else math.ceil(n) + _TWO32
    if n >= _TWO31:
        return int(n - _TWO32)
    return int(n)


def number_to_uint32(n: float) -> int:
    """ToUint32: wrap ``n`` modulo 2**32 into the unsigned 32-bit range."""
    return number_to_int32(n) & 0xFFFFFFFF


def number_to_int16(n: float) -> int:
    """Wrap ``n`` into the signed 16-bit range."""
    value = number_to_int32(n) & 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def number_to_uint16(n: float) -> int:
    """Wrap ``n`` into the unsigned 16-bit range."""
    return number_to_int32(n) & 0xFFFF


def format_int(value: int) -> str:
    """Format an integer in decimal."""
    value = int(value)
    magnitude = abs(value)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(0x30 + digit))
    body = "".join(reversed(digits)) or "0"
    return "-" + body if value < 0 else body


# String to number

_FLOAT_SYNTAX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMBER_SHAPE = re.compile(r"[+-]?\d*(\.)?\d*(?:([eE])[+-]?\d*)?")


def string_to_float(text: str) -> tuple[float, int]:
    """Parse a decimal number at the start of ``text``.

    Returns ``(value, consumed)``; ``(0, 0)`` when the leading text has the
    shape of a number but does not parse as one.
    """
    shape = _NUMBER_SHAPE.match(text)
    end = shape.end() if shape else 0
    is_float = bool(shape and (shape.group(1) or shape.group(2)))

    if is_float:
        parsed = _FLOAT_SYNTAX.match(text)
        parsed_end = parsed.end() if parsed else 0
        value = float(parsed.group(0)) if parsed else 0.0
    else:
        sign = text[:1] if text[:1] in ("+", "-") else ""
        value, count = parse_int_prefix(text[len(sign):], 10)
        if sign == "-":
            value = -value
        parsed_end = len(sign) + count

    if parsed_end == end:
        return value, end
    return 0.0, 0


def _is_js_space(ch: str) -> bool:
    if ch in "\t\v\f \xa0\ufeff\n\r\u2028\u2029":
        return True
    return unicodedata.category(ch) == "Zs"


def string_to_number(text: str) -> float:
    """ToNumber on a string: NaN unless the whole trimmed text is a number."""
    start = 0
    while start < len(text) and _is_js_space(text[start]):
        start += 1
    s = text[start:]

    if s[:2] in ("0x", "0X") and len(s) > 2:
        value, count = parse_int_prefix(s[2:], 16)
        end = 2 + count
    elif s.startswith("Infinity"):
        value, end = math.inf, 8
    elif s.startswith("+Infinity"):
        value, end = math.inf, 9
    elif s.startswith("-Infinity"):
        value, end = -math.inf, 9
    else:
        value, end = string_to_float(s)

    if s[end:].strip("".join(ch for ch in s[end:] if _is_js_space(ch))):
        return math.nan
    return value


# Number to string

def _shortest_digits(f: float) -> tuple[str, int]:
    """Return the shortest round-tripping digit string of ``|f|`` and its exponent."""
    _, digits, exponent = Decimal(repr(abs(f))).as_tuple()
    digit_list = list(digits)
    while len(digit_list) > 1 and digit_list[-1] == 0:
        digit_list.pop()
        exponent += 1
    return "".join(map(str, digit_list)), int(exponent)


def _format_exponent(e: int) -> str:
    return f"e{'+' if e >= 0 else '-'}{abs(e)}"


def number_to_string(n: float) -> str:
    """ToString on a number, using the shortest digits that round-trip."""
    f = float(n)
    if f == 0:
        return "0"
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "-Infinity" if f < 0 else "Infinity"
    if INT_MIN <= f <= INT_MAX and f == int(f):
        return format_int(int(f))

    digits, exponent = _shortest_digits(f)
    ndigits = len(digits)
    point = ndigits + exponent
    sign = "-" if math.copysign(1.0, f) < 0 else ""

    if point < -5 or point > 21:
        mantissa = digits[0] + ("." + digits[1:] if ndigits > 1 else "")
        return sign + mantissa + _format_exponent(point - 1)
    if point <= 0:
        return sign + "0." + "0" * (-point) + digits
    fraction = "." + digits[point:] if ndigits > point else ""
    return sign + digits[:point] + fraction + "0" * max(point - ndigits, 0)


# Conversions on values

def _member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _call_member(obj: Any, name: str) -> tuple[bool, Any]:
    method = _member(obj, name)
    if callable(method):
        result = method()
        if _is_primitive(result):
            return True, result
    return False, None


def to_primitive(value: Any, hint: Hint = Hint.NONE, strict: bool = False) -> Any:
    """ToPrimitive: convert an object by its ``valueOf`` and ``toString`` members.

    In strict mode an object that yields no primitive raises
    :class:`JSTypeError`; otherwise it becomes ``"[object]"``.
    """
    if _is_primitive(value):
        return value
    order = ("toString", "valueOf") if hint is Hint.STRING else ("valueOf", "toString")
    for name in order:
        found, result = _call_member(value, name)
        if found:
            return result
    if strict:
        raise JSTypeError("cannot convert object to primitive")
    return "[object]"


def to_boolean(value: Any) -> bool:
    """ToBoolean."""
    kind = _kind(value)
    if kind in ("undefined", "null"):
        return False
    if kind == "boolean":
        return value
    if kind == "number":
        return value != 0 and not math.isnan(value)
    if kind == "string":
        return value != ""
    return True


def to_number(value: Any) -> float:
    """ToNumber."""
    kind = _kind(value)
    if kind == "undefined":
        return math.nan
    if kind == "null":
        return 0.0
    if kind == "boolean":
        return 1.0 if value else 0.0
    if kind == "number":
        return float(value)
    if kind == "string":
        return string_to_number(value)
    return to_number(to_primitive(value, Hint.NUMBER))


def to_integer(value: Any) -> int:
    """ToInteger, clamped to the 32-bit signed range."""
    return number_to_integer(to_number(value))


def to_string(value: Any) -> str:
    """ToString."""
    kind = _kind(value)
    if kind == "undefined":
        return "undefined"
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number":
        return number_to_string(value)
    if kind == "string":
        return value
    return to_string(to_primitive(value, Hint.STRING))


# Operators

def concat(x: Any, y: Any) -> Any:
    """The ``+`` operator: string concatenation if either side is a string."""
    x = to_primitive(x)
    y = to_primitive(y)
    if isinstance(x, str) or isinstance(y, str):
        return to_string(x) + to_string(y)
    return to_number(x) + to_number(y)


def compare(x: Any, y: Any) -> Optional[int]:
    """Relational comparison: -1, 0 or 1, or None when either side is NaN."""
    x = to_primitive(x, Hint.NUMBER)
    y = to_primitive(y, Hint.NUMBER)
    if isinstance(x, str) and isinstance(y, str):
        return (x > y) - (x < y)
    a = to_number(x)
    b = to_number(y)
    if math.isnan(a) or math.isnan(b):
        return None
    return (a > b) - (a < b)


def _same_type_equal(kind: str, x: Any, y: Any) -> bool:
    if kind in ("undefined", "null"):
        return True
    if kind in ("number", "boolean", "string"):
        return x == y
    return x is y


def loose_equal(x: Any, y: Any) -> bool:
    """The ``==`` operator."""
    while True:
        kx, ky = _kind(x), _kind(y)
        if kx == ky:
            return _same_type_equal(kx, x, y)
        if {kx, ky} == {"null", "undefined"}:
            return True
        if kx == "number" and ky == "string":
            return x == string_to_number(y)
        if kx == "string" and ky == "number":
            return string_to_number(x) == y
        if kx == "boolean":
            x = 1.0 if x else 0.0
        elif ky == "boolean":
            y = 1.0 if y else 0.0
        elif kx in ("string", "number") and ky == "object":
            y = to_primitive(y)
        elif kx == "object" and ky in ("string", "number"):
            x = to_primitive(x)
        else:
            return False


def strict_equal(x: Any, y: Any) -> bool:
    """The ``===`` operator."""
    kx, ky = _kind(x), _kind(y)
    if kx != ky:
        return False
    return _same_type_equal(kx, x, y)