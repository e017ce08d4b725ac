"""UTF-8 rune encoding and decoding, and Unicode character classification.

The encoding follows modified UTF-8: the NUL rune is written as the
two-byte overlong sequence ``C0 80`` so that encoded text never holds a
zero byte.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence

from jsrt.unialpha import ALPHA_RANGES, ALPHA_SINGLES
from jsrt.unicase import (
    LOWER_FULL,
    LOWER_RANGES,
    LOWER_SINGLES,
    UPPER_FULL,
    UPPER_RANGES,
    UPPER_SINGLES,
)

UTF_MAX = 4
RUNE_SELF = 0x80
RUNE_ERROR = 0xFFFD
RUNE_MAX = 0x10FFFF

_RUNE1 = 0x7F
_RUNE2 = 0x7FF
_RUNE3 = 0xFFFF
_RUNE4 = 0x1FFFFF

_TX = 0x80
_T2 = 0xC0
_T3 = 0xE0
_T4 = 0xF0
_T5 = 0xF8
_MASKX = 0x3F
_TESTX = 0xC0


def _byte_at(data: bytes, index: int) -> int:
    """Return the byte at ``index``, or 0 past the end of ``data``."""
    return data[index] if index < len(data) else 0


def decode_rune(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Decode one rune from ``data`` at ``pos``; return ``(rune, length)``.

    Malformed input yields ``(RUNE_ERROR, 1)``. Reading past the end of
    ``data`` behaves as if the text were followed by a zero byte.
    """
    c = _byte_at(data, pos)
    if c == 0xC0 and _byte_at(data, pos + 1) == 0x80:
        return 0, 2
    if c < _TX:
        return c, 1

    c1 = _byte_at(data, pos + 1) ^ _TX
    if c1 & _TESTX:
        return RUNE_ERROR, 1
    if c < _T3:
        if c < _T2:
            return RUNE_ERROR, 1
        rune = ((c << 6) | c1) & _RUNE2
        if rune <= _RUNE1:
            return RUNE_ERROR, 1
        return rune, 2

    c2 = _byte_at(data, pos + 2) ^ _TX
    if c2 & _TESTX:
        return RUNE_ERROR, 1
    if c < _T4:
        rune = ((((c << 6) | c1) << 6) | c2) & _RUNE3
        if rune <= _RUNE2:
            return RUNE_ERROR, 1
        return rune, 3

    c3 = _byte_at(data, pos + 3) ^ _TX
    if c3 & _TESTX:
        return RUNE_ERROR, 1
    if c < _T5:
        rune = ((((((c << 6) | c1) << 6) | c2) << 6) | c3) & _RUNE4
        if rune <= _RUNE3 or rune > RUNE_MAX:
            return RUNE_ERROR, 1
        return rune, 4

    return RUNE_ERROR, 1


def encode_rune(rune: int) -> bytes:
    """Encode ``rune`` as modified UTF-8; runes above the maximum become U+FFFD."""
    if rune < 0:
        raise ValueError(f"negative rune: {rune}")
    if rune == 0:
        return b"\xc0\x80"
    if rune <= _RUNE1:
        return bytes((rune,))
    if rune <= _RUNE2:
        return bytes((_T2 | (rune >> 6), _TX | (rune & _MASKX)))
    if rune > RUNE_MAX:
        rune = RUNE_ERROR
    if rune <= _RUNE3:
        return bytes((
            _T3 | (rune >> 12),
            _TX | ((rune >> 6) & _MASKX),
            _TX | (rune & _MASKX),
        ))
    return bytes((
        _T4 | (rune >> 18),
        _TX | ((rune >> 12) & _MASKX),
        _TX | ((rune >> 6) & _MASKX),
        _TX | (rune & _MASKX),
    ))


def rune_len(rune: int) -> int:
    """Return the number of bytes ``encode_rune`` produces for ``rune``."""
    return len(encode_rune(rune))


def _starts(ranges: Sequence[tuple[int, ...]]) -> list[int]:
    return [entry[0] for entry in ranges]


_LOWER_STARTS = _starts(LOWER_RANGES)
_UPPER_STARTS = _starts(UPPER_RANGES)
_ALPHA_STARTS = _starts(ALPHA_RANGES)


def _find_range(ranges: Sequence[tuple[int, ...]], starts: list[int], rune: int) -> Optional[tuple[int, ...]]:
    """Return the range containing ``rune``, if any."""
    index = bisect_right(starts, rune) - 1
    if index >= 0:
        entry = ranges[index]
        if entry[0] <= rune <= entry[1]:
            return entry
    return None


def to_lower_rune(rune: int) -> int:
    """Return the simple lower-case mapping of ``rune``."""
    entry = _find_range(LOWER_RANGES, _LOWER_STARTS, rune)
    if entry is not None:
        return rune + entry[2]
    return rune + LOWER_SINGLES.get(rune, 0)


def to_upper_rune(rune: int) -> int:
    """Return the simple upper-case mapping of ``rune``."""
    entry = _find_range(UPPER_RANGES, _UPPER_STARTS, rune)
    if entry is not None:
        return rune + entry[2]
    return rune + UPPER_SINGLES.get(rune, 0)


def is_lower_rune(rune: int) -> bool:
    """True if ``rune`` has an upper-case mapping."""
    return _find_range(UPPER_RANGES, _UPPER_STARTS, rune) is not None or rune in UPPER_SINGLES


def is_upper_rune(rune: int) -> bool:
    """True if ``rune`` has a lower-case mapping."""
    return _find_range(LOWER_RANGES, _LOWER_STARTS, rune) is not None or rune in LOWER_SINGLES


def is_alpha_rune(rune: int) -> bool:
    """True if ``rune`` is a Unicode letter."""
    return _find_range(ALPHA_RANGES, _ALPHA_STARTS, rune) is not None or rune in ALPHA_SINGLES


def to_lower_full(rune: int) -> Optional[tuple[int, ...]]:
    """Return the special multi-rune lower-case expansion of ``rune``, or None."""
    return LOWER_FULL.get(rune)


def to_upper_full(rune: int) -> Optional[tuple[int, ...]]:
    """Return the special multi-rune upper-case expansion of ``rune``, or None."""
    return UPPER_FULL.get(rune)