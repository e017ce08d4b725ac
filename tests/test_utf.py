import pytest

from jsrt.utf import (
    RUNE_ERROR,
    RUNE_MAX,
    decode_rune,
    encode_rune,
    is_alpha_rune,
    is_lower_rune,
    is_upper_rune,
    rune_len,
    to_lower_full,
    to_lower_rune,
    to_upper_full,
    to_upper_rune,
)

SAMPLE_RUNES = [0x41, 0x7F, 0x80, 0xE9, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, RUNE_MAX]


@pytest.mark.parametrize("rune", SAMPLE_RUNES)
def test_encode_matches_standard_utf8(rune):
    assert encode_rune(rune) == chr(rune).encode("utf-8")


@pytest.mark.parametrize("rune", SAMPLE_RUNES + [0])
def test_round_trip(rune):
    data = encode_rune(rune)
    assert decode_rune(data, 0) == (rune, len(data))


@pytest.mark.parametrize("rune", SAMPLE_RUNES + [0])
def test_rune_len_matches_encoding(rune):
    assert rune_len(rune) == len(encode_rune(rune))


def test_nul_uses_overlong_form():
    assert encode_rune(0) == b"\xc0\x80"
    assert decode_rune(b"\xc0\x80") == (0, 2)


def test_too_large_rune_becomes_error_rune():
    assert encode_rune(RUNE_MAX + 1) == encode_rune(RUNE_ERROR)


def test_negative_rune_rejected():
    with pytest.raises(ValueError):
        encode_rune(-1)


def test_decode_at_offset():
    data = "a\u00e9b".encode("utf-8")
    assert decode_rune(data, 1) == (0xE9, 2)
    assert decode_rune(data, 3) == (ord("b"), 1)


def test_decode_past_end_reads_terminator():
    assert decode_rune(b"a", 1) == (0, 1)


@pytest.mark.parametrize(
    "data",
    [b"\x80", b"\xbf\x80", b"\xe2\x82", b"\xc1\x81", b"\xe0\x80\x80", b"\xf4\x90\x80\x80", b"\xf8\x80\x80\x80", b"\xc3A"],
)
def test_malformed_input_yields_error_rune(data):
    assert decode_rune(data) == (RUNE_ERROR, 1)


def test_surrogate_round_trips():
    data = encode_rune(0xD800)
    assert len(data) == 3
    assert decode_rune(data) == (0xD800, 3)


@pytest.mark.parametrize("rune", list(range(0x41, 0x5B)) + list(range(0x391, 0x3A2)) + list(range(0x410, 0x430)))
def test_lower_matches_python(rune):
    assert chr(to_lower_rune(rune)) == chr(rune).lower()
    assert is_upper_rune(rune)
    assert to_upper_rune(to_lower_rune(rune)) == rune


@pytest.mark.parametrize("rune", list(range(0x61, 0x7B)) + list(range(0x100, 0x130)))
def test_upper_matches_python(rune):
    assert chr(to_upper_rune(rune)) == chr(rune).upper()


def test_case_pairs_latin_extended():
    for rune in range(0x101, 0x130, 2):
        assert is_lower_rune(rune)
        assert not is_upper_rune(rune)
        assert to_lower_rune(to_upper_rune(rune)) == rune


@pytest.mark.parametrize("rune", [ord(c) for c in "0123456789 !@#_-"])
def test_non_letters_unchanged(rune):
    assert to_lower_rune(rune) == rune
    assert to_upper_rune(rune) == rune
    assert not is_lower_rune(rune)
    assert not is_upper_rune(rune)
    assert not is_alpha_rune(rune)


@pytest.mark.parametrize("rune", list(range(0x20, 0x7F)))
def test_alpha_ascii_matches_python(rune):
    assert is_alpha_rune(rune) == chr(rune).isalpha()


@pytest.mark.parametrize("rune", [0xAA, 0xE9, 0x3B1, 0x5D0, 0x3041, 0x4E00, 0xAC00, 0x10400, 0x20000])
def test_alpha_non_ascii(rune):
    assert is_alpha_rune(rune)
    assert chr(rune).isalpha()


def test_full_upper_expansion_matches_python():
    for rune in (0xDF, 0xFB01, 0xFB03, 0x149):
        assert to_upper_full(rune) == tuple(ord(c) for c in chr(rune).upper())


def test_full_lower_expansion_matches_python():
    assert to_lower_full(0x130) == tuple(ord(c) for c in "\u0130".lower())


def test_full_expansion_absent_for_plain_letters():
    assert to_upper_full(ord("a")) is None
    assert to_lower_full(ord("A")) is None