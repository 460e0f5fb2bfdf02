import warnings

import pytest

from cipherkit.hexkey import (
    HexLengthWarning,
    HexStringError,
    hex_to_block,
    validate_ascii,
    validate_hex,
)


def test_validate_hex_uppercases_exact_length_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert validate_hex("0123456789abcdef") == "0123456789ABCDEF"


def test_validate_hex_warns_when_short():
    with pytest.warns(HexLengthWarning, match="shorter"):
        assert validate_hex("abc") == "ABC"


def test_validate_hex_warns_when_long():
    with pytest.warns(HexLengthWarning, match="longer"):
        assert validate_hex("00112233445566778899") == "00112233445566778899"


@pytest.mark.parametrize("text", ["xyz", "01234g", "12 34", "0x12"])
def test_validate_hex_rejects_non_hex(text):
    with pytest.raises(HexStringError, match="Invalid hexadecimal string"):
        validate_hex(text)


def test_validate_ascii_accepts_printable():
    assert validate_ascii("Hello, World ~!") == "Hello, World ~!"


@pytest.mark.parametrize("text", ["tab\there", "new\nline", "caf\u00e9"])
def test_validate_ascii_rejects_unprintable(text):
    with pytest.raises(HexStringError, match="Invalid ascii string"):
        validate_ascii(text)


def test_hex_to_block_full_length():
    assert hex_to_block("0011223344556677") == bytes.fromhex("0011223344556677")


def test_hex_to_block_ignores_excess():
    assert hex_to_block("0011223344556677FF") == hex_to_block("0011223344556677")


def test_hex_to_block_pads_odd_length():
    assert hex_to_block("ABC") == bytes.fromhex("ABC0000000000000")


def test_hex_to_block_stops_at_invalid_character():
    assert hex_to_block("12G4") == b"\x12" + bytes(7)


def test_hex_to_block_accepts_lowercase():
    assert hex_to_block("abcdef") == hex_to_block("ABCDEF")


def test_hex_to_block_always_eight_bytes():
    for text in ["", "1", "1234", "0123456789ABCDEF0123"]:
        assert len(hex_to_block(text)) == 8