"""Validation and conversion of hexadecimal keys, salts and IVs."""

from __future__ import annotations

import string
import warnings

BLOCK_LENGTH = 8
HEX_DIGITS = BLOCK_LENGTH * 2

_HEX_CHARS = frozenset(string.hexdigits)


class HexStringError(ValueError):
    """Raised when a hexadecimal or ASCII argument is malformed."""


class HexLengthWarning(UserWarning):
    """Issued when a hexadecimal string is not exactly 64 bits long."""


def validate_hex(text: str) -> str:
    """Check that ``text`` is hexadecimal and return it upper-cased.

    A string shorter than 16 digits is zero-padded later and one longer is
    truncated; both cases issue a HexLengthWarning.
    """
    if any(char not in _HEX_CHARS for char in text):
        raise HexStringError("Invalid hexadecimal string")
    if len(text) < HEX_DIGITS:
        warnings.warn(
            "hex string shorter than 64 bits, padding with zeros",
            HexLengthWarning,
            stacklevel=2,
        )
    elif len(text) > HEX_DIGITS:
        warnings.warn(
            "hex string longer than 64 bits, ignoring excess",
            HexLengthWarning,
            stacklevel=2,
        )
    return text.upper()


def validate_ascii(text: str) -> str:
    """Check that every character of ``text`` is printable ASCII."""
    if any(not 32 <= ord(char) <= 126 for char in text):
        raise HexStringError("Invalid ascii string")
    return text


def hex_to_block(text: str) -> bytes:
    """Convert up to 16 hex digits into an 8-byte block.

    Conversion stops at the first non-hex character; the remaining bits,
    including a dangling low nibble, are zero.
    """
    digits = []
    for char in text[:HEX_DIGITS]:
        if char not in _HEX_CHARS:
            break
        digits.append(char)
    return bytes.fromhex("".join(digits).ljust(HEX_DIGITS, "0"))