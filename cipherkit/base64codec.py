"""Base64 encoding and decoding with 64-column line wrapping."""

from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
LINE_WIDTH = 64
PAD = "="

_REVERSE = {ord(char): value for value, char in enumerate(ALPHABET)}
_REVERSE[ord(PAD)] = 0
_VALID = frozenset(_REVERSE)
_WHITESPACE = frozenset(b" \n")


class Base64Error(ValueError):
    """Raised when a message is not properly base64 encoded."""


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def _encode_group(chunk: bytes) -> str:
    first = chunk[0]
    second = chunk[1] if len(chunk) > 1 else 0
    third = chunk[2] if len(chunk) > 2 else 0
    chars = [
        ALPHABET[first >> 2],
        ALPHABET[((first & 0x03) << 4) | (second >> 4)],
        ALPHABET[((second & 0x0F) << 2) | (third >> 6)],
        ALPHABET[third & 0x3F],
    ]
    if len(chunk) < 3:
        chars[3] = PAD
    if len(chunk) < 2:
        chars[2] = PAD
    return "".join(chars)


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as base64 text, breaking lines every 64 characters.

    A newline follows every full line and the output always ends with a
    newline; when the input fills the last line exactly with whole
    triplets, the terminating newline comes in addition to the line break.
    """
    raw = bytes(data)
    parts: list[str] = []
    full = len(raw) - len(raw) % 3
    for start in range(0, full, 3):
        parts.append(_encode_group(raw[start:start + 3]))
        if ((start + 3) * 4 // 3) % LINE_WIDTH == 0:
            parts.append("\n")
    if full < len(raw):
        parts.append(_encode_group(raw[full:]))
    parts.append("\n")
    return "".join(parts)


def strip_whitespace(data: bytes | bytearray | memoryview | str) -> bytes:
    """Remove spaces and newlines from an encoded message."""
    return bytes(byte for byte in _as_bytes(data) if byte not in _WHITESPACE)


def is_valid_encoding(data: bytes | bytearray | memoryview | str) -> bool:
    """Tell whether a whitespace-free message is properly base64 encoded.

    The length must be a multiple of four, padding may only occupy the
    last two positions, and a padded third-to-last group position implies
    a padded last position.
    """
    raw = _as_bytes(data)
    length = len(raw)
    if length % 4:
        return False
    if length >= 2 and raw[-2] == ord(PAD) and raw[-1] != ord(PAD):
        return False
    for position, byte in enumerate(raw):
        if byte not in _VALID:
            return False
        if byte == ord(PAD) and position < length - 2:
            return False
    return True


def decode(text: bytes | bytearray | memoryview | str) -> bytes:
    """Decode base64 text, ignoring spaces and newlines.

    Raises Base64Error when the message is not properly encoded.
    """
    raw = strip_whitespace(text)
    if not is_valid_encoding(raw):
        raise Base64Error("base64: Bad message")
    out = bytearray()
    for start in range(0, len(raw), 4):
        quartet = raw[start:start + 4]
        a, b, c, d = (_REVERSE[byte] for byte in quartet)
        out.append(((a << 2) | (b >> 4)) & 0xFF)
        if quartet[2] != ord(PAD):
            out.append(((b << 4) | (c >> 2)) & 0xFF)
        if quartet[3] != ord(PAD):
            out.append(((c << 6) | d) & 0xFF)
    return bytes(out)