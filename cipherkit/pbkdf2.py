"""HMAC-SHA256 and PBKDF2 key derivation built on it."""

from __future__ import annotations

import struct

from cipherkit.sha256 import BLOCK_SIZE, DIGEST_SIZE, sha256

_IPAD = 0x36
_OPAD = 0x5C


def _as_bytes(value: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(value, str):
        return value.encode()
    return bytes(value)


def _padded_key(key: bytes) -> bytes:
    if len(key) > BLOCK_SIZE:
        key = sha256(key)
    return key.ljust(BLOCK_SIZE, b"\x00")


def _hmac_with_block(k0: bytes, message: bytes) -> bytes:
    inner = sha256(bytes(b ^ _IPAD for b in k0) + message)
    return sha256(bytes(b ^ _OPAD for b in k0) + inner)


def hmac_sha256(
    key: bytes | bytearray | memoryview | str,
    message: bytes | bytearray | memoryview | str,
) -> bytes:
    """Return HMAC-SHA256 of ``message`` under ``key``."""
    return _hmac_with_block(_padded_key(_as_bytes(key)), _as_bytes(message))


def derive_key(
    password: bytes | bytearray | memoryview | str,
    salt: bytes | bytearray | memoryview,
    iterations: int,
    length: int,
) -> bytes:
    """Derive ``length`` bytes from a password with PBKDF2-HMAC-SHA256."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    if length < 1:
        raise ValueError("length must be at least 1")
    k0 = _padded_key(_as_bytes(password))
    salt_bytes = bytes(salt)
    blocks = []
    block_count = -(-length // DIGEST_SIZE)
    for index in range(1, block_count + 1):
        current = _hmac_with_block(k0, salt_bytes + struct.pack(">I", index))
        accumulated = int.from_bytes(current, "big")
        for _ in range(iterations - 1):
            current = _hmac_with_block(k0, current)
            accumulated ^= int.from_bytes(current, "big")
        blocks.append(accumulated.to_bytes(DIGEST_SIZE, "big"))
    return b"".join(blocks)[:length]