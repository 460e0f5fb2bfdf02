"""DES modes of operation: ECB, CBC, CFB and OFB."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from cipherkit.des import BLOCK_LENGTH, DES, pkcs7_pad, pkcs7_unpad

BytesLike = "bytes | bytearray | memoryview"


class ModeError(ValueError):
    """Raised when a mode cannot process its input or arguments."""


class Mode(Enum):
    """A DES mode of operation."""

    ECB = 0
    CBC = 1
    CFB = 2
    OFB = 3

    @property
    def needs_iv(self) -> bool:
        """Whether the mode requires an initialization vector."""
        return self is not Mode.ECB

    @property
    def padded(self) -> bool:
        """Whether the mode pads its input to whole blocks."""
        return self in (Mode.ECB, Mode.CBC)

    @classmethod
    def from_command(cls, name: str) -> "Mode":
        """Return the mode named by a cipher command; plain "des" means CBC."""
        try:
            return _COMMANDS[name]
        except KeyError:
            raise ModeError(f"Unknown cipher command: {name}") from None


_COMMANDS = {
    "des": Mode.CBC,
    "des-ecb": Mode.ECB,
    "des-cbc": Mode.CBC,
    "des-cfb": Mode.CFB,
    "des-ofb": Mode.OFB,
}


def _blocks(data: bytes) -> Iterator[bytes]:
    for start in range(0, len(data), BLOCK_LENGTH):
        yield data[start:start + BLOCK_LENGTH]


def _xor(left: bytes, right: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(left, right))


def _cipher(key: bytes | bytearray | memoryview) -> DES:
    try:
        return DES(key)
    except ValueError as exc:
        raise ModeError(str(exc)) from None


def _check_iv(mode: Mode, iv: Optional[bytes | bytearray | memoryview]) -> bytes:
    if not mode.needs_iv:
        return b""
    if iv is None:
        raise ModeError("Initialization vector error: Invalid argument")
    raw = bytes(iv)
    if len(raw) != BLOCK_LENGTH:
        raise ModeError("Initialization vector error: IV must be 8 bytes long")
    return raw


def _check_block_aligned(data: bytes) -> None:
    if not data or len(data) % BLOCK_LENGTH:
        raise ModeError("Ciphertext length is not a positive multiple of 8")


def _unpad(data: bytes) -> bytes:
    try:
        return pkcs7_unpad(data)
    except ValueError as exc:
        raise ModeError(f"Bad decrypt: {exc}") from None


def _stream(cipher: DES, iv: bytes, data: bytes, *, feedback_ciphertext: bool,
            decrypting: bool) -> bytes:
    """Run CFB (ciphertext feedback) or OFB (output feedback) over ``data``."""
    register = iv
    out = bytearray()
    for chunk in _blocks(data):
        keystream = cipher.encrypt_block(register)
        produced = _xor(keystream, chunk)
        out += produced
        if feedback_ciphertext:
            register = chunk if decrypting else produced
        else:
            register = keystream
    return bytes(out)


def encrypt(
    mode: Mode,
    key: bytes | bytearray | memoryview,
    data: bytes | bytearray | memoryview,
    iv: Optional[bytes | bytearray | memoryview] = None,
) -> bytes:
    """Encrypt ``data`` with an 8-byte DES key in the given mode.

    ECB and CBC apply PKCS#7 padding; CFB and OFB produce output of the
    same length as the input.
    """
    cipher = _cipher(key)
    vector = _check_iv(mode, iv)
    raw = bytes(data)
    if mode is Mode.ECB:
        return b"".join(cipher.encrypt_block(b) for b in _blocks(pkcs7_pad(raw)))
    if mode is Mode.CBC:
        out = bytearray()
        previous = vector
        for block in _blocks(pkcs7_pad(raw)):
            previous = cipher.encrypt_block(_xor(block, previous))
            out += previous
        return bytes(out)
    return _stream(cipher, vector, raw,
                   feedback_ciphertext=mode is Mode.CFB, decrypting=False)


def decrypt(
    mode: Mode,
    key: bytes | bytearray | memoryview,
    data: bytes | bytearray | memoryview,
    iv: Optional[bytes | bytearray | memoryview] = None,
) -> bytes:
    """Decrypt ``data`` with an 8-byte DES key in the given mode.

    For ECB and CBC the ciphertext must be a positive multiple of 8 bytes
    and the trailing padding is removed.
    """
    cipher = _cipher(key)
    vector = _check_iv(mode, iv)
    raw = bytes(data)
    if mode is Mode.ECB:
        _check_block_aligned(raw)
        return _unpad(b"".join(cipher.decrypt_block(b) for b in _blocks(raw)))
    if mode is Mode.CBC:
        _check_block_aligned(raw)
        out = bytearray()
        previous = vector
        for block in _blocks(raw):
            out += _xor(cipher.decrypt_block(block), previous)
            previous = block
        return _unpad(bytes(out))
    return _stream(cipher, vector, raw,
                   feedback_ciphertext=mode is Mode.CFB, decrypting=True)