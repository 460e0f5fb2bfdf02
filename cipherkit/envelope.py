"""Key or password based DES encryption with salt headers and base64 armour."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from cipherkit import base64codec, modes
from cipherkit.des import BLOCK_LENGTH
from cipherkit.hexkey import hex_to_block
from cipherkit.modes import Mode, ModeError
from cipherkit.pbkdf2 import derive_key

SALT_MAGIC = b"Salted__"
SALT_LENGTH = 8
HEADER_LENGTH = len(SALT_MAGIC) + SALT_LENGTH
ITERATIONS = 10000

_INVALID_ARGUMENT = "Invalid argument"
_BAD_MESSAGE = "Bad message"


class EncryptError(ValueError):
    """Raised when a message cannot be encrypted or decrypted."""


@dataclass
class EncryptOptions:
    """Settings for one encryption or decryption.

    ``key``, ``salt`` and ``iv`` are hexadecimal strings of up to 16 digits;
    a key takes precedence over a password. With ``base64`` set, output is
    armoured on encryption and input is unarmoured on decryption.
    """

    mode: Mode = Mode.CBC
    key: Optional[str] = None
    password: Optional[str] = None
    salt: Optional[str] = None
    iv: Optional[str] = None
    base64: bool = False
    iterations: int = ITERATIONS


def generate_salt() -> bytes:
    """Return a fresh random 8-byte salt."""
    return os.urandom(SALT_LENGTH)


def _vector(options: EncryptOptions) -> Optional[bytes]:
    if options.mode.needs_iv and options.iv is None:
        raise EncryptError(f"Initialization vector error: {_INVALID_ARGUMENT}")
    return hex_to_block(options.iv) if options.iv is not None else None


def _require_secret(options: EncryptOptions) -> None:
    if options.key is None and options.password is None:
        raise EncryptError(f"No key or password provided: {_INVALID_ARGUMENT}")


def _derive(options: EncryptOptions, salt: bytes) -> bytes:
    return derive_key(options.password, salt, options.iterations, BLOCK_LENGTH)


def encrypt(data: bytes | bytearray | memoryview, options: EncryptOptions) -> bytes:
    """Encrypt ``data`` according to ``options``.

    When a password is used without an explicit salt, a random salt is
    generated and the output starts with the ``Salted__`` header and salt.
    """
    vector = _vector(options)
    _require_secret(options)
    header = b""
    if options.key is not None:
        key = hex_to_block(options.key)
    else:
        if options.salt is not None:
            salt = hex_to_block(options.salt)
        else:
            salt = generate_salt()
            header = SALT_MAGIC + salt
        key = _derive(options, salt)
    try:
        ciphertext = header + modes.encrypt(options.mode, key, data, vector)
    except ModeError as exc:
        raise EncryptError(str(exc)) from None
    if options.base64:
        return base64codec.encode(ciphertext).encode("ascii")
    return ciphertext


def decrypt(data: bytes | bytearray | memoryview, options: EncryptOptions) -> bytes:
    """Decrypt ``data`` according to ``options``.

    A leading ``Salted__`` header supplies the salt for password-derived
    keys. Without the base64 option, input that looks base64 encoded is
    rejected.
    """
    vector = _vector(options)
    _require_secret(options)
    raw = bytes(data)
    if options.base64:
        try:
            raw = base64codec.decode(raw)
        except base64codec.Base64Error:
            raise EncryptError(f"Invalid base64 message: {_BAD_MESSAGE}") from None
    elif base64codec.is_valid_encoding(base64codec.strip_whitespace(raw)):
        raise EncryptError(f"Input message base64 encoded: {_BAD_MESSAGE}")

    key: Optional[bytes] = None
    if raw.startswith(SALT_MAGIC):
        if len(raw) < HEADER_LENGTH:
            raise EncryptError(f"Truncated salt header: {_BAD_MESSAGE}")
        if options.password is not None:
            key = _derive(options, raw[len(SALT_MAGIC):HEADER_LENGTH])
        raw = raw[HEADER_LENGTH:]
    if key is None:
        if options.key is not None:
            key = hex_to_block(options.key)
        elif options.salt is not None:
            key = _derive(options, hex_to_block(options.salt))
        else:
            key = _derive(options, generate_salt())
    try:
        return modes.decrypt(options.mode, key, raw, vector)
    except ModeError as exc:
        raise EncryptError(str(exc)) from None