"""The DES block cipher, bit permutations and PKCS#7 padding."""

from __future__ import annotations

from typing import Sequence

BLOCK_LENGTH = 8
ROUNDS = 16

IP_TABLE = (
    58, 50, 42, 34, 26, 18, 10, 2,
    60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6,
    64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1,
    59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5,
    63, 55, 47, 39, 31, 23, 15, 7,
)

FP_TABLE = tuple(
    IP_TABLE.index(position) + 1 for position in range(1, 65)
)

EXPANSION_TABLE = (
    32, 1, 2, 3, 4, 5,
    4, 5, 6, 7, 8, 9,
    8, 9, 10, 11, 12, 13,
    12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21,
    20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29,
    28, 29, 30, 31, 32, 1,
)

P_TABLE = (
    16, 7, 20, 21, 29, 12, 28, 17,
    1, 15, 23, 26, 5, 18, 31, 10,
    2, 8, 24, 14, 32, 27, 3, 9,
    19, 13, 30, 6, 22, 11, 4, 25,
)

PC1_TABLE = (
    57, 49, 41, 33, 25, 17, 9,
    1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27,
    19, 11, 3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15,
    7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29,
    21, 13, 5, 28, 20, 12, 4,
)

PC2_TABLE = (
    14, 17, 11, 24, 1, 5,
    3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8,
    16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55,
    30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53,
    46, 42, 50, 36, 29, 32,
)

SHIFT_TABLE = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)

S_BOXES = (
    (
        (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
        (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
        (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
        (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
    ),
    (
        (15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10),
        (3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5),
        (0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15),
        (13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9),
    ),
    (
        (10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8),
        (13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1),
        (13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7),
        (1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12),
    ),
    (
        (7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15),
        (13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9),
        (10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4),
        (3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14),
    ),
    (
        (2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9),
        (14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6),
        (4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14),
        (11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3),
    ),
    (
        (12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11),
        (10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8),
        (9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6),
        (4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13),
    ),
    (
        (4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1),
        (13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6),
        (1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2),
        (6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12),
    ),
    (
        (13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7),
        (1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2),
        (7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8),
        (2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11),
    ),
)

_MASK28 = 0x0FFFFFFF


def _permute_int(value: int, width: int, table: Sequence[int]) -> int:
    result = 0
    for position in table:
        result = (result << 1) | ((value >> (width - position)) & 1)
    return result


def permute(data: bytes | bytearray | memoryview, table: Sequence[int]) -> bytes:
    """Rearrange the bits of ``data`` according to a 1-based table.

    Output bit ``i`` takes input bit ``table[i]``, counting from the most
    significant bit of the first byte. The result is padded with zero bits
    to a whole number of bytes.
    """
    raw = bytes(data)
    width = len(raw) * 8
    if any(not 1 <= position <= width for position in table):
        raise ValueError("permutation table refers to bits outside the input")
    value = _permute_int(int.from_bytes(raw, "big"), width, table)
    out_bytes = -(-len(table) // 8)
    value <<= out_bytes * 8 - len(table)
    return value.to_bytes(out_bytes, "big")


def _rotate28(value: int, count: int) -> int:
    return ((value << count) | (value >> (28 - count))) & _MASK28


def _substitute(value: int) -> int:
    result = 0
    for index, box in enumerate(S_BOXES):
        chunk = (value >> (42 - 6 * index)) & 0x3F
        row = ((chunk >> 4) & 0x02) | (chunk & 0x01)
        column = (chunk >> 1) & 0x0F
        result = (result << 4) | box[row][column]
    return result


def _mangle(right: int, subkey: int) -> int:
    expanded = _permute_int(right, 32, EXPANSION_TABLE) ^ subkey
    return _permute_int(_substitute(expanded), 32, P_TABLE)


class DES:
    """DES block cipher keyed with an 8-byte key."""

    def __init__(self, key: bytes | bytearray | memoryview) -> None:
        raw = bytes(key)
        if len(raw) != BLOCK_LENGTH:
            raise ValueError("DES key must be 8 bytes long")
        self.key = raw
        self.subkeys = self._schedule(raw)

    @staticmethod
    def _schedule(key: bytes) -> tuple[int, ...]:
        permuted = _permute_int(int.from_bytes(key, "big"), 64, PC1_TABLE)
        left, right = permuted >> 28, permuted & _MASK28
        subkeys = []
        for shift in SHIFT_TABLE:
            left, right = _rotate28(left, shift), _rotate28(right, shift)
            subkeys.append(_permute_int((left << 28) | right, 56, PC2_TABLE))
        return tuple(subkeys)

    @staticmethod
    def _crypt(block: bytes | bytearray | memoryview, subkeys: Sequence[int]) -> bytes:
        raw = bytes(block)
        if len(raw) != BLOCK_LENGTH:
            raise ValueError("DES block must be 8 bytes long")
        permuted = _permute_int(int.from_bytes(raw, "big"), 64, IP_TABLE)
        left, right = permuted >> 32, permuted & 0xFFFFFFFF
        for subkey in subkeys:
            left, right = right, left ^ _mangle(right, subkey)
        joined = (right << 32) | left
        return _permute_int(joined, 64, FP_TABLE).to_bytes(BLOCK_LENGTH, "big")

    def encrypt_block(self, block: bytes | bytearray | memoryview) -> bytes:
        """Encrypt a single 8-byte block."""
        return self._crypt(block, self.subkeys)

    def decrypt_block(self, block: bytes | bytearray | memoryview) -> bytes:
        """Decrypt a single 8-byte block."""
        return self._crypt(block, self.subkeys[::-1])


def pkcs7_pad(data: bytes | bytearray | memoryview) -> bytes:
    """Pad ``data`` to a multiple of 8 bytes; a full block is added if aligned."""
    raw = bytes(data)
    count = BLOCK_LENGTH - len(raw) % BLOCK_LENGTH
    return raw + bytes([count]) * count


def pkcs7_unpad(data: bytes | bytearray | memoryview) -> bytes:
    """Drop as many trailing bytes as the last byte's value."""
    raw = bytes(data)
    if not raw:
        raise ValueError("cannot unpad empty data")
    count = raw[-1]
    if count > len(raw):
        raise ValueError("padding length exceeds data length")
    return raw[:len(raw) - count]