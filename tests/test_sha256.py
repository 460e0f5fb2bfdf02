import hashlib

import pytest

from cipherkit.sha256 import sha256


def test_empty_message_digest():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_digest():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize(
    "size", [1, 54, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000]
)
def test_matches_reference_at_block_boundaries(size):
    data = bytes((i * 7 + 1) % 256 for i in range(size))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_digest_length():
    assert len(sha256(b"x" * 300)) == 32


def test_accepts_bytearray_and_memoryview():
    data = b"some message"
    expected = hashlib.sha256(data).digest()
    assert sha256(bytearray(data)) == expected
    assert sha256(memoryview(data)) == expected


def test_different_inputs_differ():
    assert sha256(b"a") != sha256(b"b")
    assert sha256(b"a") == sha256(b"a")