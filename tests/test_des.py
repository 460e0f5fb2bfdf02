import os

import pytest

from cipherkit.des import DES, permute, pkcs7_pad, pkcs7_unpad


def test_classic_worked_example():
    cipher = DES(bytes.fromhex("133457799BBCDFF1"))
    assert cipher.encrypt_block(bytes.fromhex("0123456789ABCDEF")) == bytes.fromhex(
        "85E813540F0AB405"
    )


def test_known_vector_to_zero_block():
    cipher = DES(bytes.fromhex("0E329232EA6D0D73"))
    assert cipher.encrypt_block(bytes.fromhex("8787878787878787")) == bytes(8)


def test_decrypt_classic_worked_example():
    cipher = DES(bytes.fromhex("133457799BBCDFF1"))
    ciphertext = cipher.encrypt_block(bytes.fromhex("0123456789ABCDEF"))
    assert cipher.decrypt_block(ciphertext) == bytes.fromhex("0123456789ABCDEF")


@pytest.mark.parametrize("seed", range(5))
def test_round_trip_random_blocks(seed):
    key = bytes((seed * 37 + i * 11) & 0xFF for i in range(8))
    block = bytes((seed * 53 + i * 7) & 0xFF for i in range(8))
    cipher = DES(key)
    encrypted = cipher.encrypt_block(block)
    assert len(encrypted) == 8
    assert cipher.decrypt_block(encrypted) == block


def test_different_keys_give_different_ciphertexts():
    block = b"ABCDEFGH"
    first = DES(b"\x01" * 8).encrypt_block(block)
    second = DES(b"\x02" * 8 + b"").encrypt_block(block)
    assert first != second
    assert DES(b"\x01" * 8).decrypt_block(first) == block


def test_invalid_key_length():
    with pytest.raises(ValueError):
        DES(b"short")


def test_invalid_block_length():
    cipher = DES(bytes(8))
    with pytest.raises(ValueError):
        cipher.encrypt_block(b"toolongblock")


def test_permute_identity():
    data = b"\x12\x34\x56\x78"
    assert permute(data, range(1, 33)) == data


def test_permute_reverse_is_involution():
    data = os.urandom(8)
    table = list(range(64, 0, -1))
    assert permute(permute(data, table), table) == data


def test_permute_selects_bits():
    assert permute(b"\x80", [1, 1, 2, 2]) == b"\xc0"


def test_permute_out_of_range():
    with pytest.raises(ValueError):
        permute(b"\x00", [9])


@pytest.mark.parametrize("length", range(0, 17))
def test_pkcs7_pad_round_trip(length):
    data = bytes(range(length))
    padded = pkcs7_pad(data)
    assert len(padded) % 8 == 0
    assert len(padded) > len(data)
    assert pkcs7_unpad(padded) == data


def test_pkcs7_pad_full_block_when_aligned():
    assert pkcs7_pad(b"12345678") == b"12345678" + b"\x08" * 8


def test_pkcs7_unpad_rejects_empty():
    with pytest.raises(ValueError):
        pkcs7_unpad(b"")


def test_pkcs7_unpad_rejects_oversized_count():
    with pytest.raises(ValueError):
        pkcs7_unpad(b"\x01\x09")