import hashlib
import hmac

import pytest

from cipherkit.pbkdf2 import derive_key, hmac_sha256

SALT = bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF])


def test_hmac_rfc4231_case_two():
    assert hmac_sha256(b"Jefe", b"what do ya want for nothing?").hex() == (
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


@pytest.mark.parametrize("key_size", [0, 1, 32, 63, 64, 65, 200])
def test_hmac_matches_reference(key_size):
    key = bytes((i * 13) % 256 for i in range(key_size))
    message = b"some message to authenticate"
    assert hmac_sha256(key, message) == hmac.new(key, message, hashlib.sha256).digest()


def test_hmac_accepts_str():
    assert hmac_sha256("secret", "text") == hmac.new(
        b"secret", b"text", hashlib.sha256
    ).digest()


@pytest.mark.parametrize("iterations", [1, 2, 50])
def test_derive_key_matches_reference(iterations):
    password = "password"
    expected = hashlib.pbkdf2_hmac("sha256", password.encode(), SALT, iterations, 8)
    assert derive_key(password, SALT, iterations, 8) == expected


@pytest.mark.parametrize("length", [1, 8, 32, 33, 64, 70])
def test_derive_key_lengths(length):
    password = b"password"
    result = derive_key(password, SALT, 3, length)
    assert len(result) == length
    assert result == hashlib.pbkdf2_hmac("sha256", password, SALT, 3, length)


def test_derive_key_long_password():
    password = "password" * 10
    expected = hashlib.pbkdf2_hmac("sha256", password.encode(), SALT, 5, 8)
    assert derive_key(password, SALT, 5, 8) == expected


def test_derive_key_prefix_is_stable():
    password = "password"
    assert derive_key(password, SALT, 4, 40)[:8] == derive_key(password, SALT, 4, 8)


@pytest.mark.parametrize("iterations, length", [(0, 8), (-1, 8), (1, 0)])
def test_derive_key_rejects_bad_parameters(iterations, length):
    password = "password"
    with pytest.raises(ValueError):
        derive_key(password, SALT, iterations, length)