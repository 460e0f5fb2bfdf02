import base64

import pytest

from cipherkit.base64codec import (
    Base64Error,
    decode,
    encode,
    is_valid_encoding,
    strip_whitespace,
)


def test_encode_known_word():
    assert encode(b"Man") == "TWFu\n"


def test_encode_empty_is_single_newline():
    assert encode(b"") == "\n"


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 47, 48, 49, 50, 96, 100, 200])
def test_encode_matches_standard_alphabet(size):
    data = bytes((i * 37 + 11) % 256 for i in range(size))
    text = encode(data)
    assert text.replace("\n", "") == base64.b64encode(data).decode()


@pytest.mark.parametrize("size", [10, 48, 49, 100, 300])
def test_encode_lines_are_at_most_64_columns(size):
    data = bytes(range(256))[:size] * 2
    lines = encode(data).split("\n")
    assert all(len(line) <= 64 for line in lines)
    assert all(len(line) == 64 for line in lines[:-2])


def test_encode_exact_line_gets_extra_newline():
    text = encode(b"\x00" * 48)
    assert text.endswith("\n\n")
    assert text.count("\n") == 2


def test_encode_partial_after_full_line_no_extra_newline():
    text = encode(b"\x00" * 49)
    assert not text.endswith("\n\n")
    assert text.count("\n") == 2


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 48, 63, 64, 65, 130])
def test_round_trip(size):
    data = bytes((i * 91 + 3) % 256 for i in range(size))
    assert decode(encode(data)) == data


def test_decode_ignores_spaces_and_newlines():
    encoded = base64.b64encode(b"hello world").decode()
    spaced = " ".join(encoded[:4]) + "\n" + encoded[4:]
    assert decode(spaced) == b"hello world"


def test_decode_accepts_bytes():
    assert decode(b"TWFu") == b"Man"


@pytest.mark.parametrize("text", ["TWE=", "TQ==", "TWFuTQ=="])
def test_decode_padding(text):
    assert decode(text) == base64.b64decode(text)


@pytest.mark.parametrize(
    "text",
    ["TWF", "TW=u", "T===", "TQ=A", "TW!u", "TQ==TWFu", "TWFu\tTWFu"],
)
def test_decode_rejects_bad_messages(text):
    with pytest.raises(Base64Error):
        decode(text)


def test_strip_whitespace_only_removes_space_and_newline():
    assert strip_whitespace(b" a\nb\tc ") == b"ab\tc"


def test_is_valid_encoding_cases():
    assert is_valid_encoding(b"TWFu")
    assert is_valid_encoding(b"")
    assert not is_valid_encoding(b"TWFu=")
    assert not is_valid_encoding(b"TW=u")


def test_base64_error_is_value_error():
    with pytest.raises(ValueError):
        decode("@@@@")