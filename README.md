# cipherkit

Base64 encoding and DES encryption from the command line or from Python.

It provides:

- a Base64 encoder that wraps output at 64 characters per line, and a
  decoder that accepts input broken up by spaces and newlines;
- the DES block cipher in four modes: ECB, CBC, CFB and OFB;
- keys given directly in hexadecimal, or derived from a password and an
  8-byte salt with PBKDF2-HMAC-SHA256 (10000 iterations);
- `Salted__` headers on encrypted output, so the password alone is enough
  to decrypt;
- optional Base64 armour for encrypted output.

The package needs nothing outside the standard library. It does its own
SHA-256, HMAC, PBKDF2 and DES work.

DES is a 56-bit cipher and is not safe for protecting real data. Use this
package to learn how it works or to handle existing DES data.

## Installation

```
pip install .
```

## Command line

The `cipherkit` command takes a subcommand and its flags. Input comes from
a file given with `-i`, or else from standard input. If standard input is
empty, nothing is written and the command exits with status 0. Output goes
to the file given with `-o`, or else to standard output.

### base64

```
cipherkit base64 -e -i message.txt
cipherkit base64 -d -i message.b64 -o message.txt
echo "hello" | cipherkit base64
```

| Flag        | Meaning                    |
|-------------|----------------------------|
| `-h`        | print help and exit        |
| `-d`        | decode                     |
| `-e`        | encode (default)           |
| `-i <file>` | input file                 |
| `-o <file>` | output file                |

Encoded output always ends with a newline. Decoding removes spaces and
newlines first, then fails if any of these hold:

- the length is not a multiple of four;
- there are characters outside the Base64 alphabet;
- `=` appears anywhere but the last two positions;
- the second-to-last character is `=` but the last is not.

Giving both `-d` and `-e`, or any extra positional argument, is an error.

### des, des-ecb, des-cbc, des-cfb, des-ofb

`des` is the same as `des-cbc`.

```
cipherkit des-cbc -a -p password -v 0011223344556677 -i plain.txt -o cipher.b64
cipherkit des-cbc -d -a -p password -v 0011223344556677 -i cipher.b64
cipherkit des-ecb -k 0123456789ABCDEF -i plain.txt -o cipher.bin
```

| Flag         | Meaning                                        |
|--------------|------------------------------------------------|
| `-h`         | print help and exit                            |
| `-a`         | Base64-encode output, or decode input          |
| `-d`         | decrypt                                        |
| `-e`         | encrypt (default)                              |
| `-i <file>`  | input file                                     |
| `-k <key>`   | key in hexadecimal                             |
| `-o <file>`  | output file                                    |
| `-p <pass>`  | password in printable ASCII                    |
| `-s <salt>`  | salt in hexadecimal                            |
| `-v <iv>`    | initialization vector in hexadecimal           |

Notes:

- CBC, CFB and OFB need an initialization vector (`-v`). ECB does not.
- A key, salt or IV that is not hexadecimal is an error. One shorter than
  16 hex digits is padded with zeros, and one longer is cut to 16 digits.
  Either case prints a warning on standard error.
- A key given with `-k` takes precedence over a password.
- If you give neither `-k` nor `-p`, the command asks for a password twice
  without echoing it. If the two entries differ, it stops with an error.
- When the key comes from a password and no salt is given, a random salt
  is made. It is written in front of the ciphertext after `Salted__`. On
  decryption, a `Salted__` header supplies the salt.
- ECB and CBC use PKCS#7 padding. Their ciphertext must be a positive
  multiple of 8 bytes to decrypt. CFB and OFB are not padded, and their
  output is the same length as their input.
- Without `-a`, decrypting input that looks like Base64 is refused. This
  stops you decrypting the armour by mistake.

## Python API

```python
from cipherkit import base64codec
from cipherkit.sha256 import sha256
from cipherkit.pbkdf2 import derive_key, hmac_sha256
from cipherkit.modes import Mode, encrypt, decrypt

text = base64codec.encode(b"hello world")      # "aGVsbG8gd29ybGQ=\n"
assert base64codec.decode(text) == b"hello world"

digest = sha256(b"abc")                        # 32 raw bytes
mac = hmac_sha256(b"secret", b"message")      # 32 raw bytes

password = b"password"
salt = bytes.fromhex("0102030405060708")
derived = derive_key(password, salt, 10000, 8)

mode = Mode.from_command("des-cbc")
iv = bytes.fromhex("0011223344556677")
ciphertext = encrypt(mode, derived, b"attack at dawn", iv)
assert decrypt(mode, derived, ciphertext, iv) == b"attack at dawn"
```

Modules:

- `cipherkit.base64codec`: `encode`, `decode`, `strip_whitespace` and
  `is_valid_encoding`.
- `cipherkit.sha256`: `sha256`.
- `cipherkit.pbkdf2`: `hmac_sha256` and `derive_key`.
- `cipherkit.hexkey`: `validate_hex` returns the string in upper case and
  issues a `HexLengthWarning` when it is not 16 digits long.
  `validate_ascii` checks for printable ASCII. `hex_to_block` turns up to
  16 hex digits into 8 bytes, padding with zero bits.
- `cipherkit.des`: the `DES` class with `encrypt_block` and
  `decrypt_block`, plus `pkcs7_pad`, `pkcs7_unpad` and the bit-level
  `permute` helper.
- `cipherkit.modes`: `Mode` (with `from_command`), `encrypt` and `decrypt`.
- `cipherkit.envelope`: `encrypt` and `decrypt` driven by an
  `EncryptOptions` value. Its fields are `mode`, `key`, `password`, `salt`,
  `iv`, `base64` and `iterations`. They handle password keys, the
  `Salted__` header and Base64 armour. `generate_salt` returns a random
  8-byte salt.
- `cipherkit.cli`: `main`, `run_base64` and `run_cipher`. The last two
  accept their own input and output streams and a password-reading
  function, and return an exit status.

## Errors

Errors are raised as exceptions:

- `base64codec.Base64Error` for badly formed Base64.
- `hexkey.HexStringError` for keys, salts or IVs that are not hexadecimal,
  and for passwords that are not printable ASCII.
- `modes.ModeError` for:
  - an unknown command;
  - a missing or wrongly sized IV or key;
  - ciphertext that is not a positive multiple of 8 bytes;
  - padding longer than the data.
- `envelope.EncryptError` for:
  - a missing IV;
  - no key and no password;
  - bad Base64 armour;
  - Base64-looking input without the `base64` option;
  - a truncated salt header;
  - any mode error during encryption or decryption.

On the command line, the message goes to standard error and the exit status
is 1.

## What it does not do

`cipherkit` offers only the `base64` and DES cipher commands. It has no
message-digest commands: SHA-256 is available from Python, but not as a
command. It has no public-key (RSA) key generation or encryption, and no
ciphers other than single DES.

## Running the tests

```
pip install .[test]
pytest
```