"""Command-line front end for the base64 and DES cipher commands."""

from __future__ import annotations

import contextlib
import getpass
import sys
import warnings
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional, Sequence

from cipherkit import base64codec, envelope
from cipherkit.hexkey import HexLengthWarning, HexStringError, validate_ascii, validate_hex
from cipherkit.modes import Mode, ModeError

PROG = "cipherkit"
CIPHER_COMMANDS = ("des", "des-ecb", "des-cbc", "des-cfb", "des-ofb")

_INVALID_ARGUMENT = "Invalid argument"

BASE64_USAGE = (
    "Usage\n"
    f"  {PROG} <command> [flags] [file]\n\n"
    "Encode options:\n"
    "  command     base64\n"
    "  -h          print help and exit\n"
    "  -d          decode mode\n"
    "  -e          encode mode (default)\n"
    "  -i <file>   input file\n"
    "  -o <file>   output file\n"
)

CIPHER_USAGE = (
    "Usage\n"
    f"  {PROG} <command> [flags] [file]\n\n"
    "Cipher options:\n"
    "  command     des, des-ecb, des-cbc, des-cfb or des-ofb\n"
    "  -h          print help and exit\n"
    "  -a          decode/encode the input/output in base64\n"
    "  -d          decrypt mode\n"
    "  -e          encrypt mode (default)\n"
    "  -i <file>   input file\n"
    "  -k <key>    key in hexadecimal\n"
    "  -o <file>   output file\n"
    "  -p          password in ASCII\n"
    "  -s <salt>   salt in hexadecimal\n"
    "  -v          initialization vector in hexadecimal\n"
)


class _Failure(Exception):
    """A fatal error reported on stderr with exit status 1."""


class _HelpRequested(Exception):
    """The help flag was given."""


def _report(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _getopt(args: Sequence[str], spec: str) -> tuple[list[tuple[str, Optional[str]]], list[str]]:
    """Split ``args`` into options and positionals, getopt style.

    Unknown options and options missing their argument are reported on
    stderr and skipped; positionals may appear anywhere.
    """
    flags = {
        char: spec[index + 1:index + 2] == ":"
        for index, char in enumerate(spec)
        if char != ":"
    }
    options: list[tuple[str, Optional[str]]] = []
    positionals: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if arg == "--":
            positionals.extend(remaining)
            break
        if not arg.startswith("-") or arg == "-":
            positionals.append(arg)
            continue
        letters = arg[1:]
        for pos, letter in enumerate(letters):
            if letter not in flags:
                print(f"{PROG}: invalid option -- '{letter}'", file=sys.stderr)
                continue
            if not flags[letter]:
                options.append((letter, None))
                continue
            value = letters[pos + 1:] or next(remaining, None)
            if value is None:
                print(f"{PROG}: option requires an argument -- '{letter}'", file=sys.stderr)
            else:
                options.append((letter, value))
            break
    return options, positionals


def _open_output(path: str, stack: contextlib.ExitStack) -> BinaryIO:
    try:
        return stack.enter_context(open(path, "wb"))
    except OSError as exc:
        raise _Failure(f"{path}: {exc.strerror}") from None


def _read_input(path: Optional[str], stdin: BinaryIO) -> Optional[bytes]:
    """Read the whole input; None means standard input gave nothing."""
    if path is not None:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise _Failure(f"{path}: {exc.strerror}") from None
    try:
        data = stdin.read()
    except OSError:
        raise _Failure("Error reading from pipe") from None
    return data or None


def _streams(stdin: Optional[BinaryIO], stdout: Optional[BinaryIO]) -> tuple[BinaryIO, BinaryIO]:
    return (
        stdin if stdin is not None else sys.stdin.buffer,
        stdout if stdout is not None else sys.stdout.buffer,
    )


@dataclass
class _Base64Settings:
    decode: bool = False
    encode: bool = False
    input_path: Optional[str] = None
    output: Optional[BinaryIO] = None


def _parse_base64(argv: Sequence[str], stack: contextlib.ExitStack) -> _Base64Settings:
    settings = _Base64Settings()
    options, positionals = _getopt(argv, "hdei:o:")
    for flag, value in options:
        if flag == "h":
            raise _HelpRequested
        if flag == "d":
            settings.decode = True
        elif flag == "e":
            settings.encode = True
        elif flag == "i" and settings.input_path is None:
            settings.input_path = value
        elif flag == "o" and settings.output is None:
            settings.output = _open_output(value, stack)
    if settings.decode and settings.encode:
        raise _Failure(f"Cannot use both -d and -e flags: {_INVALID_ARGUMENT}")
    if positionals:
        raise _Failure(f"Not recognized option: {_INVALID_ARGUMENT}")
    return settings


def run_base64(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Run the base64 command and return its exit status."""
    stdin, stdout = _streams(stdin, stdout)
    try:
        with contextlib.ExitStack() as stack:
            settings = _parse_base64(list(argv or ()), stack)
            data = _read_input(settings.input_path, stdin)
            if data is None:
                return 0
            target = settings.output or stdout
            if settings.decode:
                target.write(base64codec.decode(data))
            else:
                target.write(base64codec.encode(data).encode("ascii"))
            target.flush()
    except _HelpRequested:
        stdout.write(BASE64_USAGE.encode())
        stdout.flush()
        return 0
    except (_Failure, base64codec.Base64Error) as exc:
        return _report(str(exc))
    return 0


@dataclass
class _CipherSettings:
    decrypt: bool = False
    encrypt: bool = False
    base64: bool = False
    input_path: Optional[str] = None
    output: Optional[BinaryIO] = None
    key: Optional[str] = None
    password: Optional[str] = None
    salt: Optional[str] = None
    iv: Optional[str] = None


def _checked_hex(value: str) -> str:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", HexLengthWarning)
        try:
            result = validate_hex(value)
        except HexStringError as exc:
            raise _Failure(str(exc)) from None
    for warning in caught:
        print(f"Warning: {warning.message}", file=sys.stderr)
    return result


def _checked_ascii(value: str) -> str:
    try:
        return validate_ascii(value)
    except HexStringError as exc:
        raise _Failure(str(exc)) from None


def _parse_cipher(argv: Sequence[str], stack: contextlib.ExitStack) -> _CipherSettings:
    settings = _CipherSettings()
    options, positionals = _getopt(argv, "hadei:k:o:p:s:v:")
    for flag, value in options:
        if flag == "h":
            raise _HelpRequested
        if flag == "a":
            settings.base64 = True
        elif flag == "d":
            settings.decrypt = True
        elif flag == "e":
            settings.encrypt = True
        elif flag == "i" and settings.input_path is None:
            settings.input_path = value
        elif flag == "k" and settings.key is None:
            settings.key = _checked_hex(value)
        elif flag == "o" and settings.output is None:
            settings.output = _open_output(value, stack)
        elif flag == "p" and settings.password is None:
            settings.password = _checked_ascii(value)
        elif flag == "s" and settings.salt is None:
            settings.salt = _checked_hex(value)
        elif flag == "v" and settings.iv is None:
            settings.iv = _checked_hex(value)
    if settings.decrypt and settings.encrypt:
        raise _Failure(f"Cannot use both -d and -e flag: {_INVALID_ARGUMENT}")
    if positionals:
        raise _Failure(f"Not recognized option: {_INVALID_ARGUMENT}")
    return settings


def _ask_password(read_password: Callable[[str], str]) -> str:
    try:
        first = read_password("enter encryption password:")
        second = read_password("Verifying - enter encryption password:")
    except (OSError, EOFError) as exc:
        raise _Failure(f"readpassphrase: {exc}") from None
    if first != second:
        raise _Failure(f"Password verification error: {_INVALID_ARGUMENT}")
    return first


def run_cipher(
    command: str,
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    read_password: Optional[Callable[[str], str]] = None,
) -> int:
    """Run a DES cipher command and return its exit status."""
    stdin, stdout = _streams(stdin, stdout)
    ask = read_password if read_password is not None else getpass.getpass
    try:
        mode = Mode.from_command(command)
    except ModeError as exc:
        return _report(str(exc))
    try:
        with contextlib.ExitStack() as stack:
            settings = _parse_cipher(list(argv or ()), stack)
            password = settings.password
            if settings.key is None and password is None:
                password = _ask_password(ask)
            data = _read_input(settings.input_path, stdin)
            if data is None:
                return 0
            options = envelope.EncryptOptions(
                mode=mode,
                key=settings.key,
                password=password,
                salt=settings.salt,
                iv=settings.iv,
                base64=settings.base64,
            )
            operation = envelope.decrypt if settings.decrypt else envelope.encrypt
            target = settings.output or stdout
            target.write(operation(data, options))
            target.flush()
    except _HelpRequested:
        stdout.write(CIPHER_USAGE.encode())
        stdout.flush()
        return 0
    except (_Failure, envelope.EncryptError) as exc:
        return _report(str(exc))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Dispatch to the command named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _report(f"usage: {PROG} command [flags] [file]")
    command, rest = args[0], args[1:]
    if command == "base64":
        return run_base64(rest)
    if command in CIPHER_COMMANDS:
        return run_cipher(command, rest)
    return _report(f"{PROG}: Error: '{command}' is an invalid command.")


if __name__ == "__main__":
    raise SystemExit(main())