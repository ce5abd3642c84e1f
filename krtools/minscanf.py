"""A small scanf reading successive conversions from one input text."""

from __future__ import annotations

import re
import struct
import sys
from collections.abc import Callable, Sequence
from typing import Any

_UINT_MASK = 0xFFFFFFFF

_SPACE = re.compile(r"[ \t\n\v\f\r]*")
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_AUTO = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_OCTAL = re.compile(r"[+-]?[0-7]+")
_HEX = re.compile(r"[+-]?(?:0[xX])?[0-9a-fA-F]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_NONSPACE = re.compile(r"[^ \t\n\v\f\r]+")


def _auto_base(token: str) -> int:
    sign = -1 if token.startswith("-") else 1
    body = token.lstrip("+-")
    if body[:2].lower() == "0x":
        return sign * int(body, 16)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body, 8)
    return sign * int(body)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class InputScanner:
    """Reads values from a text; each conversion continues where the last stopped."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _token(self, pattern: re.Pattern[str]) -> str | None:
        self._pos = _SPACE.match(self._text, self._pos).end()
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def _number(self, pattern: re.Pattern[str], convert: Callable[[str], Any]) -> Any:
        token = self._token(pattern)
        return None if token is None else convert(token)

    def _char(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def _convert(self, conv: str) -> Any:
        if conv == "d":
            return self._number(_DECIMAL, int)
        if conv == "i":
            return self._number(_AUTO, _auto_base)
        if conv == "o":
            return self._number(_OCTAL, lambda t: int(t, 8))
        if conv == "u":
            return self._number(_DECIMAL, lambda t: int(t) & _UINT_MASK)
        if conv == "x":
            return self._number(_HEX, lambda t: int(t, 16))
        if conv == "c":
            return self._char()
        if conv == "s":
            return self._token(_NONSPACE)
        return self._number(_FLOAT, lambda t: _to_float32(float(t)))

    def scan(self, fmt: str) -> list[Any]:
        """Return one value per conversion in ``fmt``; ``None`` where input did not match.

        Supports d, i, o, u, x, c, s, e, f and g; other characters are ignored.
        """
        values: list[Any] = []
        chars = iter(fmt)
        for ch in chars:
            if ch != "%":
                continue
            conv = next(chars, None)
            if conv is None:
                break
            if conv in "diouxcsefg":
                values.append(self._convert(conv))
        return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read one value of each kind from stdin and print them back."""
    scanner = InputScanner(sys.stdin.read())

    def one(fmt: str, default: Any) -> Any:
        value = scanner.scan(fmt)[0]
        return default if value is None else value

    decimal = one("%d", 0)
    integer = one("%i", 0)
    octal = one("%o", 0)
    unsigned = one("%u", 0)
    hexadecimal = one("%x", 0)
    character = one("%c", "")
    word = one("%s", "")
    number = one("%f", 0.0)

    print(f"decimal: {decimal}")
    print(f"integer: {integer}")
    print(f"octal: {octal & _UINT_MASK:o}")
    print(f"unsigned_decimal: {unsigned & _UINT_MASK}")
    print(f"hexadecimal_integer: {hexadecimal & _UINT_MASK:x}")
    print(f"character: {character}")
    print(f"str: {word}")
    print("float_point_number: %f" % number)
    return 0