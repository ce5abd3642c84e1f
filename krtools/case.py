"""Convert input to upper or lower case depending on the name the program runs under."""

from __future__ import annotations

import string
import sys
from collections.abc import Callable, Sequence

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def _lower(text: str) -> str:
    return text.translate(_TO_LOWER)


_CONVERTERS: dict[str, Callable[[str], str]] = {"lower": _lower, "upper": _upper}


def converter_for(program_name: str) -> Callable[[str], str]:
    """Return the ASCII case converter named by ``program_name``."""
    try:
        return _CONVERTERS[program_name]
    except KeyError:
        raise ValueError(f"unknown program name: {program_name!r}") from None


def convert_case(text: str, program_name: str) -> str:
    """Convert the ASCII letters of ``text`` as ``program_name`` dictates."""
    return converter_for(program_name)(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert stdin; ``argv`` is the full argument vector, program name first."""
    args = sys.argv if argv is None else argv
    try:
        convert = converter_for(args[0] if args else "")
    except ValueError:
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(convert(sys.stdin.read()))
    return 0