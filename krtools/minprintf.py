"""A small printf supporting the common conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Any

_UINT_MASK = 0xFFFFFFFF


def _int32(value: Any) -> int:
    return ((int(value) + 2**31) & _UINT_MASK) - 2**31


def _uint32(value: Any) -> int:
    return int(value) & _UINT_MASK


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough arguments for format") from None


def _pointer(value: Any) -> str:
    return "(nil)" if not value else f"0x{int(value):x}"


def minprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supports d, i, o, x, X, u, c, s, f, e, E, g, G and p; any other character
    after ``%`` is output as is.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        if conv in ("d", "i"):
            out.append(str(_int32(_take(values))))
        elif conv == "o":
            out.append(f"{_uint32(_take(values)):o}")
        elif conv in ("x", "X"):
            out.append(f"{_uint32(_take(values)):x}")
        elif conv == "u":
            out.append(str(_uint32(_take(values))))
        elif conv == "c":
            out.append(chr(int(_take(values)) & 0xFF))
        elif conv == "s":
            out.append(str(_take(values)))
        elif conv == "f":
            out.append("%f" % float(_take(values)))
        elif conv in ("e", "E"):
            out.append("%e" % float(_take(values)))
        elif conv in ("g", "G"):
            out.append("%g" % float(_take(values)))
        elif conv == "p":
            out.append(_pointer(_take(values)))
        else:
            out.append(conv)
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a line exercising every supported conversion."""
    marker: list[int] = []
    sys.stdout.write(
        minprintf(
            "Let's print %d, %i, %o, %x, %X, %u, %c, %e, %E, %g, %G, %f, %p, and %s.\n",
            2, 3, 8, 16, 16, -1, 97, 0.0025, 0.0023, 0.0025, 0.0023, 3.14159,
            id(marker), "hello, world",
        )
    )
    return 0