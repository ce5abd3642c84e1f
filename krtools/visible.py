"""Show arbitrary input with non-ASCII bytes escaped and long lines folded at blanks."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_LINE_LEN = 80
OFFSET = 10
_BLANKS = (ord(" "), ord("\t"))


def parse_args(argv: Sequence[str]) -> bool:
    """Return ``True`` for octal (``-o``) and ``False`` for hex (``-x``)."""
    if len(argv) == 1:
        if argv[0] == "-o":
            return True
        if argv[0] == "-x":
            return False
    raise ValueError("expected exactly one of -o or -x")


def make_visible(data: bytes, octal: bool) -> str:
    """Render ``data`` with newlines as spaces and bytes above 127 escaped."""
    out: list[str] = []
    column = 1
    for c in data:
        if c <= 127:
            if c == ord("\n"):
                c = ord(" ")
            out.append(chr(c))
            column += 1
        else:
            escaped = f"\\{c:o}" if octal else f"\\{c:x}"
            out.append(escaped)
            column += len(escaped) - 1
        if column >= MAX_LINE_LEN - OFFSET and c in _BLANKS:
            column = 1
            out.append("\n")
    out.append("\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print stdin in visible form; takes ``-o`` or ``-x``."""
    args = sys.argv[1:] if argv is None else argv
    try:
        octal = parse_args(args)
    except ValueError:
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(make_visible(sys.stdin.buffer.read(), octal))
    return 0