"""Print files with numbered lines and a heading at the top of each page."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

MAX_LINE_LEN = 1000
LINES_PER_PAGE = 10
PROGRAM = "print"


def _pieces(lines: Iterable[str]) -> Iterator[str]:
    limit = MAX_LINE_LEN - 1
    for line in lines:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def paginate(name: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield page headings and numbered lines for the file called ``name``."""
    for number, line in enumerate(_pieces(lines), start=1):
        if (number - 1) % LINES_PER_PAGE == 0:
            yield f"[{name}]: page {number // LINES_PER_PAGE + 1}\n"
        yield f"{number}: {line}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print every named file, separated by blank lines."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(f"Usage: {PROGRAM} [FILE]...", file=sys.stderr)
        return 1
    for index, path in enumerate(args):
        try:
            handle = open(path, newline="")
        except OSError:
            print(f"{PROGRAM}: can't open {path}.", file=sys.stderr)
            return 1
        with handle:
            sys.stdout.writelines(paginate(path, handle))
        if index < len(args) - 1:
            sys.stdout.write("\n")
    return 0