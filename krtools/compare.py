"""Compare two files and print the first pair of lines that differ."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

MAX_LINE_LEN = 1000


def _pieces(lines: Iterable[str]) -> Iterator[str]:
    # Lines longer than the line buffer are read in several pieces.
    limit = MAX_LINE_LEN - 1
    for line in lines:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def first_difference(
    lines_a: Iterable[str], lines_b: Iterable[str]
) -> tuple[int, str, str] | None:
    """Return ``(line_number, line_a, line_b)`` for the first mismatch, or ``None``.

    Comparison stops when either input runs out.
    """
    for number, (a, b) in enumerate(zip(_pieces(lines_a), _pieces(lines_b)), start=1):
        if a != b:
            return number, a, b
    return None


def compare_files(path_a: str, path_b: str) -> str:
    """Return the report for two files; empty when no difference is found."""
    with open(path_a, newline="") as file_a, open(path_b, newline="") as file_b:
        diff = first_difference(file_a, file_b)
    if diff is None:
        return ""
    number, a, b = diff
    return f"{path_a} [{number}]: {a}{path_b} [{number}]: {b}"


def main(argv: Sequence[str] | None = None) -> int:
    """Compare the two files named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Error: invalid arguments.", file=sys.stderr)
        return 1
    try:
        report = compare_files(args[0], args[1])
    except OSError as exc:
        print(f"compare: can't open {exc.filename}.", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0