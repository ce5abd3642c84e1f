"""Print the lines of files that contain, or do not contain, a pattern."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

MAX_LINE_LEN = 1000
PROGRAM = "find"
USAGE = f"Usage: {PROGRAM} [-xn]... PATTERN [FILE]..."


@dataclass
class FindOptions:
    """Parsed command line: the pattern, the files and the flags."""

    pattern: str
    files: list[str] = field(default_factory=list)
    invert: bool = False
    number: bool = False


def _pieces(lines: Iterable[str]) -> Iterator[str]:
    limit = MAX_LINE_LEN - 1
    for line in lines:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def parse_args(argv: Sequence[str]) -> FindOptions:
    """Parse ``[-xn]... PATTERN [FILE]...``; raise ``ValueError`` with the message to show."""
    args = list(argv)
    if len(args) < 2:
        raise ValueError(USAGE)
    invert = number = False
    pos = 0
    while pos < len(args) and args[pos].startswith("-"):
        for option in args[pos][1:]:
            if option == "x":
                invert = True
            elif option == "n":
                number = True
            else:
                raise ValueError(f"{PROGRAM}: illegal option {option}.")
        pos += 1
    if pos >= len(args):
        raise ValueError(USAGE)
    return FindOptions(args[pos], args[pos + 1:], invert, number)


def find_pattern(
    pattern: str, lines: Iterable[str], invert: bool = False, number: bool = False
) -> Iterator[str]:
    """Yield the matching lines (or the others with ``invert``), optionally numbered."""
    for line_number, line in enumerate(_pieces(lines), start=1):
        if (pattern in line) != invert:
            yield f"{line_number}: {line}" if number else line


def main(argv: Sequence[str] | None = None) -> int:
    """Search the named files, or stdin when none are named."""
    args = sys.argv[1:] if argv is None else argv
    try:
        opts = parse_args(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    def search(lines: Iterable[str]) -> None:
        sys.stdout.writelines(find_pattern(opts.pattern, lines, opts.invert, opts.number))

    if not opts.files:
        search(sys.stdin)
        return 0
    for index, path in enumerate(opts.files):
        try:
            handle = open(path, newline="")
        except OSError:
            print(f"{PROGRAM}: can't open {path}.", file=sys.stderr)
            return 1
        with handle:
            print(path)
            search(handle)
        if index < len(opts.files) - 1:
            sys.stdout.write("\n")
    return 0