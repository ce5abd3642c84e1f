"""Group variable names declared in C code by a common prefix."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from krtools.scanner import MAX_WORD_LEN, CharStream, is_alpha

DATA_TYPES = frozenset({"char", "double", "float", "int", "long", "short", "void"})
DEFAULT_PREFIX_LEN = 6


def parse_args(argv: Sequence[str]) -> int:
    """Return the prefix length from the arguments after the program name."""
    if len(argv) > 1:
        raise ValueError("too many arguments")
    if not argv:
        return DEFAULT_PREFIX_LEN
    arg = argv[0]
    if not arg[:1].isdigit():
        raise ValueError(f"not a number: {arg!r}")
    digits = ""
    for ch in arg:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits)


def group_variables(text: str, prefix_len: int) -> list[list[str]]:
    """Return groups of declared names sharing their first ``prefix_len`` characters.

    Groups appear in the order they were first seen; each is sorted and unique.
    """
    groups: list[tuple[str, set[str]]] = []

    def add(word: str) -> None:
        for first, members in groups:
            if first[:prefix_len] == word[:prefix_len]:
                members.add(word)
                return
        groups.append((word, {word}))

    stream = CharStream(text)

    def next_word() -> str | None:
        return stream.read_code_word(MAX_WORD_LEN)

    while (word := next_word()) is not None:
        if word not in DATA_TYPES:
            continue
        while True:
            name = next_word()
            if name is not None and (is_alpha(name[0]) or name[0] == "_"):
                add(name)
            if next_word() != ",":
                break

    return [sorted(members) for _, members in groups]


def format_groups(groups: Sequence[Sequence[str]]) -> str:
    """One name per line, each group followed by a blank line."""
    return "".join("".join(f"{w}\n" for w in group) + "\n" for group in groups)


def main(argv: Sequence[str] | None = None) -> int:
    """Read C code on stdin and print its variable names grouped by prefix."""
    args = sys.argv[1:] if argv is None else argv
    try:
        prefix_len = parse_args(args)
    except ValueError:
        print("Error: invalid arguments.")
        return 1
    sys.stdout.write(format_groups(group_variables(sys.stdin.read(), prefix_len)))
    return 0