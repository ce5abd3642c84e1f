"""Count the C keywords that occur in source code, ignoring comments and literals."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence

from krtools.scanner import is_alpha, iter_words

KEYWORDS = (
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if", "int",
    "long", "register", "return", "short", "signed", "size_t", "sizeof",
    "static", "struct", "switch", "typedef", "union", "unsigned", "void",
    "volatile", "while",
)


def count_keywords(text: str) -> dict[str, int]:
    """Return the non-zero keyword counts, in keyword-table order."""
    counts = dict.fromkeys(KEYWORDS, 0)
    for word in iter_words(text, code=True):
        if is_alpha(word[0]) and word in counts:
            counts[word] += 1
    return {word: n for word, n in counts.items() if n}


def format_counts(counts: Mapping[str, int]) -> str:
    """Render counts one per line as a right-aligned number and the keyword."""
    return "".join(f"{n:4d} {word}\n" for word, n in counts.items())


def main(argv: Sequence[str] | None = None) -> int:
    """Read source code on stdin and print its keyword counts."""
    sys.stdout.write(format_counts(count_keywords(sys.stdin.read())))
    return 0