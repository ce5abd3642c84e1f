"""Cross-reference: list each word of a text with the lines it appears on."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence

from krtools.scanner import is_alpha, iter_words

LINKING_WORDS = frozenset({
    "And", "As", "But", "For", "Like", "Nor", "Or", "So", "The", "Then", "To",
    "Too", "Yet", "and", "as", "but", "for", "like", "nor", "or", "so", "the",
    "then", "to", "too", "yet",
})


def cross_reference(text: str) -> dict[str, list[int]]:
    """Map each word (sorted) to the line numbers of its occurrences."""
    index: dict[str, list[int]] = {}
    line = 1
    for word in iter_words(text):
        if word == "\n":
            line += 1
        elif is_alpha(word[0]) and word not in LINKING_WORDS:
            index.setdefault(word, []).append(line)
    return dict(sorted(index.items()))


def format_xref(index: Mapping[str, Sequence[int]]) -> str:
    """Render ``word: n, m`` lines."""
    return "".join(
        f"{word}: {', '.join(map(str, lines))}\n" for word, lines in index.items()
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read text on stdin and print its cross-reference."""
    sys.stdout.write(format_xref(cross_reference(sys.stdin.read())))
    return 0