"""Print the words of a text ordered by how often they occur."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence

from krtools.scanner import is_alpha, iter_words

MAX_NR_OF_NODES = 1000


def _quick_sort(items: list[tuple[str, int]], start: int, end: int) -> None:
    # Same partitioning as the classic in-place quicksort, so ties land where they always did.
    if start >= end:
        return
    mid = (start + end) // 2
    items[start], items[mid] = items[mid], items[start]
    last = start
    for i in range(start + 1, end + 1):
        if items[i][1] > items[start][1]:
            last += 1
            items[last], items[i] = items[i], items[last]
    items[start], items[last] = items[last], items[start]
    _quick_sort(items, start, last - 1)
    _quick_sort(items, last + 1, end)


def word_frequencies(text: str) -> list[tuple[str, int]]:
    """Return ``(word, count)`` pairs, most frequent first.

    Only the first thousand distinct words in alphabetical order are kept.
    """
    counts = Counter(word for word in iter_words(text) if is_alpha(word[0]))
    pairs = sorted(counts.items())[:MAX_NR_OF_NODES]
    _quick_sort(pairs, 0, len(pairs) - 1)
    return pairs


def format_frequencies(pairs: Sequence[tuple[str, int]]) -> str:
    """Render each pair as a right-aligned count and the word."""
    return "".join(f"{count:4d} {word}\n" for word, count in pairs)


def main(argv: Sequence[str] | None = None) -> int:
    """Read text on stdin and print its word frequencies."""
    sys.stdout.write(format_frequencies(word_frequencies(sys.stdin.read())))
    return 0