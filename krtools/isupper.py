"""Two ways of testing whether a character is an upper-case letter."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence


def is_upper_v1(c: str) -> bool:
    """Test by comparing against the letter range."""
    return "A" <= c <= "Z" and len(c) == 1


def is_upper_v2(c: str) -> bool:
    """Test by looking the character up in the alphabet."""
    return len(c) == 1 and c in string.ascii_uppercase


def main(argv: Sequence[str] | None = None) -> int:
    """Classify the letter 'c' with both tests."""
    for name, test in (("is_upper_v1", is_upper_v1), ("is_upper_v2", is_upper_v2)):
        kind = "uppercase" if test("c") else "lowercase"
        print(f"{name}: This letter is {kind}.")
    return 0