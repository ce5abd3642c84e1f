"""A chained hash table of names and their definitions."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

HASH_SIZE = 101
_WORD_MASK = (1 << 64) - 1


def hash_name(name: str) -> int:
    """Hash a name into a bucket index in ``range(HASH_SIZE)``."""
    value = 0
    for byte in name.encode():
        signed = byte - 256 if byte > 127 else byte
        value = (signed + 31 * value) & _WORD_MASK
    return value % HASH_SIZE


@dataclass
class Entry:
    """A name and its replacement text."""

    name: str
    definition: str


class SymbolTable:
    """Names mapped to definitions, kept in hash buckets with newest entries first."""

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(HASH_SIZE)]

    def install(self, name: str, definition: str) -> Entry:
        """Define ``name``, replacing any earlier definition."""
        entry = self.lookup(name)
        if entry is None:
            entry = Entry(name, definition)
            self._buckets[hash_name(name)].insert(0, entry)
        else:
            entry.definition = definition
        return entry

    def lookup(self, name: str) -> Entry | None:
        """Return the entry for ``name``, or ``None`` if it is not defined."""
        return next((e for e in self._buckets[hash_name(name)] if e.name == name), None)

    def undef(self, name: str) -> bool:
        """Remove ``name``; return whether it was defined."""
        bucket = self._buckets[hash_name(name)]
        for entry in bucket:
            if entry.name == name:
                bucket.remove(entry)
                return True
        return False

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None


def main(argv: Sequence[str] | None = None) -> int:
    """Install colliding names, then look one up and remove it again."""
    table = SymbolTable()
    table.install("TEST", "test")
    for number, name in enumerate(("TSHe", "UPXD", "9iww", "mY1a", "uuoT"), start=1):
        table.install(name, f"test{number}")

    entry = table.lookup("TEST")
    if entry is None:
        print("Error: hash value not found.")
    else:
        print(f"{entry.name}: {entry.definition}")
        if table.undef("TEST") and table.lookup("TEST") is None:
            print("'TEST' was undefined successfully.")
        else:
            print("Error: failed to undefine 'TEST'.")
    return 0