"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import BinaryIO

BUFFER_SIZE = 1024


def copy_stream(source: BinaryIO, target: BinaryIO) -> int:
    """Copy ``source`` to ``target`` in fixed-size chunks; return the bytes copied."""
    total = 0
    while chunk := source.read(BUFFER_SIZE):
        target.write(chunk)
        total += len(chunk)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Copy the named files, or stdin when none are named, to stdout."""
    args = sys.argv[1:] if argv is None else argv
    out = sys.stdout.buffer
    if not args:
        copy_stream(sys.stdin.buffer, out)
        out.flush()
        return 0
    for path in args:
        try:
            handle = open(path, "rb")
        except OSError:
            out.flush()
            print(f"Error: Error: could not open the file {path}.", file=sys.stderr)
            return 1
        with handle:
            copy_stream(handle, out)
    out.flush()
    return 0