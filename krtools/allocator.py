"""A first-fit free-list storage allocator working inside a simulated heap."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NamedTuple

HEADER_SIZE = 16
MIN_NR_OF_UNITS = 1024
UINT_MAX = 0xFFFFFFFF
MAX_HEAP_UNITS = 1 << 20

_BASE = 0


class FreeBlock(NamedTuple):
    """A block on the free list: its data address and its size in header units."""

    address: int
    units: int


class Allocator:
    """Blocks measured in header-sized units, kept on a circular list ordered by address.

    Addresses are byte offsets into the simulated heap. Unit 0 is the empty
    list head; the heap grows upwards from unit 1. Block headers are kept
    beside the heap bytes, so data written to a block never disturbs them.
    """

    def __init__(self) -> None:
        self.max_units = MAX_HEAP_UNITS
        self._next: dict[int, int] = {}
        self._size: dict[int, int] = {}
        self._allocated: dict[int, int] = {}
        self._free: int | None = None
        self._top = 1
        # One spare unit past the top keeps writes into the last block in bounds.
        self._memory = bytearray((self._top + 1) * HEADER_SIZE)

    def _ensure_base(self) -> None:
        if self._free is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._free = _BASE

    def _grow(self, units: int) -> int:
        if self._top + units > self.max_units:
            raise MemoryError(f"cannot grow the heap by {units} units")
        start = self._top
        self._top += units
        self._memory.extend(bytes(units * HEADER_SIZE))
        return start

    def _release(self, block: int) -> None:
        self._ensure_base()
        nxt, size = self._next, self._size
        p = self._free
        assert p is not None
        while not (p < block < nxt[p]):
            if p >= nxt[p] and (block > p or block < nxt[p]):
                break
            p = nxt[p]

        if block + size[block] == nxt[p]:
            size[block] += size[nxt[p]]
            nxt[block] = nxt[nxt[p]]
        else:
            nxt[block] = nxt[p]

        if p + size[p] == block:
            size[p] += size[block]
            nxt[p] = nxt[block]
        else:
            nxt[p] = block

        self._free = p

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the block's address.

        Raises ``ValueError`` for a size of zero or one that is too large, and
        ``MemoryError`` when the heap cannot grow.
        """
        if nbytes <= 0 or nbytes >= UINT_MAX - MIN_NR_OF_UNITS:
            raise ValueError(f"invalid size {nbytes}")
        # The unit count does not include the header; a block may spill into
        # the following header unit, which lies outside the stored headers.
        units = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE

        self._ensure_base()
        prev = self._free
        assert prev is not None
        p = self._next[prev]
        while True:
            if self._size[p] >= units:
                if self._size[p] == units:
                    self._next[prev] = self._next[p]
                else:
                    self._size[p] -= units
                    p += self._size[p]
                    self._size[p] = units
                self._free = prev
                self._allocated[p] = nbytes
                return (p + 1) * HEADER_SIZE
            if p == self._free:
                p = self.morecore(units)
            prev, p = p, self._next[p]

    def calloc(self, count: int, size: int) -> int:
        """Allocate ``count * size`` zeroed bytes and return the address."""
        nbytes = count * size
        address = self.malloc(nbytes)
        self._memory[address:address + nbytes] = bytes(nbytes)
        return address

    def free(self, address: int) -> None:
        """Return the block at ``address`` to the free list."""
        block, rem = divmod(address, HEADER_SIZE)
        block -= 1
        if rem or block not in self._allocated:
            raise ValueError(f"not an allocated block: {address}")
        size = self._size[block]
        if size == 0 or size == UINT_MAX - MIN_NR_OF_UNITS:
            raise ValueError(f"invalid block size {size}")
        del self._allocated[block]
        self._release(block)

    def bfree(self, size: int) -> None:
        """Hand an extra region of ``size`` bytes to the free list."""
        if size < MIN_NR_OF_UNITS:
            raise ValueError(f"block must be at least of size {MIN_NR_OF_UNITS}")
        units = size // HEADER_SIZE
        block = self._grow(units)
        self._size[block] = units - 1
        self._release(block)

    def morecore(self, units: int) -> int:
        """Grow the heap by at least ``units`` units and free the new region."""
        units = max(units, MIN_NR_OF_UNITS)
        block = self._grow(units)
        self._size[block] = units
        self._release(block)
        assert self._free is not None
        return self._free

    def _check_range(self, address: int, length: int) -> None:
        if length < 0:
            raise ValueError(f"negative length {length}")
        for block, nbytes in self._allocated.items():
            start = (block + 1) * HEADER_SIZE
            if start <= address and address + length <= start + nbytes:
                return
        raise ValueError(f"range {address}+{length} is not inside an allocated block")

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes of an allocated block starting at ``address``."""
        self._check_range(address, length)
        return bytes(self._memory[address:address + length])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` in an allocated block starting at ``address``."""
        self._check_range(address, len(data))
        self._memory[address:address + len(data)] = data

    def free_blocks(self) -> list[FreeBlock]:
        """The free blocks in address order."""
        if self._free is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append(FreeBlock((p + 1) * HEADER_SIZE, self._size[p]))
            p = self._next[p]
        return blocks


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode()


def main(argv: Sequence[str] | None = None) -> int:
    """Allocate, fill, print and free two strings, then donate an extra block."""
    heap = Allocator()
    for label, allocate in (
        ("malloc", lambda: heap.malloc(27)),
        ("calloc", lambda: heap.calloc(27, 1)),
    ):
        try:
            address = allocate()
        except (ValueError, MemoryError):
            print(f"Error: {label} faild to allocate the requrested memory.")
            return 1
        text = f"Content from {label} here."
        heap.write(address, text.encode() + b"\0")
        print(_c_string(heap.read(address, len(text) + 1)))
        heap.free(address)
    heap.bfree(1024)
    return 0