"""A small buffered file layer over raw file descriptors, with a fixed table of open files."""

from __future__ import annotations

import errno
import io
import os
import sys
from collections.abc import Iterator, Sequence

BUFFER_SIZE = 1024
MAX_NR_OF_OPEN_FILES = 20
PERMISSIONS = 0o666

SEEK_SET = 0
SEEK_CUR = 1
SEEK_END = 2

_MODES = ("r", "w", "a")


class TooManyOpenFiles(OSError):
    """Raised when every slot of a :class:`FileTable` is in use."""


class BufferedFile:
    """A file descriptor with a read or write buffer of ``BUFFER_SIZE`` bytes.

    Unbuffered files use a one-byte buffer.
    """

    def __init__(self, fd: int, mode: str = "r", unbuffered: bool = False) -> None:
        if mode not in _MODES:
            raise ValueError(f"invalid mode: {mode!r}")
        self.fd = fd
        self.mode = mode
        self.unbuffered = unbuffered
        self.eof = False
        self.error = False
        self.closed = False
        self._buffer = bytearray()
        self._pos = 0

    @property
    def buffer_size(self) -> int:
        """The number of bytes moved per system call."""
        return 1 if self.unbuffered else BUFFER_SIZE

    @property
    def readable(self) -> bool:
        """Whether the file is open for reading."""
        return self.mode == "r" and not self.closed

    @property
    def writable(self) -> bool:
        """Whether the file is open for writing."""
        return self.mode != "r" and not self.closed

    def getc(self) -> int | None:
        """Return the next byte, or ``None`` at end of file or when not readable."""
        if self.readable and self._pos < len(self._buffer):
            byte = self._buffer[self._pos]
            self._pos += 1
            return byte
        return self._fill()

    def _fill(self) -> int | None:
        if not self.readable or self.eof or self.error:
            return None
        try:
            data = os.read(self.fd, self.buffer_size)
        except OSError:
            self.error = True
            raise
        self._buffer = bytearray(data)
        if not data:
            self._pos = 0
            self.eof = True
            return None
        self._pos = 1
        return data[0]

    def _check_writable(self) -> None:
        if not self.writable:
            self.error = True
            raise io.UnsupportedOperation("file not open for writing")
        if self.error:
            raise OSError(errno.EIO, "file is in an error state")

    def _write_pending(self) -> None:
        if not self._buffer:
            return
        data = bytes(self._buffer)
        try:
            written = os.write(self.fd, data)
        except OSError:
            self.error = True
            raise
        if written != len(data):
            self.error = True
            raise OSError(errno.EIO, "short write")
        self._buffer.clear()

    def putc(self, c: int) -> int:
        """Buffer the byte ``c``, writing the buffer out first when it is full."""
        self._check_writable()
        if not 0 <= c <= 255:
            raise ValueError(f"not a byte value: {c!r}")
        if len(self._buffer) >= self.buffer_size:
            self._write_pending()
        self._buffer.append(c)
        return c

    def flush(self) -> None:
        """Write out whatever is buffered."""
        self._check_writable()
        self._write_pending()

    def close(self) -> None:
        """Flush a writable file and release its descriptor."""
        if self.closed:
            return
        if self.mode != "r":
            self.flush()
        self._buffer.clear()
        self._pos = 0
        os.close(self.fd)
        self.closed = True

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move the file position, dropping read-ahead or flushing pending writes."""
        if self.closed:
            raise ValueError("seek on closed file")
        if self.mode == "r":
            self._buffer.clear()
            self._pos = 0
        else:
            self.flush()
        position = os.lseek(self.fd, offset, whence)
        self.eof = False
        return position

    def __iter__(self) -> Iterator[int]:
        while (byte := self.getc()) is not None:
            yield byte

    def __enter__(self) -> BufferedFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FileTable:
    """A fixed number of file slots; the first three hold stdin, stdout and stderr."""

    def __init__(self) -> None:
        self._slots: list[BufferedFile | None] = [
            BufferedFile(0, "r"),
            BufferedFile(1, "w"),
            BufferedFile(2, "w", unbuffered=True),
        ]
        self._slots += [None] * (MAX_NR_OF_OPEN_FILES - len(self._slots))

    @property
    def stdin(self) -> BufferedFile:
        return self._slots[0]  # type: ignore[return-value]

    @property
    def stdout(self) -> BufferedFile:
        return self._slots[1]  # type: ignore[return-value]

    @property
    def stderr(self) -> BufferedFile:
        return self._slots[2]  # type: ignore[return-value]

    @property
    def open_count(self) -> int:
        """How many slots are in use."""
        return sum(1 for f in self._slots if f is not None and not f.closed)

    def open(self, name: str, mode: str) -> BufferedFile:
        """Open ``name`` for reading (``r``), writing (``w``) or appending (``a``)."""
        kind = mode[:1]
        if kind not in _MODES:
            raise ValueError(f"invalid mode: {mode!r}")
        index = next(
            (i for i, f in enumerate(self._slots) if f is None or f.closed), None
        )
        if index is None:
            raise TooManyOpenFiles(errno.EMFILE, "no free file slots")
        create = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
        if kind == "w":
            fd = os.open(name, create, PERMISSIONS)
        elif kind == "a":
            try:
                fd = os.open(name, os.O_WRONLY)
            except OSError:
                fd = os.open(name, create, PERMISSIONS)
            os.lseek(fd, 0, SEEK_END)
        else:
            fd = os.open(name, os.O_RDONLY)
        handle = BufferedFile(fd, kind)
        self._slots[index] = handle
        return handle


_DEFAULT_TABLE = FileTable()


def open_file(name: str, mode: str) -> BufferedFile:
    """Open a file in the process-wide file table."""
    return _DEFAULT_TABLE.open(name, mode)


def main(argv: Sequence[str] | None = None) -> int:
    """Copy SOURCE, from byte OFFSET on, to DEST or to standard output."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= 3:
        print("Usage: stdio SOURCE [DEST [OFFSET]]", file=sys.stderr)
        return 1
    try:
        offset = int(args[2]) if len(args) > 2 else 0
    except ValueError:
        print("Error: invalid offset.", file=sys.stderr)
        return 1
    table = FileTable()
    try:
        source = table.open(args[0], "r")
    except OSError:
        print("Error: could not open the file.")
        return 1
    try:
        target = table.open(args[1], "w") if len(args) > 1 else table.stdout
    except OSError:
        source.close()
        print("Error: could not open the file.")
        return 1
    try:
        source.seek(offset)
    except OSError:
        source.close()
        return 1
    for byte in source:
        target.putc(byte)
    source.close()
    if target is table.stdout:
        sys.stdout.flush()
        target.flush()
    else:
        target.close()
    return 0