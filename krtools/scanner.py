"""Character stream with push-back and the word reader shared by the text tools."""

from __future__ import annotations

import string
from collections.abc import Iterator

MAX_WORD_LEN = 100

_ALPHA = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_BLANK = frozenset(" \t")


def is_alpha(c: str | None) -> bool:
    """True for an ASCII letter."""
    return c is not None and c in _ALPHA


def _is_word_char(c: str | None) -> bool:
    return c is not None and (c in _ALNUM or c == "_")


class CharStream:
    """Reads a text one character at a time; ``None`` marks the end."""

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self._pushed: list[str] = []

    def getc(self) -> str | None:
        """Return the next character, or ``None`` at the end of the text."""
        if self._pushed:
            return self._pushed.pop()
        return next(self._chars, None)

    def ungetc(self, c: str | None) -> None:
        """Push a character back; pushing back the end marker does nothing."""
        if c is not None:
            self._pushed.append(c)

    def skip_blanks(self) -> None:
        """Skip spaces and tabs."""
        c = self.getc()
        while c is not None and c in _BLANK:
            c = self.getc()
        self.ungetc(c)

    def skip_comments(self) -> None:
        """Skip a comment at the current position.

        A line comment leaves its newline in the stream; a block comment is
        replaced by a single newline.
        """
        c = self.getc()
        if c == "/":
            c = self.getc()
            if c == "/":
                c = self.getc()
                while c != "\n" and c is not None:
                    c = self.getc()
            elif c == "*":
                c = self.getc()
                while c != "*" and c is not None:
                    c = self.getc()
                c = self.getc()
                if c == "/":
                    self.ungetc("\n")
                    return
        self.ungetc(c)

    def skip_between(self, start: str, end: str) -> None:
        """Skip a literal opened by ``start`` and closed by ``end``, honouring escapes."""
        c = self.getc()
        if c == start:
            c = self.getc()
            while c is not None:
                if c == "\\":
                    c = self.getc()
                    if c is None:
                        break
                elif c == end:
                    return
                c = self.getc()
        self.ungetc(c)

    def _read_token(self, max_len: int) -> str | None:
        c = self.getc()
        if c is None:
            return None
        if not is_alpha(c) and c != "_":
            return c
        chars = [c]
        c = self.getc()
        while _is_word_char(c) and len(chars) < max_len:
            chars.append(c)
            c = self.getc()
        self.ungetc(c)
        return "".join(chars)

    def read_word(self, max_len: int) -> str | None:
        """Read a word or a single other character after skipping blanks."""
        self.skip_blanks()
        return self._read_token(max_len)

    def read_code_word(self, max_len: int) -> str | None:
        """Like :meth:`read_word`, but also skips comments and literals first."""
        self.skip_blanks()
        self.skip_comments()
        self.skip_between("'", "'")
        self.skip_between('"', '"')
        return self._read_token(max_len)


def iter_words(text: str, code: bool = False) -> Iterator[str]:
    """Yield the words of ``text``; with ``code`` set, comments and literals are skipped."""
    stream = CharStream(text)
    read = stream.read_code_word if code else stream.read_word
    while (word := read(MAX_WORD_LEN)) is not None:
        yield word