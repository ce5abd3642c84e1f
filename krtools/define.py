"""Expand simple #define macros in C source, passing everything else through."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence

from krtools.scanner import MAX_WORD_LEN, CharStream, is_alpha
from krtools.symtab import SymbolTable

_ALNUM = frozenset(string.ascii_letters + string.digits)
_BLANK = frozenset(" \t")


def _is_word_char(c: str | None) -> bool:
    return c is not None and (c in _ALNUM or c == "_")


class _Expander:
    def __init__(self, text: str, table: SymbolTable) -> None:
        self.stream = CharStream(text)
        self.table = table
        self.out: list[str] = []

    def put(self, c: str | None) -> None:
        if c is not None:
            self.out.append(c)

    def get_word(self) -> str | None:
        stream = self.stream
        c = stream.getc()
        if c is None:
            return None
        if not is_alpha(c) and c != "_":
            return c
        chars = [c]
        c = stream.getc()
        while _is_word_char(c) and len(chars) < MAX_WORD_LEN:
            chars.append(c)
            c = stream.getc()
        stream.ungetc(c)
        return "".join(chars)

    def get_alnum(self) -> str:
        chars: list[str] = []
        c = self.stream.getc()
        while c is not None and c in _ALNUM and len(chars) < MAX_WORD_LEN:
            chars.append(c)
            c = self.stream.getc()
        self.stream.ungetc(c)
        return "".join(chars)

    def consume_word(self, error: str) -> str | None:
        word = self.get_word()
        if word is None:
            return None
        if not is_alpha(word[0]):
            self.put(error + "\n")
        self.put(word)
        return word

    def consume_blanks(self) -> None:
        c = self.stream.getc()
        while c is not None and c in _BLANK:
            self.put(c)
            c = self.stream.getc()
        self.stream.ungetc(c)

    def consume_comments(self) -> None:
        getc = self.stream.getc
        c = getc()
        if c == "/":
            self.put(c)
            c = getc()
            if c == "/":
                self.put(c)
                c = getc()
                while c != "\n" and c is not None:
                    self.put(c)
                    c = getc()
            elif c == "*":
                self.put(c)
                while (c := getc()) is not None:
                    self.put(c)
                    if c == "*":
                        c = getc()
                        self.put(c)
                        if c == "/":
                            break
                c = getc()
                if c == "/":
                    self.put(c)
                    return
        self.stream.ungetc(c)

    def consume_between(self, start: str, end: str) -> None:
        getc = self.stream.getc
        c = getc()
        if c == start:
            self.put(c)
            while (c := getc()) is not None:
                self.put(c)
                if c == "\\":
                    c = getc()
                    self.put(c)
                    if c is None:
                        break
                elif c == end:
                    return
        self.stream.ungetc(c)

    def consume_preproc(self) -> None:
        c = self.stream.getc()
        if c != "#":
            self.stream.ungetc(c)
            return
        self.put(c)
        word = self.consume_word("Error: expected preprocessor directive.") or ""
        directive = word if word in ("define", "undef") else None
        if directive:
            self.consume_blanks()
            name = self.consume_word("Error: invalid name.")
            if name is not None:
                word = name
        if directive == "define":
            self.consume_blanks()
            definition = self.get_alnum()
            self.put(definition)
            known = self.table.lookup(definition)
            self.table.install(word, known.definition if known else definition)
        elif directive == "undef":
            self.table.undef(word)

    def run(self) -> str:
        while (word := self.get_word()) is not None:
            c = word[0]
            if is_alpha(c):
                entry = self.table.lookup(word)
                self.put(entry.definition if entry else word)
            elif c == "/":
                self.stream.ungetc(c)
                self.consume_comments()
            elif c == "'":
                self.stream.ungetc(c)
                self.consume_between("'", "'")
            elif c == '"':
                self.stream.ungetc(c)
                self.consume_between('"', '"')
            elif c == "#":
                self.stream.ungetc(c)
                self.consume_preproc()
            else:
                self.put(c)
        return "".join(self.out)


def expand_defines(text: str, table: SymbolTable | None = None) -> str:
    """Return ``text`` with defined names replaced, recording directives in ``table``."""
    return _Expander(text, SymbolTable() if table is None else table).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Read C source on stdin and print it with macros expanded."""
    sys.stdout.write(expand_defines(sys.stdin.read()))
    return 0