"""Backtracking character scanner.

The scanner is a cursor over an immutable string. Matches that need more than
one step are made speculative with the checkpoint stack:

    scanner.save()
    if scanner.match_literal("a") and scanner.match_literal("b"):
        scanner.accept()
    else:
        scanner.rollback()

A scanner is not thread-safe. Each splitting pass builds its own.
"""

from __future__ import annotations

from collections.abc import Callable

from .errors import ScannerStateError

# Distinguishable from every character value returned by peek()/read().
END_OF_INPUT = None

LINE_ENDINGS = frozenset("\r\n")


def is_line_ending(ch: str) -> bool:
    return ch in LINE_ENDINGS


def is_linear_whitespace(ch: str) -> bool:
    return ch.isspace() and not is_line_ending(ch)


class StringScanner:
    def __init__(self, text: str, *, case_sensitive: bool = False) -> None:
        if text is None:
            raise ValueError("StringScanner requires a string, got None")
        self._text = text
        self._length = len(text)
        self._case_sensitive = case_sensitive
        # Zero-based; position reports them one-based.
        self._index = 0
        self._line = 0
        self._column = 0
        self._saved: list[tuple[int, int, int]] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> tuple[int, int]:
        """One-based ``(line, column)`` of the cursor."""
        return self._line + 1, self._column + 1

    @property
    def depth(self) -> int:
        """Number of checkpoints still waiting for accept() or rollback()."""
        return len(self._saved)

    @property
    def is_bol(self) -> bool:
        """True at the start of the input or right after a line ending."""
        prev = self.reverse_peek()
        return prev is END_OF_INPUT or is_line_ending(prev)

    @property
    def is_eol(self) -> bool:
        """True at the end of the input or right before a line ending."""
        nxt = self.peek()
        return nxt is END_OF_INPUT or is_line_ending(nxt)

    def peek(self) -> str | None:
        if self._index >= self._length:
            return END_OF_INPUT
        return self._text[self._index]

    def reverse_peek(self) -> str | None:
        if self._index == 0:
            return END_OF_INPUT
        return self._text[self._index - 1]

    def read(self) -> str | None:
        """Consume and return the next character.

        At the end of the input this returns END_OF_INPUT and the cursor
        stays put; callers are expected to peek() first.
        """
        ch = self.peek()
        if ch is END_OF_INPUT:
            return ch
        self._index += 1

        # \r\n, lone \n and lone \r are each a single line break.
        if ch == "\r":
            if self.peek() == "\n":
                self._column += 1
            else:
                self._line += 1
                self._column = 0
        elif ch == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1
        return ch

    def match_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._index
        while (ch := self.peek()) is not END_OF_INPUT and predicate(ch):
            self.read()
        return self._text[start : self._index]

    def match_literal(self, literal: str) -> bool:
        """Consume ``literal`` if the input continues with it.

        Comparison is case-insensitive unless the scanner was built with
        ``case_sensitive=True``. Nothing is consumed on failure.
        """
        if not literal or self._index + len(literal) > self._length:
            return False
        candidate = self._text[self._index : self._index + len(literal)]
        if self._case_sensitive:
            matched = candidate == literal
        else:
            matched = all(
                a == b or a.lower() == b.lower() for a, b in zip(candidate, literal)
            )
        if not matched:
            return False
        for _ in literal:
            self.read()
        return True

    def skip_line_endings(self) -> None:
        self.match_while(is_line_ending)

    def skip_linear_whitespace(self) -> None:
        self.match_while(is_linear_whitespace)

    def skip_whitespace(self) -> None:
        self.match_while(str.isspace)

    def save(self) -> None:
        self._saved.append((self._index, self._line, self._column))

    def rollback(self) -> None:
        if not self._saved:
            raise ScannerStateError("No saved position to roll back to")
        self._index, self._line, self._column = self._saved.pop()

    def accept(self) -> None:
        if not self._saved:
            raise ScannerStateError("No saved position to accept")
        self._saved.pop()
