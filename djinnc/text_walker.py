"""A cursor over source text, plus character classification helpers."""

from __future__ import annotations

from typing import Callable

from djinnc.tokens import Location


def _is_ascii_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def is_valid_identifier_char(c: str, offset: int) -> bool:
    """Letters anywhere; digits and underscores only after the first character."""
    return _is_ascii_alpha(c) or (offset > 0 and (_is_ascii_digit(c) or c == "_"))


def is_valid_number_char(c: str, offset: int) -> bool:
    """A sign or digit first, then digits, '.', 'e', 'E' or '_'."""
    if offset == 0:
        return _is_ascii_digit(c) or c in ("-", "+")
    return _is_ascii_digit(c) or c in (".", "e", "E", "_")


def is_whitespace(c: str) -> bool:
    """Only the space character counts as whitespace."""
    return c == " "


def is_control_char(c: str) -> bool:
    """Newline, carriage return or tab."""
    return c in ("\n", "\r", "\t")


def is_valid_string(c: str, offset: int) -> bool:
    """Any character except a double quote may appear in a string literal."""
    return c != '"'


class TextWalker:
    """Walks through source text one character at a time, tracking location."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 0
        self._column = 0
        self._index = 0

    @property
    def remaining_length(self) -> int:
        """Number of characters not yet consumed."""
        return max(0, len(self._source) - self._position)

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` characters on the current line."""
        self._position += count
        self._index += count
        self._column += count

    def break_line(self, count: int = 1) -> None:
        """Record ``count`` line breaks without moving the cursor."""
        self._line += count
        self._index += count
        self._column = 0

    def peek(self, offset: int = 0) -> str:
        """Return the character ``offset`` places ahead of the cursor."""
        position = self._position + offset
        if offset < 0 or position >= len(self._source):
            raise IndexError(f"peek past end of source at position {position}")
        return self._source[position]

    def peek_advance(self, offset: int = 0, count: int = 1) -> str:
        """Peek at ``offset``, then advance by ``count``."""
        char = self.peek(offset)
        self.advance(count)
        return char

    def is_end_of_file(self) -> bool:
        """Tell whether every character has been consumed."""
        return self._position >= len(self._source)

    def peek_while(self, predicate: Callable[[str, int], bool], offset: int = 0) -> str:
        """Consume and return characters while ``predicate(char, offset)`` holds."""
        consumed: list[str] = []
        while not self.is_end_of_file() and predicate(self.peek(), offset):
            consumed.append(self.peek_advance())
            offset += 1
        return "".join(consumed)

    @property
    def location(self) -> Location:
        """The current line, column and index."""
        return Location(self._line, self._column, self._index)