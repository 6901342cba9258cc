"""A cursor over the tokens produced by a lexer."""

from __future__ import annotations

from djinnc.lexer import Lexer
from djinnc.tokens import Token


class TokenWalker:
    """Lexes everything up front, then walks the tokens with lookahead."""

    def __init__(self, lexer: Lexer) -> None:
        self._tokens: list[Token] = list(lexer)
        self._position = 0

    def peek(self, offset: int = 0) -> Token | None:
        """Return the token ``offset`` places ahead, or None past the end."""
        position = self._position + offset
        if position < 0 or position >= len(self._tokens):
            return None
        return self._tokens[position]

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` tokens."""
        self._position += count

    def is_end_of_file(self) -> bool:
        """Tell whether every token has been consumed."""
        return self._position >= len(self._tokens)