"""Turns source text into tokens."""

from __future__ import annotations

from typing import Iterator

from djinnc.text_walker import (
    TextWalker,
    is_valid_identifier_char,
    is_valid_number_char,
    is_valid_string,
    is_whitespace,
)
from djinnc.tokens import Location, Token, TokenType

_DIGITS = frozenset("0123456789")

_SINGLE: dict[str, TokenType] = {
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "(": TokenType.OPEN_BRACKET,
    ")": TokenType.CLOSE_BRACKET,
    "[": TokenType.OPEN_SQUARE_BRACKET,
    "]": TokenType.CLOSE_SQUARE_BRACKET,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}

# First character -> (type when alone, {second character: combined type}).
_COMPOUND: dict[str, tuple[TokenType, dict[str, TokenType]]] = {
    ":": (TokenType.COLON, {":": TokenType.COLON_COLON}),
    ".": (TokenType.DOT, {".": TokenType.DOT_DOT}),
    "*": (TokenType.MULTIPLY, {"=": TokenType.MULTIPLY_EQUAL, "*": TokenType.POWER}),
    "^": (TokenType.MULTIPLY, {"=": TokenType.MULTIPLY_EQUAL, "*": TokenType.POWER}),
    "=": (TokenType.ASSIGNMENT, {"=": TokenType.EQUAL}),
    ">": (
        TokenType.GREATER_THAN,
        {"=": TokenType.GREATER_THAN_OR_EQUAL, ">": TokenType.SHIFT_RIGHT},
    ),
    "<": (
        TokenType.LESS_THAN,
        {"=": TokenType.LESS_THAN_OR_EQUAL, "<": TokenType.SHIFT_LEFT},
    ),
    "!": (TokenType.NOT, {"=": TokenType.NOT_EQUAL}),
    "?": (TokenType.QUESTION, {"?": TokenType.QUESTION_EQUAL}),
    "&": (
        TokenType.BITWISE_AND,
        {"&": TokenType.AND, "=": TokenType.BITWISE_AND_EQUAL},
    ),
    "|": (
        TokenType.BITWISE_OR,
        {"|": TokenType.OR, "=": TokenType.BITWISE_OR_EQUAL},
    ),
}

# Sign -> (alone, doubled, followed by '=').
_SIGNS: dict[str, tuple[TokenType, TokenType, TokenType]] = {
    "+": (TokenType.PLUS, TokenType.INCREMENT, TokenType.PLUS_EQUAL),
    "-": (TokenType.MINUS, TokenType.DECREMENT, TokenType.MINUS_EQUAL),
}

# Tokens produced without consuming input; lexing cannot go past them.
_TERMINAL = frozenset({TokenType.END_OF_FILE, TokenType.INVALID})


class Lexer:
    """Produces tokens one at a time from a :class:`TextWalker`."""

    def __init__(self, walker: TextWalker) -> None:
        self._walker = walker

    @property
    def walker(self) -> TextWalker:
        """The text walker being read."""
        return self._walker

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the text is used up or no further progress is possible."""
        while not self._walker.is_end_of_file():
            token = self.next_token()
            yield token
            if token.type in _TERMINAL:
                return

    def next_token(self) -> Token:
        """Lex and return the next token, skipping spaces and newlines."""
        walker = self._walker
        while True:
            location = walker.location
            if walker.is_end_of_file():
                return Token(TokenType.END_OF_FILE, "", location)
            char = walker.peek()
            if char == " ":
                walker.peek_while(lambda c, _offset: is_whitespace(c))
                continue
            if char == "\n":
                walker.break_line()
                walker.advance()
                continue
            return self._lex(char, location)

    def _lex(self, char: str, location: Location) -> Token:
        walker = self._walker

        if char.isascii() and char.isalpha():
            return Token(TokenType.IDENTIFIER, self._read_identifier(), location)

        if char in _SIGNS:
            alone, doubled, with_equal = _SIGNS[char]
            walker.advance()
            following = walker.peek()
            if following in _DIGITS:
                walker.advance()
                return Token(TokenType.NUMBER_LITERAL, self._read_number(), location)
            if following == char:
                walker.advance()
                return Token(doubled, "", location)
            if following == "=":
                walker.advance()
                return Token(with_equal, "", location)
            return Token(alone, "", location)

        if char in _DIGITS:
            return Token(TokenType.NUMBER_LITERAL, self._read_number(), location)

        if char in _SINGLE:
            walker.advance()
            return Token(_SINGLE[char], "", location)

        if char in _COMPOUND:
            alone, combined = _COMPOUND[char]
            walker.advance()
            token_type = combined.get(walker.peek())
            if token_type is not None:
                walker.advance()
                return Token(token_type, "", location)
            return Token(alone, "", location)

        if char == "'":
            return Token(TokenType.INVALID, "", location)

        if char == '"':
            return Token(TokenType.STRING_LITERAL, self._read_string(), location)

        if char == "\0":
            return Token(TokenType.END_OF_FILE, "", location)

        walker.advance()
        return Token(TokenType.UNKNOWN, "", location)

    def _read_identifier(self) -> str:
        return self._walker.peek_while(is_valid_identifier_char)

    def _read_number(self) -> str:
        return self._walker.peek_while(is_valid_number_char)

    def _read_string(self) -> str:
        self._walker.advance()  # opening quote
        text = self._walker.peek_while(is_valid_string)
        self._walker.advance()  # closing quote
        return text