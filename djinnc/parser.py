"""Builds a syntax tree from the tokens of a source file."""

from __future__ import annotations

from typing import Callable, Optional

from djinnc.ast import (
    BodyExpression,
    CallableExpression,
    ImportExpression,
    ModifierExpression,
    ModifierType,
    Node,
    Program,
    ReturnExpression,
    SignatureExpression,
)
from djinnc.token_walker import TokenWalker
from djinnc.tokens import (
    Token,
    TokenType,
    parse_token_type_from_value,
    parse_value_from_token_type,
)

MAX_BODY_RECURSION_DEPTH = 10
MAX_TRY_RECURSION = 2

_MODIFIERS = frozenset(
    {
        TokenType.PUBLIC,
        TokenType.PRIVATE,
        TokenType.PROTECTED,
        TokenType.STATIC,
        TokenType.ABSTRACT,
    }
)

_BUILTIN_TYPES = frozenset(
    {
        TokenType.VOID,
        TokenType.INT16,
        TokenType.INT32,
        TokenType.INT64,
        TokenType.INT128,
        TokenType.FLOAT32,
        TokenType.FLOAT64,
        TokenType.FLOAT128,
        TokenType.STRING,
        TokenType.CHAR,
        TokenType.BOOL,
        TokenType.BYTE,
    }
)


class ParseError(Exception):
    """Raised when the tokens do not form a valid declaration."""

    def __init__(self, message: str, token: Optional[Token] = None) -> None:
        self.message = message
        self.token = token
        if token is not None:
            where = token.location
            message = f"{message} (line {where.line + 1}, column {where.column + 1})"
        else:
            message = f"{message} (at end of input)"
        super().__init__(message)


def _effective_type(token: Token) -> TokenType:
    keyword = parse_token_type_from_value(token.value)
    return token.type if keyword is TokenType.UNKNOWN else keyword


class Parser:
    """Reads tokens from a :class:`TokenWalker` and builds a :class:`Program`."""

    def __init__(self, walker: TokenWalker) -> None:
        self._walker = walker
        self._program = Program()
        self._handlers: dict[TokenType, Callable[[Token], Node]] = {
            TokenType.PUBLIC: self._parse_method,
            TokenType.IMPORT: self._parse_import,
        }

    def parse(self) -> Program:
        """Parse every top-level import and method; other tokens are skipped."""
        walker = self._walker
        while not walker.is_end_of_file():
            token = walker.peek()
            keyword = parse_token_type_from_value(token.value)
            handler = self._handlers.get(keyword)
            if handler is None:
                walker.advance()
                continue
            node = handler(token)
            if keyword is TokenType.IMPORT:
                self._program.add_import(node)
            else:
                self._program.add_method(node)
        return self._program

    def _expect(self, token_type: TokenType, message: str) -> Token:
        token = self._walker.peek()
        if token is None or token.type is not token_type:
            raise ParseError(message, token)
        return token

    def _parse_import(self, token: Token) -> ImportExpression:
        keyword = parse_value_from_token_type(TokenType.IMPORT)
        if token.type is not TokenType.IDENTIFIER or token.value != keyword:
            raise ParseError(f"expected '{keyword}'", token)
        self._walker.advance()
        name = self._expect(TokenType.IDENTIFIER, "expected a module name after 'import'")
        self._walker.advance()
        self._expect(TokenType.SEMICOLON, "expected ';' after the imported name")
        self._walker.advance()
        return ImportExpression(name.value)

    def _parse_method(self, token: Token) -> CallableExpression:
        walker = self._walker
        callable_ = CallableExpression()
        function: Optional[Token] = None
        return_type: Optional[Token] = None
        identifier: Optional[Token] = None

        def require_declared(current: Token) -> None:
            if function is None:
                raise ParseError("expected 'f' before the declaration", current)
            if return_type is None:
                raise ParseError("expected a return type before the declaration", current)
            if identifier is None:
                raise ParseError("expected a method name", current)

        while True:
            token = walker.peek()
            if token is None:
                return callable_
            kind = _effective_type(token)

            if kind in _MODIFIERS:
                callable_.modifiers.add_modifier(
                    ModifierExpression(token, ModifierType.from_token_type(kind))
                )
                walker.advance()
            elif kind is TokenType.FUNCTION:
                function = token
                walker.advance()
            elif kind in _BUILTIN_TYPES:
                if function is None:
                    raise ParseError("a return type must follow 'f'", token)
                callable_.signature = SignatureExpression(return_type=token)
                return_type = token
                walker.advance()
            elif kind is TokenType.OPEN_BRACE:
                require_declared(token)
                walker.advance()
                callable_.body = self._parse_body(0)
            elif kind is TokenType.CLOSE_BRACE:
                walker.advance()
                return callable_
            elif kind is TokenType.OPEN_BRACKET:
                require_declared(token)
                walker.advance()
                self._expect(TokenType.CLOSE_BRACKET, "method parameters are not supported")
                walker.advance()
            elif kind is TokenType.IDENTIFIER:
                if function is None:
                    raise ParseError("expected 'f' before the method name", token)
                if return_type is None:
                    raise ParseError("expected a return type before the method name", token)
                identifier = token
                callable_.signature.name = token
                walker.advance()
            else:
                return callable_

    def _parse_body(self, depth: int) -> BodyExpression:
        walker = self._walker
        body = BodyExpression()
        if depth > MAX_BODY_RECURSION_DEPTH:
            return body
        depth += 1

        while True:
            token = walker.peek()
            if token is None:
                return body
            kind = _effective_type(token)

            if kind is TokenType.RETURN:
                statement = ReturnExpression()
                body.statements.append(statement)
                value = walker.peek(1)
                if value is not None and value.type is TokenType.NUMBER_LITERAL:
                    statement.right = value
                    walker.advance(2)
                self._expect(
                    TokenType.SEMICOLON, "expected a number and ';' after 'return'"
                )
                walker.advance()
            elif kind in (TokenType.IDENTIFIER, TokenType.OPEN_BRACE):
                # identifiers, like braces, open a nested block
                walker.advance()
                body.statements.append(self._parse_body(depth + 1))
            elif kind is TokenType.CLOSE_BRACE:
                walker.advance()
                return body
            else:
                walker.advance()