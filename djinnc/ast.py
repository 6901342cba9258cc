"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional, Union

from djinnc.tokens import Token, TokenType


class AST:
    """Base class of every syntax tree node."""


Node = Union[AST, Token]


@dataclass
class Program(AST):
    """A whole source file: its imports and its top-level methods."""

    imports: list[Optional[Node]] = field(default_factory=list)
    methods: list[Optional[Node]] = field(default_factory=list)

    def add_import(self, node: Optional[Node]) -> None:
        """Append an import node."""
        self.imports.append(node)

    def add_method(self, node: Optional[Node]) -> None:
        """Append a method node."""
        self.methods.append(node)


@dataclass
class ImportExpression(AST):
    """An ``import name;`` statement."""

    link: str


@dataclass
class BodyExpression(AST):
    """A braced block of statements."""

    statements: list[Node] = field(default_factory=list)


class ModifierType(IntFlag):
    """Declaration modifiers, combinable as bit flags."""

    UNDEFINED = 0
    PUBLIC = 1 << 0
    PROTECTED = 1 << 1
    PRIVATE = 1 << 2
    INTERNAL = 1 << 3
    STATIC = 1 << 4

    @staticmethod
    def from_token_type(token_type: TokenType) -> "ModifierType":
        """Map a keyword token type to its modifier, or UNDEFINED."""
        return _TOKEN_TO_MODIFIER.get(token_type, ModifierType.UNDEFINED)

    def has_flag(self, flag: "ModifierType") -> bool:
        """Tell whether every bit of ``flag`` is set here."""
        return (self & flag) == flag


_TOKEN_TO_MODIFIER: dict[TokenType, ModifierType] = {
    TokenType.PUBLIC: ModifierType.PUBLIC,
    TokenType.PROTECTED: ModifierType.PROTECTED,
    TokenType.PRIVATE: ModifierType.PRIVATE,
    TokenType.INTERNAL: ModifierType.INTERNAL,
    TokenType.STATIC: ModifierType.STATIC,
}


@dataclass
class ModifierExpression(AST):
    """One modifier keyword together with its kind."""

    modifier: Optional[Token] = None
    type: ModifierType = ModifierType.UNDEFINED


@dataclass
class AccessModifiersExpression(AST):
    """The modifiers written before a declaration, in order."""

    modifiers: list[ModifierExpression] = field(default_factory=list)

    def add_modifier(self, modifier: ModifierExpression) -> None:
        """Append a modifier."""
        self.modifiers.append(modifier)


@dataclass
class SignatureExpression(AST):
    """Return type, name and parameters of a callable."""

    return_type: Optional[Node] = None
    name: Optional[Node] = None
    parameters: list[Node] = field(default_factory=list)


@dataclass
class CallableExpression(AST):
    """A function: modifiers, signature and body."""

    modifiers: AccessModifiersExpression = field(default_factory=AccessModifiersExpression)
    signature: Optional[SignatureExpression] = None
    body: Optional[BodyExpression] = None


@dataclass
class MethodExpression(AST):
    """A callable attached to an enclosing node."""

    callable: CallableExpression
    parent: Optional[AST] = None


@dataclass
class ReturnExpression(AST):
    """A ``return`` statement with an optional value in ``right``."""

    left: Optional[Node] = None
    right: Optional[Node] = None


@dataclass
class ConstantExpression(AST):
    """A literal constant held as its source text."""

    value: str = ""


@dataclass
class NumberLiteralConstant(ConstantExpression):
    """A number written directly in the source."""


@dataclass
class VariableExpression(AST):
    """A named variable."""

    name: str


@dataclass
class LocalVariableExpression(VariableExpression):
    """A variable local to the scope given by ``parent``."""

    parent: Optional[AST] = None