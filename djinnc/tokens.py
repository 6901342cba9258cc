"""Token types, source locations, tokens and keyword lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    UNKNOWN = auto()

    IDENTIFIER = auto()

    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()
    POWER = auto()
    ASSIGNMENT = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    GREATER_THAN = auto()
    GREATER_THAN_OR_EQUAL = auto()
    LESS_THAN = auto()
    LESS_THAN_OR_EQUAL = auto()
    QUESTION = auto()
    QUESTION_EQUAL = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    DOT_DOT = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    PLUS_EQUAL = auto()
    MINUS_EQUAL = auto()
    MULTIPLY_EQUAL = auto()
    DIVIDE_EQUAL = auto()
    MODULO_EQUAL = auto()
    POWER_EQUAL = auto()

    # member access and punctuation
    DOT = auto()
    POINTER_ACCESS = auto()
    COMMA = auto()
    COLON = auto()
    COLON_COLON = auto()
    SEMICOLON = auto()

    # blocks
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    OPEN_SQUARE_BRACKET = auto()
    CLOSE_SQUARE_BRACKET = auto()

    # keywords
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    RETURN = auto()
    DO = auto()
    FOR = auto()
    BREAK = auto()
    CONTINUE = auto()
    FOR_EACH = auto()
    IMPORT = auto()
    CLASS = auto()
    FUNCTION = auto()
    STRUCT = auto()
    ENUM = auto()
    CONST = auto()
    STATIC = auto()
    VIRTUAL = auto()
    OVERRIDE = auto()
    PUBLIC = auto()
    PRIVATE = auto()
    PROTECTED = auto()
    INTERNAL = auto()
    EXTERNAL = auto()
    ABSTRACT = auto()

    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()

    # bitwise operators
    BITWISE_AND = auto()
    BITWISE_OR = auto()
    BITWISE_XOR = auto()
    BITWISE_NOT = auto()
    SHIFT_RIGHT = auto()
    SHIFT_LEFT = auto()
    BITWISE_AND_EQUAL = auto()
    BITWISE_OR_EQUAL = auto()
    BITWISE_XOR_EQUAL = auto()
    SHIFT_RIGHT_EQUAL = auto()
    SHIFT_LEFT_EQUAL = auto()

    # built-in types
    VOID = auto()
    BOOL = auto()
    BYTE = auto()
    CHAR = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()
    INT128 = auto()
    UINT16 = auto()
    UINT32 = auto()
    UINT64 = auto()
    UINT128 = auto()
    FLOAT32 = auto()
    FLOAT64 = auto()
    FLOAT128 = auto()
    STRING = auto()

    INVALID = auto()
    END_OF_FILE = auto()


@dataclass(frozen=True)
class Location:
    """A position in source text: zero-based line, column and absolute index."""

    line: int = 0
    column: int = 0
    index: int = 0


@dataclass(frozen=True)
class Token:
    """A lexed token with its type, text and where it started."""

    type: TokenType
    value: str = ""
    location: Location = field(default_factory=Location)


KEYWORD_TO_TOKEN_TYPE: dict[str, TokenType] = {
    "import": TokenType.IMPORT,
    "public": TokenType.PUBLIC,
    "f": TokenType.FUNCTION,
    "void": TokenType.VOID,
    "int16": TokenType.INT16,
    "int32": TokenType.INT32,
    "int64": TokenType.INT64,
    "int128": TokenType.INT128,
    "f32": TokenType.FLOAT32,
    "f64": TokenType.FLOAT64,
    "bool": TokenType.BOOL,
    "string": TokenType.STRING,
    "char": TokenType.CHAR,
    "uint16": TokenType.UINT16,
    "uint32": TokenType.UINT32,
    "uint64": TokenType.UINT64,
    "uint128": TokenType.UINT128,
    "byte": TokenType.BYTE,
    "static": TokenType.STATIC,
    "abstract": TokenType.ABSTRACT,
    "return": TokenType.RETURN,
}

TOKEN_TYPE_TO_KEYWORD: dict[TokenType, str] = {
    TokenType.IMPORT: "import",
    TokenType.FUNCTION: "f",
    TokenType.PUBLIC: "public",
    TokenType.VOID: "void",
    TokenType.INT16: "int16",
    TokenType.INT32: "int32",
    TokenType.INT64: "int64",
    TokenType.INT128: "int128",
    TokenType.FLOAT32: "f32",
    TokenType.FLOAT64: "f64",
    TokenType.BOOL: "bool",
    TokenType.STRING: "string",
    TokenType.CHAR: "char",
    TokenType.UINT16: "uint16",
    TokenType.UINT32: "uint32",
    TokenType.UINT64: "uint64",
    TokenType.UINT128: "uint128",
    TokenType.BYTE: "byte",
    TokenType.RETURN: "return",
}


def parse_token_type_from_value(value: str) -> TokenType:
    """Return the keyword token type for ``value``, or UNKNOWN (case-sensitive)."""
    return KEYWORD_TO_TOKEN_TYPE.get(value, TokenType.UNKNOWN)


def parse_value_from_token_type(token_type: TokenType) -> str:
    """Return the keyword spelling of ``token_type``, or an empty string."""
    return TOKEN_TYPE_TO_KEYWORD.get(token_type, "")


def is_semicolon(token_type: TokenType) -> bool:
    """Tell whether ``token_type`` is a semicolon."""
    return token_type is TokenType.SEMICOLON