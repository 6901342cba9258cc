"""Lexer, parser and syntax tree for the Djinn programming language."""

__version__ = "0.1.0"