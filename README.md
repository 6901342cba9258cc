# djinnc

A front end for the Djinn language. It turns source text into tokens and
parses those tokens into a small abstract syntax tree of imports and
methods.

## Installing

```
pip install .
```

## Command line

```
djinnc path/to/helloWorld.djinn
```

The command reads the given file as UTF-8, lexes and parses it, and exits
with status 0 when parsing succeeds. If the file cannot be read, or the
parser raises `ParseError`, a message is printed to standard error and the
exit status is 1. Without an argument it reads `../code/helloWorld.djinn`.

## Library use

```python
from djinnc.cli import parse_source

program = parse_source(
    "import console;\n"
    "public f int32 main() {\n"
    "    return 0;\n"
    "}\n"
)
print(program.imports)   # [ImportExpression(link='console')]
print(program.methods)   # [CallableExpression(...)]
```

The pieces can also be driven one at a time:

```python
from djinnc.text_walker import TextWalker
from djinnc.lexer import Lexer
from djinnc.token_walker import TokenWalker
from djinnc.parser import Parser

lexer = Lexer(TextWalker("public f void run() { }"))
program = Parser(TokenWalker(lexer)).parse()
```

### Modules

- `djinnc.tokens` defines the `TokenType` enum and the frozen dataclasses
  `Token` (type, value, location) and `Location` (zero-based line, column
  and index), along with the keyword lookups `parse_token_type_from_value`
  and `parse_value_from_token_type` and the helper `is_semicolon`.
- `djinnc.text_walker.TextWalker` is a cursor over source text with
  `peek`, `peek_advance`, `peek_while`, `advance`, `break_line`,
  `is_end_of_file` and the properties `location` and `remaining_length`.
  The module also holds the character tests `is_valid_identifier_char`,
  `is_valid_number_char`, `is_whitespace`, `is_control_char` and
  `is_valid_string`.
- `djinnc.lexer.Lexer` produces `Token` objects from a `TextWalker`, one at
  a time through `next_token()` or by iterating over it. Spaces and
  newlines are skipped; iteration stops at the end of the text or at an
  `END_OF_FILE` or `INVALID` token.
- `djinnc.token_walker.TokenWalker` lexes everything up front and offers
  `peek(offset)` (returning `None` past the end), `advance(count)` and
  `is_end_of_file()`.
- `djinnc.ast` holds the tree nodes: `Program`, `ImportExpression`,
  `CallableExpression`, `SignatureExpression`, `BodyExpression`,
  `ReturnExpression`, `AccessModifiersExpression`, `ModifierExpression`,
  the `ModifierType` flag enum, and `MethodExpression`,
  `ConstantExpression`, `NumberLiteralConstant`, `VariableExpression` and
  `LocalVariableExpression`.
- `djinnc.parser.Parser` builds a `Program` whose `imports` are
  `ImportExpression` nodes and whose `methods` are `CallableExpression`
  nodes. Malformed declarations raise `ParseError`, which carries the
  offending token in `token`.
- `djinnc.cli` provides `parse_source(source)` and the `main` entry point
  of the `djinnc` command.

## What it does not do

This package is only a front end. It does not type-check, interpret or
generate code, and the command writes nothing when parsing succeeds. The
parser recognises only `import name;` statements and methods that start
with `public`; other top-level tokens are skipped. Method parameters are
not supported, and a `return` statement may carry only a number literal.
Tabs and carriage returns are not treated as whitespace, and a single
quote ends lexing with an `INVALID` token.

## Running the tests

```
pip install .[test]
pytest
```