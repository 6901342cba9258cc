"""Command line entry point: lexes and parses a source file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from djinnc.ast import Program
from djinnc.lexer import Lexer
from djinnc.parser import ParseError, Parser
from djinnc.text_walker import TextWalker
from djinnc.token_walker import TokenWalker

DEFAULT_SOURCE = Path("../code/helloWorld.djinn")


def parse_source(source: str) -> Program:
    """Lex and parse ``source`` into a program tree."""
    return Parser(TokenWalker(Lexer(TextWalker(source)))).parse()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the given source file; return 0 on success, 1 on failure."""
    arguments = argparse.ArgumentParser(
        prog="djinnc", description="Parse a source file."
    )
    arguments.add_argument(
        "source",
        nargs="?",
        type=Path,
        default=DEFAULT_SOURCE,
        help="file to parse (default: %(default)s)",
    )
    options = arguments.parse_args(argv)

    try:
        code = options.source.read_text(encoding="utf-8")
    except OSError as error:
        print(f"djinnc: cannot read {options.source}: {error}", file=sys.stderr)
        return 1

    try:
        parse_source(code)
    except ParseError as error:
        print(f"djinnc: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())