#!/usr/bin/env python3
"""
monkey-lex: print the token stream of a Monkey source file.

Usage:
    monkey-lex program.mk
    monkey-lex -e "let x = y + 15"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LexerConfig
from .lexer import Lexer, Token
from .utils.logger import get_logger

logger = get_logger(__name__)


def format_token(token: Token) -> str:
    """Render a token as `TYPE value` for terminal output."""
    if token.value is None:
        return token.type.name
    if isinstance(token.value, bytes):
        return f"{token.type.name} {token.value.decode('ascii')}"
    return f"{token.type.name} {token.value}"


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the monkey-lex console script."""

    parser = argparse.ArgumentParser(
        prog="monkey-lex",
        description="Tokenize Monkey source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey-lex program.mk             # Tokenize a file
    monkey-lex -e "let x = 5;"        # Tokenize a snippet
    monkey-lex --bits 32 program.mk   # Overflow above u32
        """
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument('file', nargs='?',
                              help='Source file to tokenize')
    source_group.add_argument('-e', '--expression',
                              help='Tokenize the given source text instead of a file')

    parser.add_argument('--bits', type=int, default=64,
                        help='Width of unsigned integer literals, 1-4096 (default: 64)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = LexerConfig(integer_bits=args.bits)
    except ValueError as e:
        parser.error(str(e))

    if args.expression is not None:
        source = args.expression.encode("utf-8")
    else:
        try:
            with open(args.file, "rb") as f:
                source = f.read()
        except OSError as e:
            print(f"monkey-lex: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 2

    lexer = Lexer(source, config)
    tokens = lexer.tokenize()
    logger.debug("scanned %d tokens", len(tokens))

    for token in tokens:
        print(format_token(token))

    for error in lexer.errors:
        print(str(error), file=sys.stderr)

    return 1 if lexer.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())
