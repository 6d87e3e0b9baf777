"""
Monkey Lexer Package

Byte-oriented lexical analyzer for the Monkey language. Recognizes ASCII
identifiers, the keywords ``let`` and ``fn``, unsigned decimal integers and
the punctuation ``= + , ; ( ) { }``. Anything else becomes an ILLEGAL token.

Author: xwest
"""

from .tokens import Token, TokenType, Span, KEYWORDS, PUNCTUATION
from .lexer import Lexer, is_letter, is_digit, tokenize_string, tokenize_file
from .errors import LexerError, IntegerOverflowError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Span",
    "KEYWORDS",
    "PUNCTUATION",
    "LexerError",
    "IntegerOverflowError",
    "is_letter",
    "is_digit",
    "tokenize_string",
    "tokenize_file",
]
