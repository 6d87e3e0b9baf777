"""
Monkey Language Package

Front end for the Monkey interpreted language. Currently this is the lexer:

    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── config.py        # Lexer configuration
    └── cli.py           # monkey-lex command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@monkey-lang.org"
__license__ = "MIT"

from .config import LexerConfig
from .lexer import Lexer, Token, TokenType, LexerError, IntegerOverflowError

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",
    "LexerError",
    "IntegerOverflowError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
