"""
Token definitions for the Monkey lexer.

The token set is closed: every token is one of the TokenType members below,
optionally carrying a value (identifier bytes or an integer).

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet


class TokenType(Enum):
    """Enumeration of all token types in Monkey."""

    # Special tokens
    ILLEGAL = auto()                # Byte that matches no rule
    EOF = auto()                    # End of input

    # Identifiers and literals
    IDENTIFIER = auto()             # foo, _bar, Batu
    INTEGER = auto()                # 192

    # Operators
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +

    # Punctuation and delimiters
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }

    # Keywords
    FUNCTION = auto()               # fn
    LET = auto()                    # let


@dataclass(frozen=True)
class Span:
    """Half-open byte range ``[start, end)`` of the input a token consumed."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Tokens compare by type and value only, so ``Token(TokenType.INTEGER, 15)``
    equals any INTEGER token holding 15 regardless of where it was scanned.
    """
    type: TokenType
    value: Any = None               # bytes for IDENTIFIER, int for INTEGER
    span: Span = field(default=Span(0, 0), compare=False)

    def __str__(self) -> str:
        if self.value is None:
            return self.type.name
        if isinstance(self.value, bytes):
            return f"{self.type.name}({self.value.decode('ascii')!r})"
        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.span})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        return self.type is TokenType.INTEGER

    @property
    def is_punctuation(self) -> bool:
        return self.type in PUNCTUATION_TYPES


# Lookup tables used by the lexer

PUNCTUATION: Dict[int, TokenType] = {
    ord("="): TokenType.ASSIGN,
    ord("+"): TokenType.PLUS,
    ord(","): TokenType.COMMA,
    ord(";"): TokenType.SEMICOLON,
    ord("("): TokenType.LEFT_PAREN,
    ord(")"): TokenType.RIGHT_PAREN,
    ord("{"): TokenType.LEFT_BRACE,
    ord("}"): TokenType.RIGHT_BRACE,
}

# Only consulted once the whole identifier run has been read
KEYWORDS: Dict[bytes, TokenType] = {
    b"let": TokenType.LET,
    b"fn": TokenType.FUNCTION,
}

WHITESPACE: FrozenSet[int] = frozenset(b" \t\n\r")

PUNCTUATION_TYPES: FrozenSet[TokenType] = frozenset(PUNCTUATION.values())
KEYWORD_TYPES: FrozenSet[TokenType] = frozenset(KEYWORDS.values())
