"""Lexer configuration for Monkey.

A LexerConfig is passed explicitly to each Lexer; there is no process-wide
configuration.

Usage:
    from monkey.config import LexerConfig
    from monkey.lexer import Lexer

    lexer = Lexer(b"let x = 4294967295", LexerConfig(integer_bits=32))
"""

from dataclasses import dataclass
from typing import Any, Mapping

# 2**4096 has 1234 decimal digits, well inside int()'s string conversion limit
MAX_INTEGER_BITS = 4096


@dataclass(frozen=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        integer_bits: Width of the unsigned type integer literals are parsed
            into, between 1 and MAX_INTEGER_BITS. Literals above
            ``2 ** integer_bits - 1`` raise IntegerOverflowError.
    """

    integer_bits: int = 64

    def __post_init__(self) -> None:
        if (not isinstance(self.integer_bits, int)
                or not 0 < self.integer_bits <= MAX_INTEGER_BITS):
            raise ValueError(
                f"integer_bits must be between 1 and {MAX_INTEGER_BITS}, "
                f"got {self.integer_bits!r}"
            )

    @property
    def max_integer(self) -> int:
        return (1 << self.integer_bits) - 1

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexerConfig":
        """Create a LexerConfig from a mapping, ignoring unknown keys.

        Example:
            >>> LexerConfig.from_dict({"integer_bits": 32, "other": 1}).integer_bits
            32
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


DEFAULT_CONFIG = LexerConfig()
