"""
Monkey Lexer - turns a source byte buffer into tokens.

The scanner is a plain cursor over an immutable buffer: ``position`` is the
byte being examined, ``read_position`` the next one to read, and ``ch`` the
examined byte (``None`` once the cursor is past the end, so a NUL byte in the
input is just another illegal byte).

xwest
"""

from typing import Iterator, List, Optional, Union

from ..config import DEFAULT_CONFIG, LexerConfig
from ..utils.logger import get_logger
from .errors import IntegerOverflowError, LexerError
from .tokens import KEYWORDS, PUNCTUATION, WHITESPACE, Span, Token, TokenType

logger = get_logger(__name__)

Source = Union[bytes, bytearray, memoryview, str]


def is_letter(ch: Optional[int]) -> bool:
    """ASCII letter or underscore."""
    return ch is not None and (
        ord("a") <= ch <= ord("z") or ord("A") <= ch <= ord("Z") or ch == ord("_")
    )


def is_digit(ch: Optional[int]) -> bool:
    return ch is not None and ord("0") <= ch <= ord("9")


class Lexer:
    """
    Monkey lexical analyzer.

    Call ``next_token()`` repeatedly to pull tokens; once the input is used up
    every call returns an EOF token. Iterating a Lexer yields the remaining
    tokens up to and including the first EOF.
    """

    def __init__(self, source: Source, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source bytes; a str is encoded as UTF-8 first (lone
                surrogates included, they scan as ILLEGAL bytes)
            config: Lexer configuration, defaults to 64-bit integers
        """
        if isinstance(source, str):
            source = source.encode("utf-8", "surrogatepass")
        self.source = bytes(source)
        self.config = config or DEFAULT_CONFIG
        self.errors: List[LexerError] = []

        self._max_integer = self.config.max_integer
        self._max_integer_digits = len(str(self._max_integer))

        self._reset()
        logger.debug("lexer created for %d bytes (u%d integers)",
                     len(self.source), self.config.integer_bits)

    def _reset(self) -> None:
        self.position = 0
        self.read_position = 0
        self.ch: Optional[int] = None
        self._read_char()

    def _read_char(self) -> None:
        """Advance the cursor by one byte."""
        if self.read_position >= len(self.source):
            self.ch = None
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        # Never run more than one past the end, however often EOF is pulled
        if self.read_position <= len(self.source):
            self.read_position += 1

    @property
    def exhausted(self) -> bool:
        """True once the cursor has moved past the last byte."""
        return self.ch is None

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Raises:
            IntegerOverflowError: If an integer literal does not fit the
                configured width. The digits are consumed before raising, so
                scanning can continue with the following token.
        """
        self._skip_whitespace()

        start = self.position
        ch = self.ch

        if ch in PUNCTUATION:
            self._read_char()
            return Token(PUNCTUATION[ch], None, Span(start, start + 1))

        if ch is None:
            end = len(self.source)
            self._read_char()
            return Token(TokenType.EOF, None, Span(end, end))

        if is_letter(ch):
            word = self._read_identifier()
            span = Span(start, self.position)
            keyword = KEYWORDS.get(word)
            if keyword is not None:
                return Token(keyword, None, span)
            return Token(TokenType.IDENTIFIER, word, span)

        if is_digit(ch):
            value = self._read_number()
            return Token(TokenType.INTEGER, value, Span(start, self.position))

        # Unknown byte: skip it so the caller always makes progress
        self._read_char()
        return Token(TokenType.ILLEGAL, None, Span(start, start + 1))

    def _skip_whitespace(self) -> None:
        while self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> bytes:
        start = self.position
        while is_letter(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _read_number(self) -> int:
        start = self.position
        while is_digit(self.ch):
            self._read_char()
        digits = self.source[start:self.position]

        # Check the length first; int() refuses digit strings past 4300 digits
        significant = digits.lstrip(b"0")
        if len(significant) > self._max_integer_digits:
            raise IntegerOverflowError(digits, self.config.integer_bits,
                                       Span(start, self.position))

        value = int(significant) if significant else 0
        if value > self._max_integer:
            raise IntegerOverflowError(digits, self.config.integer_bits,
                                       Span(start, self.position))
        return value

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source from the beginning.

        Errors are collected in ``self.errors`` and scanning carries on past
        them.

        Returns:
            List of tokens ending with a single EOF token
        """
        self._reset()
        self.errors.clear()
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                logger.debug("collected lexer error: %s", e.message)
                self.errors.append(e)
                continue
            tokens.append(token)
            if token.type is TokenType.EOF:
                break

        return tokens

    def has_errors(self) -> bool:
        """Check if the last tokenize() run collected any errors."""
        return len(self.errors) > 0


def tokenize_string(source: Source, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source buffer.

    Args:
        source: Source bytes or text
        config: Lexer configuration

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, config)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If the file cannot be read
    """
    with open(filepath, "rb") as f:
        source = f.read()

    return tokenize_string(source, config)
