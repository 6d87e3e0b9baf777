"""
Error handling for the Monkey lexer.

Unrecognized bytes are reported as ILLEGAL tokens, not exceptions. The only
fatal condition is an integer literal that does not fit the target width.

Author: xwest
"""

from typing import Optional

from .tokens import Span


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Carries the byte span of the offending input and an error code from
    ERROR_CODES.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.span = span
        self.code = code
        self.help_text = help_text

    def __str__(self) -> str:
        prefix = f"ERROR[{self.code}]" if self.code else "ERROR"
        result = f"{prefix}: {self.message} (bytes {self.span})"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class IntegerOverflowError(LexerError):
    """An integer literal is wider than the configured unsigned type."""

    def __init__(self, digits: bytes, bits: int, span: Span):
        self.digits = digits
        self.bits = bits
        super().__init__(
            message=f"Integer literal overflows u{bits}: '{_preview(digits)}'",
            span=span,
            code="L007",
            help_text=f"The largest representable value is 2**{bits} - 1."
        )


def _preview(digits: bytes, limit: int = 24) -> str:
    text = digits.decode("ascii")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


# Error codes for categorization
ERROR_CODES = {
    "L007": "Number literal overflow",
}
