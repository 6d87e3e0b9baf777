"""
Tests for LexerConfig and the token/error data types.

Author: xwest
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey import LexerConfig, Lexer
from monkey.config import MAX_INTEGER_BITS
from monkey.lexer import Token, TokenType, Span, KEYWORDS, PUNCTUATION, IntegerOverflowError
from monkey.lexer.errors import ERROR_CODES
from monkey.utils.logger import get_logger


class TestLexerConfig(unittest.TestCase):

    def test_defaults(self):
        config = LexerConfig()
        self.assertEqual(config.integer_bits, 64)
        self.assertEqual(config.max_integer, 2 ** 64 - 1)

    def test_immutability(self):
        config = LexerConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.integer_bits = 32

    def test_rejects_non_positive_width(self):
        for bits in (0, -8):
            with self.assertRaises(ValueError):
                LexerConfig(integer_bits=bits)

    def test_rejects_width_above_cap(self):
        with self.assertRaises(ValueError):
            LexerConfig(integer_bits=MAX_INTEGER_BITS + 1)
        with self.assertRaises(ValueError):
            LexerConfig(integer_bits=20000)

    def test_widest_config_builds_a_lexer(self):
        config = LexerConfig(integer_bits=MAX_INTEGER_BITS)
        lexer = Lexer(b"let x = 5", config)
        self.assertEqual(len(lexer.tokenize()), 5)
        self.assertFalse(lexer.has_errors())

    def test_from_dict_ignores_unknown_keys(self):
        config = LexerConfig.from_dict({"integer_bits": 32, "unknown_key": "ignored"})
        self.assertEqual(config, LexerConfig(integer_bits=32))

    def test_lexer_uses_default_config(self):
        self.assertEqual(Lexer(b"").config, LexerConfig())


class TestTokens(unittest.TestCase):

    def test_keyword_table(self):
        self.assertEqual(KEYWORDS, {b"let": TokenType.LET, b"fn": TokenType.FUNCTION})

    def test_punctuation_table(self):
        symbols = bytes(sorted(PUNCTUATION))
        self.assertEqual(set(symbols), set(b"=+,;(){}"))

    def test_token_properties(self):
        self.assertTrue(Token(TokenType.LET).is_keyword)
        self.assertFalse(Token(TokenType.IDENTIFIER, b"let").is_keyword)
        self.assertTrue(Token(TokenType.INTEGER, 1).is_literal)
        self.assertTrue(Token(TokenType.SEMICOLON).is_punctuation)
        self.assertFalse(Token(TokenType.ILLEGAL).is_punctuation)

    def test_token_str(self):
        self.assertEqual(str(Token(TokenType.PLUS)), "PLUS")
        self.assertEqual(str(Token(TokenType.IDENTIFIER, b"x")), "IDENTIFIER('x')")
        self.assertEqual(str(Token(TokenType.INTEGER, 15)), "INTEGER(15)")

    def test_tokens_are_hashable(self):
        self.assertEqual(len({Token(TokenType.EOF), Token(TokenType.EOF, None, Span(4, 4))}), 1)


class TestErrors(unittest.TestCase):

    def test_overflow_message(self):
        error = IntegerOverflowError(b"9" * 30, 64, Span(0, 30))
        text = str(error)
        self.assertIn("L007", text)
        self.assertIn("u64", text)
        self.assertIn("2**64 - 1", text)
        self.assertEqual(set(ERROR_CODES), {"L007"})

    def test_overflow_message_for_any_width(self):
        # Rendering must not convert 2**bits to a decimal string
        error = IntegerOverflowError(b"9", 20000, Span(0, 1))
        self.assertIn("2**20000 - 1", str(error))


class TestLogger(unittest.TestCase):

    def test_namespacing(self):
        self.assertEqual(get_logger("cli").name, "monkey.cli")
        self.assertEqual(get_logger("monkey.lexer").name, "monkey.lexer")


if __name__ == '__main__':
    unittest.main()
