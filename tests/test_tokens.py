"""
Tests for token and error records.
"""

import unittest
import dataclasses
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxscan.lexer.tokens import Token, TokenType, SINGLE_CHARACTER_TOKENS, EQUAL_SUFFIXED_TOKENS
from loxscan.lexer.errors import LexError, ERROR_CODES, create_unexpected_character_error


class TestToken(unittest.TestCase):

    def test_str_without_literal(self):
        token = Token(TokenType.GREATER_EQUAL, ">=", None, 3)
        self.assertEqual(str(token), "GREATER_EQUAL >= null")

    def test_str_eof(self):
        self.assertEqual(str(Token(TokenType.EOF, "", None, 1)), "EOF  null")

    def test_str_with_literal(self):
        token = Token(TokenType.DOT, ".", "x", 1)
        self.assertEqual(str(token), "DOT . x")

    def test_token_is_immutable(self):
        token = Token(TokenType.STAR, "*", None, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_equality(self):
        self.assertEqual(
            Token(TokenType.PLUS, "+", None, 1),
            Token(TokenType.PLUS, "+", None, 1)
        )
        self.assertNotEqual(
            Token(TokenType.PLUS, "+", None, 1),
            Token(TokenType.PLUS, "+", None, 2)
        )

    def test_lookup_tables_cover_distinct_kinds(self):
        kinds = list(SINGLE_CHARACTER_TOKENS.values())
        for single, double in EQUAL_SUFFIXED_TOKENS.values():
            kinds.extend([single, double])
        self.assertEqual(len(kinds), len(set(kinds)))
        self.assertEqual(set(kinds) | {TokenType.EOF}, set(TokenType))


class TestLexError(unittest.TestCase):

    def test_unexpected_character_error(self):
        error = create_unexpected_character_error("$", 7)
        self.assertEqual(error.message, "Unexpected character: $")
        self.assertEqual(error.line, 7)
        self.assertEqual(error.character, "$")
        self.assertIn(error.code, ERROR_CODES)
        self.assertEqual(str(error), "[line 7] Error: Unexpected character: $")

    def test_is_exception(self):
        with self.assertRaises(LexError):
            raise create_unexpected_character_error("#", 1)


if __name__ == '__main__':
    unittest.main()
