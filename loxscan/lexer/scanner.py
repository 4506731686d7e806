"""
Lox Scanner - turns source text into tokens

One left-to-right pass over the source. Two offsets (start, current) mark
the lexeme being scanned; text is only sliced out when a token is emitted.
Unknown characters become LexError records and the scan carries on with
the next character.
"""

import logging
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, SINGLE_CHARACTER_TOKENS, EQUAL_SUFFIXED_TOKENS,
    WHITESPACE, NEWLINE
)
from .errors import LexError, create_unexpected_character_error

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Usage::

        scanner = Scanner("(!@)")
        scanner.scan()
        scanner.tokens       # LEFT_PAREN, BANG, RIGHT_PAREN, EOF
        scanner.has_errors() # True, "@" was not recognized
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text to scan
        """
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self._tokens: List[Token] = []
        self._errors: List[LexError] = []

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """Tokens produced by the last scan, ending with EOF."""
        return tuple(self._tokens)

    @property
    def errors(self) -> Tuple[LexError, ...]:
        """Lexical errors recorded by the last scan, in source order."""
        return tuple(self._errors)

    def scan(self) -> None:
        """
        Scan the entire source.

        Never raises for malformed input: unknown characters are recorded
        as errors and skipped. Scanning again starts over from the top.
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self._tokens.clear()
        self._errors.clear()

        logger.debug("Scanning %d characters", len(self.source))

        while not self._is_at_end():
            self.start = self.current
            try:
                token_type = self._scan_token()
            except LexError as e:
                logger.debug("Recorded error: %s", e)
                self._errors.append(e)
                continue

            if token_type is not None:
                self._add_token(token_type)

        self._tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "Scan finished: %d tokens, %d errors, %d lines",
            len(self._tokens), len(self._errors), self.line
        )

    def has_errors(self) -> bool:
        """Check if the scanner recorded any lexical errors."""
        return len(self._errors) > 0

    def render_tokens(self) -> List[str]:
        """Token lines in `KIND lexeme literal` form."""
        return [str(token) for token in self._tokens]

    def render_errors(self) -> List[str]:
        """Error lines in `[line N] Error: message` form."""
        return [str(error) for error in self._errors]

    def _scan_token(self) -> Optional[TokenType]:
        """
        Classify the character at the cursor.

        Returns the token type to emit, or None for skipped characters.
        Raises LexError for characters that start no token.
        """
        char = self._advance()

        if char in SINGLE_CHARACTER_TOKENS:
            return SINGLE_CHARACTER_TOKENS[char]

        if char in EQUAL_SUFFIXED_TOKENS:
            single, double = EQUAL_SUFFIXED_TOKENS[char]
            return double if self._match("=") else single

        if char == NEWLINE:
            self.line += 1
            return None

        if char in WHITESPACE:
            return None

        raise create_unexpected_character_error(char, self.line)

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the character at the cursor."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self._is_at_end():
            return False
        if self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _add_token(self, token_type: TokenType, literal: Optional[object] = None):
        lexeme = self.source[self.start:self.current]
        self._tokens.append(Token(token_type, lexeme, literal, self.line))


def scan_source(source: str) -> Scanner:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string

    Returns:
        The scanner after a completed scan; check has_errors() for lexical errors
    """
    scanner = Scanner(source)
    scanner.scan()
    return scanner


def scan_file(filepath: str) -> Scanner:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to a UTF-8 source file

    Returns:
        The scanner after a completed scan

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return scan_source(source)
