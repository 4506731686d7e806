"""
Error handling for the Lox lexer.

Lexical errors never stop a scan: the scanner records them and keeps going,
so every problem in a file is reported in one pass.

Author: loxscan developers
"""

from typing import Optional


class LexError(Exception):
    """
    Raised while classifying a character the language does not recognize.

    The scan loop catches it, stores it and skips the offending character.
    """

    def __init__(
        self,
        message: str,
        line: int,
        character: Optional[str] = None,
        code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.character = character
        self.code = code

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def __repr__(self) -> str:
        return f"LexError({self.message!r}, line={self.line}, code={self.code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexError):
            return NotImplemented
        return (self.message, self.line, self.character, self.code) == (
            other.message, other.line, other.character, other.code
        )

    def __hash__(self) -> int:
        return hash((self.message, self.line, self.character, self.code))


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
}


def create_unexpected_character_error(char: str, line: int) -> LexError:
    """Create an error for a character that starts no known token."""
    return LexError(
        message=f"Unexpected character: {char}",
        line=line,
        character=char,
        code="L001"
    )
