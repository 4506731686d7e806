"""
Token definitions for the Lox lexer.

This module defines the token types produced by the scanner:
- Single-character punctuation and arithmetic operators
- One-or-two character comparison operators (resolved with one character of lookahead)
- The end-of-input marker

Author: loxscan developers
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types recognized by the scanner.

    Member names double as the rendered kind names (LEFT_PAREN, EQUAL_EQUAL, ...).
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `lexeme` is the exact source text the token was scanned from, `literal`
    the decoded value for literal-bearing kinds (None otherwise) and `line`
    the 1-based line the token started on.
    """
    type: TokenType
    lexeme: str
    literal: Optional[Any]
    line: int

    def __str__(self) -> str:
        literal = "null" if self.literal is None else str(self.literal)
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, line={self.line})")

    @property
    def is_eof(self) -> bool:
        """Check if this token marks the end of input."""
        return self.type == TokenType.EOF


# Lookup tables used by the scanner

SINGLE_CHARACTER_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first character -> (type without "=", type with "=")
EQUAL_SUFFIXED_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

# Skipped silently. Newlines are handled separately since they bump the line counter.
WHITESPACE = frozenset({" ", "\t", "\r"})
NEWLINE = "\n"
