"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox language.

Key Features:
- Single-character punctuation and operators
- One-character lookahead for =, ==, !, !=, <, <=, >, >=
- Line tracking for diagnostics
- Error recovery: unknown characters are reported and skipped

Author: loxscan developers
"""

from .tokens import Token, TokenType
from .scanner import Scanner, scan_source, scan_file
from .errors import LexError

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "LexError",
    "scan_source",
    "scan_file",
]
