"""
loxscan

Lexical scanner for the Lox language: turns source text into a token
stream and reports unexpected characters without stopping.

Architecture:
    loxscan/
    ├── lexer/           # Tokens, errors and the scanner
    └── cli.py           # `loxscan tokenize <file>` command

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LexError, scan_source, scan_file

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "LexError",

    # Convenience functions
    "scan_source",
    "scan_file",

    # Version info
    "__version__",
    "__license__",
]
