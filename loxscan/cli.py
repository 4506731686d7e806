#!/usr/bin/env python3
"""
loxscan command line
====================

Usage:
    loxscan tokenize <filename>

Prints one token per line to stdout and one line per lexical error to
stderr. Exits with 0 when the file scanned cleanly and 65 when it
contained unexpected characters.

Options:
    -v, --verbose   Enable debug logging
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import scan_source

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LEXICAL_ERROR = 65

LOG_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def _read_source(filename: str) -> str:
    try:
        with open(filename, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", filename, e)
        print(f"Failed to read file {filename}", file=sys.stderr)
        return ""


def tokenize_command(args: argparse.Namespace) -> int:
    """Scan a file and print its tokens and errors."""
    source = _read_source(args.filename)
    scanner = scan_source(source)

    for line in scanner.render_errors():
        print(line, file=sys.stderr)
    for line in scanner.render_tokens():
        print(line)

    return EXIT_LEXICAL_ERROR if scanner.has_errors() else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="Lexical scanner for the Lox language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxscan tokenize program.lox        # Print tokens, exit 65 on lexical errors
    loxscan -v tokenize program.lox     # Same, with debug logging
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    commands = parser.add_subparsers(dest='command', metavar='command')
    commands.required = True

    tokenize = commands.add_parser('tokenize', help='Print the tokens of a source file')
    tokenize.add_argument('filename', help='Path to a UTF-8 source file')
    tokenize.set_defaults(handler=tokenize_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the loxscan command"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
