#!/usr/bin/env python3
"""pygmentize-compatible lexer tool printing hex-encoded raw tokens.

Stock ``pygmentize -f raw`` prints payloads with repr(), which is awkward
to take apart line by line. This tool prints the UTF-8 bytes of every
token as hex instead, so a payload never contains a tab or a newline.

Usage:
    python -m pygkit.tool -f raw -l LEXER FILE
    python -m pygkit.tool -N FILENAME

Output of the raw mode, one line per token::

    Token.Keyword\t'646566'
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from pygments import highlight
from pygments.formatter import Formatter
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

# pygmentize -N prints this when no lexer matches
FALLBACK_LEXER = "text"


class HexRawFormatter(Formatter):
    """Raw token formatter with hex-encoded payloads."""

    name = "Hex raw tokens"
    aliases = ["hexraw"]

    def format_unencoded(self, tokensource, outfile: TextIO) -> None:
        for ttype, value in tokensource:
            outfile.write(f"{ttype!r}\t'{value.encode('utf-8').hex()}'\n")


def guess_lexer_name(filename: str) -> str:
    """Return the first alias of the lexer pygments picks for filename."""
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return FALLBACK_LEXER
    return lexer.aliases[0] if lexer.aliases else FALLBACK_LEXER


def lex_file(path: str, lexer_name: str, outfile: TextIO) -> None:
    """Lex the UTF-8 file at path and write hex raw tokens to outfile.

    Raises:
        ClassNotFound: If pygments has no lexer of that name
    """
    lexer = get_lexer_by_name(lexer_name, stripnl=False)
    with open(path, encoding="utf-8", newline="") as f:
        code = f.read()
    highlight(code, lexer, HexRawFormatter(), outfile)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pygkit-tool",
        description="Lex a file with pygments and print hex-encoded raw tokens",
    )
    parser.add_argument("-f", dest="formatter", choices=["raw"], help="Output format")
    parser.add_argument("-l", dest="lexer", help="Lexer name")
    parser.add_argument("-N", dest="guess", metavar="FILENAME", help="Print the lexer for FILENAME")
    parser.add_argument("infile", nargs="?", help="File to lex")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.guess is not None:
        print(guess_lexer_name(args.guess))
        return 0

    if args.formatter != "raw" or not args.lexer or not args.infile:
        parser.error("-f raw -l LEXER FILE or -N FILENAME is required")

    try:
        lex_file(args.infile, args.lexer, sys.stdout)
    except ClassNotFound:
        print(f"Error: no lexer for alias {args.lexer!r} found", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
