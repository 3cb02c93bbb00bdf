"""
pygkit — pygments tokens and ranges for editor syntax highlighting

A thin bridge between a text editor component and a pygments-compatible
lexer tool. The tool does all of the lexing in a subprocess; pygkit
decodes its output into tokens, finds each token's range in the source
text and maps tokens to colors through a theme.

Quick Start:
    >>> from pygkit import find_lexer, tokenize
    >>> lexer = find_lexer("example.py")
    >>> tokenize("x = 1", lexer)
    [Token(NAME, 'x'), Token(WHITESPACE, ' '), Token(OPERATOR, '='), ...]

Coloring an editor buffer:
    >>> from pygkit import DictTheme, parse_with_theme
    >>> theme = DictTheme.from_pygments_style("monokai")
    >>> def apply(rng, token, attributes):
    ...     widget.set_attributes(rng.start, rng.length, attributes)
    ...     return True
    >>> parse_with_theme(source, "python", theme, apply)

Installation:
    pip install pygkit
"""

from pygkit.attributed import BACKGROUND, FOREGROUND, parse_with_theme, token_attributes
from pygkit.config import (
    ToolConfig,
    get_tool_config,
    reset_tool_config,
    set_tool_config,
    tool_config_context,
)
from pygkit.decoder import decode_lines, decode_output, decode_payload
from pygkit.errors import (
    CannotCreateTempFileError,
    NoLexerToolError,
    PygkitError,
    ThemeError,
    ToolStderrError,
)
from pygkit.parser import Range, find_lexer, map_ranges, parse, tokenize
from pygkit.runner import SubprocessRunner, ToolResult, ToolRunner, scratch_file
from pygkit.theme import DictTheme, Scope, Theme
from pygkit.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "BACKGROUND",
    "FOREGROUND",
    "CannotCreateTempFileError",
    "DictTheme",
    "NoLexerToolError",
    "PygkitError",
    "Range",
    "Scope",
    "SubprocessRunner",
    "Theme",
    "ThemeError",
    "Token",
    "TokenKind",
    "ToolConfig",
    "ToolResult",
    "ToolRunner",
    "ToolStderrError",
    "decode_lines",
    "decode_output",
    "decode_payload",
    "find_lexer",
    "get_tool_config",
    "map_ranges",
    "parse",
    "parse_with_theme",
    "reset_tool_config",
    "scratch_file",
    "set_tool_config",
    "token_attributes",
    "tokenize",
    "tool_config_context",
]
