"""Tokenize source text with the lexer tool and recover token ranges.

tokenize() returns the merged tokens; parse() additionally locates every
token in the source text and streams ``(range, token)`` pairs to a
callback until the callback returns False.

Range recovery is a forward-only substring search. A token whose payload
cannot be found is reported with Range.unresolved() rather than matched
against an earlier occurrence.

Example:
    >>> def show(rng, token):
    ...     print(rng, token)
    ...     return True
    >>> parse("x = 1", "python", show)
    Range(start=0, length=1) Token(NAME, 'x')
    ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import PurePath

from pygkit.config import get_tool_config
from pygkit.decoder import decode_output
from pygkit.errors import ToolStderrError
from pygkit.runner import SubprocessRunner, ToolRunner, scratch_file
from pygkit.tokens import Token
from pygkit.utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND = -1


@dataclass(frozen=True, slots=True)
class Range:
    """A span of the source text.

    Units are UTF-16 code units or code points, depending on
    ToolConfig.offset_units.

    Attributes:
        start: Offset of the first unit, NOT_FOUND when unresolved
        length: Number of units

    """

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def resolved(self) -> bool:
        return self.start != NOT_FOUND

    @classmethod
    def unresolved(cls) -> Range:
        """Range for a token whose payload was not found in the source."""
        return cls(start=NOT_FOUND, length=0)


ParseCallback = Callable[[Range, Token], bool]


def _utf16_length(text: str) -> int:
    # Characters outside the BMP take a surrogate pair
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def launch_tool(arguments: list[str], runner: ToolRunner | None = None) -> str:
    """Run the lexer tool and return its standard output.

    Raises:
        NoLexerToolError: If the tool cannot be located
        ToolStderrError: If the tool exits with a non-zero status
    """
    if runner is None:
        runner = SubprocessRunner()
    result = runner.run(arguments)
    if result.returncode != 0:
        logger.debug("Lexer tool exited with status %d", result.returncode)
        raise ToolStderrError(result.stderr, result.returncode)
    return result.stdout


def tokenize(code: str, lexer: str, *, runner: ToolRunner | None = None) -> list[Token]:
    """Obtain tokens from the lexer tool for code and the chosen lexer.

    Args:
        code: Source text
        lexer: Lexer name understood by the tool (e.g. "python")
        runner: Tool runner to use (a SubprocessRunner if None)

    Returns:
        Tokens in source order, consecutive same-kind output merged

    Raises:
        NoLexerToolError: If the tool cannot be located
        CannotCreateTempFileError: If the scratch file cannot be created
        ToolStderrError: If the tool exits with a non-zero status
    """
    with scratch_file(code) as path:
        output = launch_tool(["-f", "raw", "-l", lexer, str(path)], runner)
    return decode_output(output)


def map_ranges(
    code: str,
    tokens: Iterable[Token],
    callback: ParseCallback,
    *,
    offset_units: str | None = None,
) -> None:
    """Locate each token in code and pass its range to callback.

    The search starts where the previous match ended and never moves
    back. Processing stops once the search position reaches the end of
    code or the callback returns a falsy value.

    Args:
        code: Source text the tokens were produced from
        tokens: Tokens in source order
        callback: Called with (range, token); return False to stop
        offset_units: "utf-16" or "codepoint" (active config if None)
    """
    utf16 = (offset_units or get_tool_config().offset_units) == "utf-16"
    length = len(code)
    position = 0
    # code point / UTF-16 offsets of the last match start
    cursor = 0
    cursor_utf16 = 0

    for token in tokens:
        if position >= length:
            break

        payload = token.payload
        start = code.find(payload, position)
        if start == NOT_FOUND:
            rng = Range.unresolved()
            position += len(payload)
        else:
            if utf16:
                cursor_utf16 += _utf16_length(code[cursor:start])
                cursor = start
                rng = Range(cursor_utf16, _utf16_length(payload))
            else:
                rng = Range(start, len(payload))
            position = start + len(payload)

        if not callback(rng, token):
            break


def parse(
    code: str,
    lexer: str,
    callback: ParseCallback,
    *,
    runner: ToolRunner | None = None,
) -> None:
    """Parse code with a lexer and stream tokens with their ranges.

    Args:
        code: Code to parse
        lexer: Lexer to tokenize with
        callback: Called with (range, token); return False to stop
        runner: Tool runner to use (a SubprocessRunner if None)

    Raises:
        NoLexerToolError: If the tool cannot be located
        CannotCreateTempFileError: If the scratch file cannot be created
        ToolStderrError: If the tool exits with a non-zero status
    """
    tokens = tokenize(code, lexer, runner=runner)
    map_ranges(code, tokens, callback)


def find_lexer(filename: str, *, runner: ToolRunner | None = None) -> str | None:
    """Ask the lexer tool for a suitable lexer for filename.

    Only the last path component is passed to the tool.

    Returns:
        Lexer name, or None if the tool printed nothing
    """
    output = launch_tool(["-N", PurePath(filename).name], runner).strip()
    return output or None
