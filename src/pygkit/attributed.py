"""Parse source text and emit display attributes per token.

parse_with_theme() runs parse() and turns each token into an attribute
dict an editor widget can apply to the token's range. Tokens that would
get no attributes are never reported.

Example:
    >>> theme = DictTheme.from_pygments_style("monokai")
    >>> def apply(rng, token, attributes):
    ...     print(rng, attributes)
    ...     return True
    >>> parse_with_theme("def f(): pass", "python", theme, apply)
    Range(start=0, length=3) {'foreground': '#66d9ef'}
    ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pygkit.parser import Range, parse
from pygkit.runner import ToolRunner
from pygkit.theme import Theme
from pygkit.tokens import Token

FOREGROUND = "foreground"
BACKGROUND = "background"

AttributedCallback = Callable[[Range, Token, dict[str, Any]], bool]


def token_attributes(token: Token, theme: Theme) -> dict[str, Any]:
    """Resolve the display attributes of token in theme.

    Font styles are not turned into attributes.

    Returns:
        Mapping with FOREGROUND and/or BACKGROUND, empty if unstyled
    """
    selector = token.kind.scope
    if selector is None:
        return {}
    scope = theme.resolve_scope(selector)
    if scope is None:
        return {}

    attributes: dict[str, Any] = {}
    if scope.foreground is not None:
        attributes[FOREGROUND] = scope.foreground
    if scope.background is not None:
        attributes[BACKGROUND] = scope.background
    return attributes


def parse_with_theme(
    code: str,
    lexer: str,
    theme: Theme,
    callback: AttributedCallback,
    *,
    runner: ToolRunner | None = None,
) -> None:
    """Parse code with a lexer and color it with theme.

    Args:
        code: Code to parse
        lexer: Lexer to tokenize with
        theme: Theme used to resolve token scopes
        callback: Called with (range, token, attributes) for styled tokens;
            return False to stop
        runner: Tool runner to use (a SubprocessRunner if None)

    Raises:
        NoLexerToolError: If the tool cannot be located
        CannotCreateTempFileError: If the scratch file cannot be created
        ToolStderrError: If the tool exits with a non-zero status
    """

    def on_token(rng: Range, token: Token) -> bool:
        attributes = token_attributes(token, theme)
        if not attributes:
            return True
        return callback(rng, token, attributes)

    parse(code, lexer, on_token, runner=runner)
