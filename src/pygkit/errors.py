"""Exception classes for pygkit.

Provides standardized exceptions for the failures that end a call.
Malformed tool output is not one of them: the decoder stops early and
returns the tokens it already has.
"""

from __future__ import annotations


class PygkitError(Exception):
    """Base exception for all pygkit errors.

    Subclass this for specific error categories.
    """

    pass


class NoLexerToolError(PygkitError):
    """The external lexer tool could not be located or started."""

    pass


class CannotCreateTempFileError(PygkitError):
    """The scratch file handed to the lexer tool could not be created."""

    pass


class ToolStderrError(PygkitError):
    """The lexer tool exited with a non-zero status.

    The tool's standard error is kept verbatim on ``stderr`` and is also
    the exception message.
    """

    def __init__(self, stderr: str, returncode: int | None = None) -> None:
        """Initialize tool failure.

        Args:
            stderr: Captured standard error text of the tool
            returncode: Exit status of the tool (optional)
        """
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(stderr)


class ThemeError(PygkitError):
    """A theme could not be built from the given input."""

    def __init__(self, theme_name: str, message: str) -> None:
        self.theme_name = theme_name
        super().__init__(f"Theme '{theme_name}': {message}")
