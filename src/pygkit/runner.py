"""Running the external lexer tool.

The tool is reached through the ToolRunner protocol so tests and
embedding applications can swap the subprocess for something else. The
default SubprocessRunner spawns the command from the active ToolConfig.

The tool only lexes files, so source text is written to a scratch file
first; scratch_file() removes it on every exit path.

Example:
    >>> runner = SubprocessRunner()
    >>> result = runner.run(["-N", "setup.py"])
    >>> result.stdout.strip()
    'python'
"""

from __future__ import annotations

import contextlib
import importlib.util
import os
import shutil
import subprocess
import sys
import tempfile
import uuid
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pygkit.config import ToolConfig, get_tool_config
from pygkit.errors import CannotCreateTempFileError, NoLexerToolError
from pygkit.utils.logger import get_logger

logger = get_logger(__name__)

BUNDLED_TOOL_MODULE = "pygkit.tool"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Captured outcome of one tool invocation."""

    stdout: str
    stderr: str
    returncode: int


class ToolRunner(Protocol):
    """Protocol for anything that can run the lexer tool.

    Implementations receive only the tool arguments; which executable
    answers them is their business.
    """

    def run(self, arguments: Sequence[str]) -> ToolResult:
        """Run the tool to completion and capture its output."""
        ...


def resolve_tool_command(config: ToolConfig | None = None) -> list[str]:
    """Return the command prefix for the lexer tool.

    Raises:
        NoLexerToolError: If the tool cannot be located
    """
    config = config or get_tool_config()

    if config.tool_command is None:
        if importlib.util.find_spec("pygments") is None:
            raise NoLexerToolError("pygments is not installed; the bundled lexer tool cannot run")
        return [sys.executable, "-m", BUNDLED_TOOL_MODULE]

    executable = config.tool_command[0]
    if shutil.which(executable) is None and not os.path.isfile(executable):
        raise NoLexerToolError(f"Lexer tool not found: {executable}")
    return list(config.tool_command)


class SubprocessRunner:
    """Run the lexer tool as a blocking subprocess.

    Standard output and standard error are both read to the end before the
    exit status is collected. There is no timeout.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ToolConfig | None = None) -> None:
        self._config = config

    def run(self, arguments: Sequence[str]) -> ToolResult:
        command = resolve_tool_command(self._config)
        command.extend(arguments)
        logger.debug("Running lexer tool: %s", command)

        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except (FileNotFoundError, PermissionError) as e:
            raise NoLexerToolError(f"Cannot start lexer tool {command[0]}: {e}") from e

        try:
            stdout = completed.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Lexer tool output is not valid UTF-8, ignoring it")
            stdout = ""
        stderr = completed.stderr.decode("utf-8", errors="replace")

        return ToolResult(stdout=stdout, stderr=stderr, returncode=completed.returncode)


@contextlib.contextmanager
def scratch_file(code: str, config: ToolConfig | None = None) -> Iterator[Path]:
    """Write code to a uniquely named scratch file for the lexer tool.

    The file is named ``<prefix><uuid4>`` inside the configured (or the
    platform) temp directory and is removed when the block exits, whether
    normally or by an exception. A failed removal is ignored.

    Raises:
        CannotCreateTempFileError: If the file cannot be created or written
    """
    config = config or get_tool_config()
    directory = Path(config.temp_dir or tempfile.gettempdir())
    path = directory / f"{config.temp_prefix}{uuid.uuid4()}"

    try:
        with open(path, "x", encoding="utf-8", newline="") as f:
            f.write(code)
    except FileExistsError as e:
        raise CannotCreateTempFileError(f"Scratch file already exists: {path}") from e
    except (OSError, UnicodeEncodeError) as e:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        raise CannotCreateTempFileError(f"Cannot create scratch file {path}: {e}") from e

    logger.debug("Created scratch file %s", path)
    try:
        yield path
    finally:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        logger.debug("Removed scratch file %s", path)
