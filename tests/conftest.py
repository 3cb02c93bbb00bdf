"""Shared fixtures: a fake lexer tool runner and output line helpers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from pygkit.config import reset_tool_config
from pygkit.runner import ToolResult


def hex_line(kind: str, text: str, wrapper: str = "'") -> str:
    """Build one line of hex raw tool output."""
    return f"{kind}\t{wrapper}{text.encode('utf-8').hex()}{wrapper}"


def tool_output(*pairs: tuple[str, str]) -> str:
    return "".join(hex_line(kind, text) + "\n" for kind, text in pairs)


class FakeRunner:
    """ToolRunner that returns canned output and records its calls.

    For tokenize calls the scratch file named by the last argument is read
    while it still exists, so tests can check what the tool would have seen.
    """

    def __init__(self, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.result = ToolResult(stdout=stdout, stderr=stderr, returncode=returncode)
        self.calls: list[list[str]] = []
        self.seen_code: str | None = None
        self.seen_path: Path | None = None

    def run(self, arguments: Sequence[str]) -> ToolResult:
        arguments = list(arguments)
        self.calls.append(arguments)
        if arguments[:1] == ["-f"]:
            self.seen_path = Path(arguments[-1])
            self.seen_code = self.seen_path.read_bytes().decode("utf-8")
        return self.result


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture(autouse=True)
def _default_tool_config():
    yield
    reset_tool_config()
