"""Tests for the subprocess runner, tool resolution and scratch files."""

import sys

import pytest

from pygkit import (
    CannotCreateTempFileError,
    NoLexerToolError,
    SubprocessRunner,
    ToolConfig,
    scratch_file,
    tool_config_context,
)
from pygkit.runner import resolve_tool_command


def python_tool(source: str) -> ToolConfig:
    """Config whose lexer tool is an inline Python program."""
    return ToolConfig(tool_command=(sys.executable, "-c", source))


class TestResolveToolCommand:
    """Locating the lexer tool."""

    def test_bundled_tool_by_default(self) -> None:
        assert resolve_tool_command(ToolConfig()) == [sys.executable, "-m", "pygkit.tool"]

    def test_bundled_tool_needs_pygments(self, monkeypatch) -> None:
        import importlib.util

        real_find_spec = importlib.util.find_spec
        monkeypatch.setattr(
            importlib.util,
            "find_spec",
            lambda name, *a: None if name == "pygments" else real_find_spec(name, *a),
        )
        with pytest.raises(NoLexerToolError, match="pygments"):
            resolve_tool_command(ToolConfig())

    def test_custom_command(self) -> None:
        config = ToolConfig(tool_command=(sys.executable, "/opt/pygmentize"))
        assert resolve_tool_command(config) == [sys.executable, "/opt/pygmentize"]

    def test_missing_executable(self) -> None:
        config = ToolConfig(tool_command=("definitely-not-a-lexer-tool-42",))
        with pytest.raises(NoLexerToolError, match="definitely-not-a-lexer-tool-42"):
            resolve_tool_command(config)

    def test_uses_active_config(self) -> None:
        with tool_config_context(ToolConfig(tool_command=("definitely-not-a-lexer-tool-42",))):
            with pytest.raises(NoLexerToolError):
                resolve_tool_command()


class TestSubprocessRunner:
    """Running a real process."""

    def test_captures_stdout_and_arguments(self) -> None:
        runner = SubprocessRunner(python_tool("import sys; print(' '.join(sys.argv[1:]))"))
        result = runner.run(["-N", "a.py"])
        assert result.returncode == 0
        assert result.stdout.strip() == "-N a.py"
        assert result.stderr == ""

    def test_captures_stderr_and_status(self) -> None:
        runner = SubprocessRunner(
            python_tool("import sys; sys.stderr.write('bad lexer'); sys.exit(3)")
        )
        result = runner.run([])
        assert result.returncode == 3
        assert result.stderr == "bad lexer"

    def test_large_output_on_both_pipes(self) -> None:
        source = (
            "import sys\n"
            "sys.stderr.write('e' * 200000)\n"
            "sys.stdout.write('o' * 200000)\n"
        )
        result = SubprocessRunner(python_tool(source)).run([])
        assert len(result.stdout) == 200000
        assert len(result.stderr) == 200000

    def test_undecodable_stdout_is_empty(self) -> None:
        source = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"
        assert SubprocessRunner(python_tool(source)).run([]).stdout == ""

    def test_reads_config_at_run_time(self) -> None:
        runner = SubprocessRunner()
        with tool_config_context(python_tool("print('configured')")):
            assert runner.run([]).stdout.strip() == "configured"


class TestScratchFile:
    """Scratch file lifetime."""

    def test_content_and_name(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path))
        with scratch_file("x = 'é'\r\n", config) as path:
            assert path.parent == tmp_path
            assert path.name.startswith("pygktmp.")
            assert path.read_bytes() == "x = 'é'\r\n".encode()
        assert not path.exists()

    def test_unique_names(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path))
        with scratch_file("a", config) as first, scratch_file("b", config) as second:
            assert first != second

    def test_custom_prefix(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path), temp_prefix="lex-")
        with scratch_file("", config) as path:
            assert path.name.startswith("lex-")

    def test_removed_on_exception(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path))
        with pytest.raises(RuntimeError):
            with scratch_file("code", config):
                raise RuntimeError("tool crashed")
        assert list(tmp_path.iterdir()) == []

    def test_already_removed_is_fine(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path))
        with scratch_file("code", config) as path:
            path.unlink()
        assert list(tmp_path.iterdir()) == []

    def test_missing_directory(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path / "missing"))
        with pytest.raises(CannotCreateTempFileError):
            with scratch_file("code", config):
                pass

    def test_unencodable_code(self, tmp_path) -> None:
        config = ToolConfig(temp_dir=str(tmp_path))
        with pytest.raises(CannotCreateTempFileError):
            with scratch_file("lone \ud800 surrogate", config):
                pass
        assert list(tmp_path.iterdir()) == []
