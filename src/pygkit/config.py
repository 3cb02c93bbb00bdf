"""ContextVar-based tool configuration for pygkit.

Provides context-local configuration using Python's ContextVars (PEP 567).
The configuration says which lexer tool to run, where scratch files go and
which units ranges are reported in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so two editors in two threads can use different tools without locks.

Usage:
    from pygkit.config import ToolConfig, tool_config_context

    with tool_config_context(ToolConfig(tool_command=("pygmentize-hex",))):
        tokens = tokenize("x = 1", "python")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

OFFSET_UNITS = ("utf-16", "codepoint")


@dataclass(frozen=True, slots=True)
class ToolConfig:
    """Immutable tool configuration.

    Attributes:
        tool_command: Command prefix used to run the lexer tool. None selects
            the bundled tool (``python -m pygkit.tool``).
        temp_dir: Directory for scratch files. None uses the platform default.
        temp_prefix: File name prefix of scratch files.
        offset_units: Units of reported ranges, "utf-16" code units or
            Python "codepoint" indices.

    """

    tool_command: tuple[str, ...] | None = None
    temp_dir: str | None = None
    temp_prefix: str = "pygktmp."
    offset_units: str = "utf-16"

    def __post_init__(self) -> None:
        if self.offset_units not in OFFSET_UNITS:
            raise ValueError(
                f"offset_units must be one of {OFFSET_UNITS}, got {self.offset_units!r}"
            )
        if self.tool_command is not None and not self.tool_command:
            raise ValueError("tool_command must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ToolConfig:
        """Create ToolConfig from dictionary.

        Only includes keys that are valid ToolConfig fields; unknown keys
        are silently ignored. A list ``tool_command`` is turned into a tuple.

        Example:
            >>> config = ToolConfig.from_dict({
            ...     "tool_command": ["pygmentize-hex"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tool_command
            ('pygmentize-hex',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if filtered.get("tool_command") is not None:
            filtered["tool_command"] = tuple(filtered["tool_command"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ToolConfig = ToolConfig()

_tool_config: ContextVar[ToolConfig] = ContextVar(
    "tool_config",
    default=_DEFAULT_CONFIG,
)


def get_tool_config() -> ToolConfig:
    """Get current tool configuration (context-local)."""
    return _tool_config.get()


def set_tool_config(config: ToolConfig) -> None:
    """Set tool configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _tool_config.set(config)


def reset_tool_config() -> None:
    """Reset to default configuration."""
    _tool_config.set(_DEFAULT_CONFIG)


@contextmanager
def tool_config_context(config: ToolConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with tool_config_context(ToolConfig(offset_units="codepoint")):
        ...     get_tool_config().offset_units
        'codepoint'

    """
    previous = _tool_config.get()
    _tool_config.set(config)
    try:
        yield
    finally:
        _tool_config.set(previous)


__all__ = [
    "OFFSET_UNITS",
    "ToolConfig",
    "get_tool_config",
    "set_tool_config",
    "reset_tool_config",
    "tool_config_context",
]
