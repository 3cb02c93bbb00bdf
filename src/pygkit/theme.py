"""Themes: scope selectors to display styles.

A theme answers one question: which style does a scope selector such as
``string.quoted.double`` get? Any object with a resolve_scope() method
works; DictTheme is the in-memory implementation shipped with pygkit.

Reading theme files is left to the embedding application. DictTheme can
be built from plain mappings or from a pygments style.

Example:
    >>> theme = DictTheme.from_dict({"string": {"foreground": "#e6db74"}})
    >>> theme.resolve_scope("string.quoted.double")
    Scope(foreground='#e6db74', background=None, font_styles=frozenset())
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from pygkit.errors import ThemeError
from pygkit.tokens import TokenKind

FONT_STYLES = ("bold", "italic", "underline")


@dataclass(frozen=True, slots=True)
class Scope:
    """Display style for one scope selector.

    Attributes:
        foreground: Foreground color (e.g. "#f92672") or None
        background: Background color or None
        font_styles: Subset of FONT_STYLES

    """

    foreground: str | None = None
    background: str | None = None
    font_styles: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self.foreground is None and self.background is None and not self.font_styles


class Theme(Protocol):
    """Protocol for themes consulted by parse_with_theme()."""

    def resolve_scope(self, selector: str) -> Scope | None:
        """Return the style for selector, or None if the theme has none."""
        ...


class DictTheme:
    """Theme backed by a dict of scope selectors.

    Lookup falls back along dotted segments, so a theme that only styles
    ``string`` also styles ``string.quoted.double``.
    """

    __slots__ = ("name", "_scopes")

    def __init__(self, scopes: Mapping[str, Scope] | None = None, name: str = "") -> None:
        self.name = name
        self._scopes: dict[str, Scope] = dict(scopes or {})

    def __len__(self) -> int:
        return len(self._scopes)

    def __repr__(self) -> str:
        return f"DictTheme({self.name!r}, {len(self._scopes)} scopes)"

    def resolve_scope(self, selector: str) -> Scope | None:
        candidate = selector
        while candidate:
            scope = self._scopes.get(candidate)
            if scope is not None:
                return scope
            candidate, _, _ = candidate.rpartition(".")
        return None

    @classmethod
    def from_dict(cls, scopes: Mapping[str, Mapping[str, Any]], name: str = "") -> DictTheme:
        """Create a theme from plain mappings.

        Each value may hold "foreground", "background" and "font_styles";
        other keys are ignored.

        Example:
            >>> theme = DictTheme.from_dict({
            ...     "keyword": {"foreground": "#f92672", "font_styles": ["bold"]},
            ... })
            >>> theme.resolve_scope("keyword.control").font_styles
            frozenset({'bold'})

        """
        built = {
            selector: Scope(
                foreground=values.get("foreground"),
                background=values.get("background"),
                font_styles=frozenset(values.get("font_styles") or ()),
            )
            for selector, values in scopes.items()
        }
        return cls(built, name=name)

    @classmethod
    def from_pygments_style(cls, style_name: str) -> DictTheme:
        """Create a theme from a named pygments style.

        Every TokenKind that has a scope selector gets the colors pygments
        uses for the matching token type. Kinds whose style is empty are
        skipped, so the first kind with a non-empty style claims a shared
        selector.

        Raises:
            ThemeError: If pygments has no style of that name
        """
        from pygments.styles import get_style_by_name
        from pygments.token import string_to_tokentype
        from pygments.util import ClassNotFound

        try:
            style = get_style_by_name(style_name)
        except ClassNotFound as e:
            raise ThemeError(style_name, "no such pygments style") from e

        scopes: dict[str, Scope] = {}
        for kind in TokenKind:
            selector = kind.scope
            if selector is None or selector in scopes:
                continue
            ttype = string_to_tokentype(kind.value.removeprefix("Token").lstrip("."))
            style_def = style.style_for_token(ttype)
            scope = Scope(
                foreground=f"#{style_def['color']}" if style_def["color"] else None,
                background=f"#{style_def['bgcolor']}" if style_def["bgcolor"] else None,
                font_styles=frozenset(name for name in FONT_STYLES if style_def[name]),
            )
            if not scope.is_empty:
                scopes[selector] = scope
        return cls(scopes, name=style_name)
