"""Tests for parse_with_theme() and token_attributes()."""

from conftest import tool_output

from pygkit import (
    BACKGROUND,
    FOREGROUND,
    DictTheme,
    Range,
    Scope,
    Token,
    TokenKind,
    ToolConfig,
    parse_with_theme,
    token_attributes,
    tool_config_context,
)

THEME = DictTheme(
    {
        "keyword": Scope(foreground="#f92672"),
        "string": Scope(foreground="#e6db74", background="#272822"),
        "comment": Scope(font_styles=frozenset({"italic"})),
        "entity.name.function": Scope(background="#49483e"),
    }
)

OUTPUT = tool_output(
    ("Token.Keyword", "def"),
    ("Token.Text.Whitespace", " "),
    ("Token.Name.Function", "f"),
    ("Token.Punctuation", "():"),
    ("Token.Text.Whitespace", " "),
    ("Token.Keyword", "return"),
    ("Token.Text.Whitespace", " "),
    ("Token.Literal.String.Single", "'s'"),
    ("Token.Text.Whitespace", "  "),
    ("Token.Comment.Single", "# c"),
    ("Token.Name.Constant", "X"),
)
CODE = "def f(): return 's'  # cX"


class TestTokenAttributes:
    """Attribute resolution for one token."""

    def test_foreground_only(self) -> None:
        assert token_attributes(Token(TokenKind.KEYWORD, "if"), THEME) == {FOREGROUND: "#f92672"}

    def test_foreground_and_background(self) -> None:
        attributes = token_attributes(Token(TokenKind.STRING_DOUBLE, '"x"'), THEME)
        assert attributes == {FOREGROUND: "#e6db74", BACKGROUND: "#272822"}

    def test_background_only(self) -> None:
        attributes = token_attributes(Token(TokenKind.NAME_FUNCTION, "f"), THEME)
        assert attributes == {BACKGROUND: "#49483e"}

    def test_kind_without_scope(self) -> None:
        assert token_attributes(Token(TokenKind.PUNCTUATION, "("), THEME) == {}

    def test_scope_missing_from_theme(self) -> None:
        assert token_attributes(Token(TokenKind.NAME_CONSTANT, "X"), THEME) == {}

    def test_font_styles_are_not_attributes(self) -> None:
        assert token_attributes(Token(TokenKind.COMMENT_SINGLE, "# c"), THEME) == {}


class TestParseWithTheme:
    """Only styled tokens reach the callback."""

    def test_emits_styled_tokens(self, fake_runner) -> None:
        seen = []

        def callback(rng, token, attributes):
            seen.append((rng, token.payload, attributes))
            return True

        parse_with_theme(CODE, "python", THEME, callback, runner=fake_runner(stdout=OUTPUT))
        assert seen == [
            (Range(0, 3), "def", {FOREGROUND: "#f92672"}),
            (Range(4, 1), "f", {BACKGROUND: "#49483e"}),
            (Range(9, 6), "return", {FOREGROUND: "#f92672"}),
            (Range(16, 3), "'s'", {FOREGROUND: "#e6db74", BACKGROUND: "#272822"}),
        ]

    def test_false_stops_everything(self, fake_runner) -> None:
        seen = []

        def callback(rng, token, attributes):
            seen.append(token.payload)
            return False

        parse_with_theme(CODE, "python", THEME, callback, runner=fake_runner(stdout=OUTPUT))
        assert seen == ["def"]

    def test_scratch_file_removed_after_early_stop(self, fake_runner, tmp_path) -> None:
        """Stopping at the first styled token still leaves no scratch file behind."""
        with tool_config_context(ToolConfig(temp_dir=str(tmp_path))):
            parse_with_theme(
                CODE, "python", THEME, lambda *args: False, runner=fake_runner(stdout=OUTPUT)
            )
        assert list(tmp_path.iterdir()) == []

    def test_empty_theme_never_calls_back(self, fake_runner) -> None:
        seen = []
        parse_with_theme(
            CODE,
            "python",
            DictTheme(),
            lambda *args: seen.append(args) or True,
            runner=fake_runner(stdout=OUTPUT),
        )
        assert seen == []

    def test_any_theme_object_works(self, fake_runner) -> None:
        class Everything:
            def resolve_scope(self, selector):
                return Scope(foreground=selector)

        seen = []
        parse_with_theme(
            "def",
            "python",
            Everything(),
            lambda rng, token, attributes: seen.append(attributes) or True,
            runner=fake_runner(stdout=tool_output(("Token.Keyword", "def"))),
        )
        assert seen == [{FOREGROUND: "keyword"}]
