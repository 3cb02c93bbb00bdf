"""Token and TokenKind definitions for pygkit.

The lexer tool prints one line per token with the dotted name of a
pygments token type. TokenKind lists the pygments standard vocabulary;
anything else resolves to TokenKind.GENERIC so no text is ever dropped.

Each kind may carry a TextMate-style scope selector, which is what themes
are keyed on.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Semantic lexical categories reported by the lexer tool.

    Values are the names the tool prints, e.g. ``Token.Keyword.Constant``.
    """

    TOKEN = "Token"

    # Text
    TEXT = "Token.Text"
    WHITESPACE = "Token.Text.Whitespace"
    ESCAPE = "Token.Escape"
    ERROR = "Token.Error"
    OTHER = "Token.Other"

    # Keywords
    KEYWORD = "Token.Keyword"
    KEYWORD_CONSTANT = "Token.Keyword.Constant"
    KEYWORD_DECLARATION = "Token.Keyword.Declaration"
    KEYWORD_NAMESPACE = "Token.Keyword.Namespace"
    KEYWORD_PSEUDO = "Token.Keyword.Pseudo"
    KEYWORD_RESERVED = "Token.Keyword.Reserved"
    KEYWORD_TYPE = "Token.Keyword.Type"

    # Names
    NAME = "Token.Name"
    NAME_ATTRIBUTE = "Token.Name.Attribute"
    NAME_BUILTIN = "Token.Name.Builtin"
    NAME_BUILTIN_PSEUDO = "Token.Name.Builtin.Pseudo"
    NAME_CLASS = "Token.Name.Class"
    NAME_CONSTANT = "Token.Name.Constant"
    NAME_DECORATOR = "Token.Name.Decorator"
    NAME_ENTITY = "Token.Name.Entity"
    NAME_EXCEPTION = "Token.Name.Exception"
    NAME_FUNCTION = "Token.Name.Function"
    NAME_FUNCTION_MAGIC = "Token.Name.Function.Magic"
    NAME_PROPERTY = "Token.Name.Property"
    NAME_LABEL = "Token.Name.Label"
    NAME_NAMESPACE = "Token.Name.Namespace"
    NAME_OTHER = "Token.Name.Other"
    NAME_TAG = "Token.Name.Tag"
    NAME_VARIABLE = "Token.Name.Variable"
    NAME_VARIABLE_CLASS = "Token.Name.Variable.Class"
    NAME_VARIABLE_GLOBAL = "Token.Name.Variable.Global"
    NAME_VARIABLE_INSTANCE = "Token.Name.Variable.Instance"
    NAME_VARIABLE_MAGIC = "Token.Name.Variable.Magic"

    # Literals
    LITERAL = "Token.Literal"
    LITERAL_DATE = "Token.Literal.Date"

    STRING = "Token.Literal.String"
    STRING_AFFIX = "Token.Literal.String.Affix"
    STRING_BACKTICK = "Token.Literal.String.Backtick"
    STRING_CHAR = "Token.Literal.String.Char"
    STRING_DELIMITER = "Token.Literal.String.Delimiter"
    STRING_DOC = "Token.Literal.String.Doc"
    STRING_DOUBLE = "Token.Literal.String.Double"
    STRING_ESCAPE = "Token.Literal.String.Escape"
    STRING_HEREDOC = "Token.Literal.String.Heredoc"
    STRING_INTERPOL = "Token.Literal.String.Interpol"
    STRING_OTHER = "Token.Literal.String.Other"
    STRING_REGEX = "Token.Literal.String.Regex"
    STRING_SINGLE = "Token.Literal.String.Single"
    STRING_SYMBOL = "Token.Literal.String.Symbol"

    NUMBER = "Token.Literal.Number"
    NUMBER_BIN = "Token.Literal.Number.Bin"
    NUMBER_FLOAT = "Token.Literal.Number.Float"
    NUMBER_HEX = "Token.Literal.Number.Hex"
    NUMBER_INTEGER = "Token.Literal.Number.Integer"
    NUMBER_INTEGER_LONG = "Token.Literal.Number.Integer.Long"
    NUMBER_OCT = "Token.Literal.Number.Oct"

    # Operators and punctuation
    OPERATOR = "Token.Operator"
    OPERATOR_WORD = "Token.Operator.Word"
    PUNCTUATION = "Token.Punctuation"
    PUNCTUATION_MARKER = "Token.Punctuation.Marker"

    # Comments
    COMMENT = "Token.Comment"
    COMMENT_HASHBANG = "Token.Comment.Hashbang"
    COMMENT_MULTILINE = "Token.Comment.Multiline"
    COMMENT_PREPROC = "Token.Comment.Preproc"
    COMMENT_PREPROCFILE = "Token.Comment.PreprocFile"
    COMMENT_SINGLE = "Token.Comment.Single"
    COMMENT_SPECIAL = "Token.Comment.Special"

    # Generic (diffs, prompts, markup); GENERIC is also the fallback kind
    GENERIC = "Token.Generic"
    GENERIC_DELETED = "Token.Generic.Deleted"
    GENERIC_EMPH = "Token.Generic.Emph"
    GENERIC_EMPH_STRONG = "Token.Generic.EmphStrong"
    GENERIC_ERROR = "Token.Generic.Error"
    GENERIC_HEADING = "Token.Generic.Heading"
    GENERIC_INSERTED = "Token.Generic.Inserted"
    GENERIC_OUTPUT = "Token.Generic.Output"
    GENERIC_PROMPT = "Token.Generic.Prompt"
    GENERIC_STRONG = "Token.Generic.Strong"
    GENERIC_SUBHEADING = "Token.Generic.Subheading"
    GENERIC_TRACEBACK = "Token.Generic.Traceback"

    @classmethod
    def from_string(cls, name: str) -> TokenKind:
        """Resolve a tool kind string, falling back to GENERIC."""
        try:
            return cls(name)
        except ValueError:
            return cls.GENERIC

    @property
    def scope(self) -> str | None:
        """TextMate-style scope selector, or None when the kind is unstyled."""
        return _SCOPES.get(self)


# Kinds missing from this table (text, whitespace, punctuation, plain
# names) are left to the editor's default style.
_SCOPES: dict[TokenKind, str] = {
    TokenKind.ESCAPE: "constant.character.escape",
    TokenKind.ERROR: "invalid.illegal",
    TokenKind.KEYWORD: "keyword",
    TokenKind.KEYWORD_CONSTANT: "constant.language",
    TokenKind.KEYWORD_DECLARATION: "storage.type",
    TokenKind.KEYWORD_NAMESPACE: "keyword.control.import",
    TokenKind.KEYWORD_PSEUDO: "keyword.other",
    TokenKind.KEYWORD_RESERVED: "keyword.control",
    TokenKind.KEYWORD_TYPE: "storage.type",
    TokenKind.NAME_ATTRIBUTE: "entity.other.attribute-name",
    TokenKind.NAME_BUILTIN: "support.function",
    TokenKind.NAME_BUILTIN_PSEUDO: "variable.language",
    TokenKind.NAME_CLASS: "entity.name.class",
    TokenKind.NAME_CONSTANT: "variable.other.constant",
    TokenKind.NAME_DECORATOR: "entity.name.function.decorator",
    TokenKind.NAME_ENTITY: "constant.character.entity",
    TokenKind.NAME_EXCEPTION: "entity.name.class.exception",
    TokenKind.NAME_FUNCTION: "entity.name.function",
    TokenKind.NAME_FUNCTION_MAGIC: "support.function.magic",
    TokenKind.NAME_PROPERTY: "variable.other.property",
    TokenKind.NAME_LABEL: "entity.name.label",
    TokenKind.NAME_NAMESPACE: "entity.name.namespace",
    TokenKind.NAME_TAG: "entity.name.tag",
    TokenKind.NAME_VARIABLE: "variable",
    TokenKind.NAME_VARIABLE_CLASS: "variable.other.class",
    TokenKind.NAME_VARIABLE_GLOBAL: "variable.other.global",
    TokenKind.NAME_VARIABLE_INSTANCE: "variable.other.instance",
    TokenKind.NAME_VARIABLE_MAGIC: "variable.language.magic",
    TokenKind.LITERAL: "constant",
    TokenKind.LITERAL_DATE: "constant.other.date",
    TokenKind.STRING: "string",
    TokenKind.STRING_AFFIX: "storage.type.string",
    TokenKind.STRING_BACKTICK: "string.interpolated",
    TokenKind.STRING_CHAR: "string.quoted.single.char",
    TokenKind.STRING_DELIMITER: "punctuation.definition.string",
    TokenKind.STRING_DOC: "comment.block.documentation",
    TokenKind.STRING_DOUBLE: "string.quoted.double",
    TokenKind.STRING_ESCAPE: "constant.character.escape",
    TokenKind.STRING_HEREDOC: "string.unquoted.heredoc",
    TokenKind.STRING_INTERPOL: "meta.interpolation",
    TokenKind.STRING_OTHER: "string.other",
    TokenKind.STRING_REGEX: "string.regexp",
    TokenKind.STRING_SINGLE: "string.quoted.single",
    TokenKind.STRING_SYMBOL: "constant.other.symbol",
    TokenKind.NUMBER: "constant.numeric",
    TokenKind.NUMBER_BIN: "constant.numeric.binary",
    TokenKind.NUMBER_FLOAT: "constant.numeric.float",
    TokenKind.NUMBER_HEX: "constant.numeric.hex",
    TokenKind.NUMBER_INTEGER: "constant.numeric.integer",
    TokenKind.NUMBER_INTEGER_LONG: "constant.numeric.integer.long",
    TokenKind.NUMBER_OCT: "constant.numeric.octal",
    TokenKind.OPERATOR: "keyword.operator",
    TokenKind.OPERATOR_WORD: "keyword.operator.word",
    TokenKind.COMMENT: "comment",
    TokenKind.COMMENT_HASHBANG: "comment.line.shebang",
    TokenKind.COMMENT_MULTILINE: "comment.block",
    TokenKind.COMMENT_PREPROC: "meta.preprocessor",
    TokenKind.COMMENT_PREPROCFILE: "meta.preprocessor.include",
    TokenKind.COMMENT_SINGLE: "comment.line",
    TokenKind.COMMENT_SPECIAL: "comment.special",
    TokenKind.GENERIC_DELETED: "markup.deleted",
    TokenKind.GENERIC_EMPH: "markup.italic",
    TokenKind.GENERIC_EMPH_STRONG: "markup.bold.italic",
    TokenKind.GENERIC_ERROR: "markup.error",
    TokenKind.GENERIC_HEADING: "markup.heading",
    TokenKind.GENERIC_INSERTED: "markup.inserted",
    TokenKind.GENERIC_OUTPUT: "markup.output",
    TokenKind.GENERIC_PROMPT: "markup.prompt",
    TokenKind.GENERIC_STRONG: "markup.bold",
    TokenKind.GENERIC_SUBHEADING: "markup.heading.sub",
    TokenKind.GENERIC_TRACEBACK: "markup.traceback",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified fragment of source text.

    Attributes:
        kind: Semantic category reported by the lexer tool
        payload: Decoded text of the fragment

    """

    kind: TokenKind
    payload: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.payload
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r})"
