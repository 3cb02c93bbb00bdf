"""Decoder for the lexer tool's raw, hex-encoded output.

Each line of tool output looks like::

    Token.Keyword\t'646566'

The kind and payload are tab separated. The payload keeps one wrapper
character on each side of lowercase or uppercase hex pairs, which are the
UTF-8 bytes of the source fragment.

Consecutive lines of the same kind are merged into a single Token. The
fold never raises on malformed output: an odd-length payload or a run of
bytes that is not valid UTF-8 stops decoding and the tokens gathered so
far are returned.

Example:
    >>> decode_lines(["Token.Keyword\\t'666f'", "Token.Keyword\\t'6f'"])
    [Token(KEYWORD, 'foo')]
"""

from __future__ import annotations

from collections.abc import Iterable

from pygkit.tokens import Token, TokenKind
from pygkit.utils.logger import get_logger

logger = get_logger(__name__)

_HEX_VALUES = {c: i for i, c in enumerate("0123456789abcdef")}


def is_valid_payload(field: str) -> bool:
    """Check the wire shape of a payload field (wrapper pair plus even hex)."""
    return len(field) >= 2 and len(field) % 2 == 0


def decode_payload(field: str) -> bytes:
    """Decode the hex pairs between a payload's wrapper characters.

    The first and last characters are dropped whatever they are. Decoding
    is best effort: a short trailing character and any pair holding a
    non-hex character are left out.

    Args:
        field: Payload field as printed by the tool

    Returns:
        The decoded bytes
    """
    body = field[1:-1].lower()
    out = bytearray()
    for i in range(0, len(body) - 1, 2):
        high = _HEX_VALUES.get(body[i])
        low = _HEX_VALUES.get(body[i + 1])
        if high is None or low is None:
            continue
        out.append((high << 4) | low)
    return bytes(out)


class TokenAccumulator:
    """Run-length merging state of the decode fold.

    Feed lines one at a time with feed(); it returns False once the stream
    has halted. finish() flushes the pending run and returns the tokens.
    """

    __slots__ = ("_tokens", "_kind", "_buffer", "_halted")

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._kind: TokenKind | None = None
        self._buffer = bytearray()
        self._halted = False

    @property
    def halted(self) -> bool:
        return self._halted

    def feed(self, line: str) -> bool:
        """Fold one line of tool output into the state."""
        if self._halted:
            return False

        fields = line.split("\t")
        if len(fields) != 2:
            return True

        kind_name, payload = fields
        if not is_valid_payload(payload):
            logger.warning("Malformed payload %r, truncating token stream", payload)
            self._halted = True
            return False

        kind = TokenKind.from_string(kind_name)
        if self._kind is not None and self._kind is not kind:
            if not self._flush():
                self._buffer.clear()
                self._halted = True
                return False
            self._buffer.clear()
            self._kind = kind
        elif self._kind is None:
            self._kind = kind

        self._buffer += decode_payload(payload)
        return True

    def finish(self) -> list[Token]:
        """Flush the pending run and return all tokens."""
        self._flush()
        return self._tokens

    def _flush(self) -> bool:
        # False only when the pending bytes are not valid UTF-8
        if self._kind is None or not self._buffer:
            return True
        try:
            text = self._buffer.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning(
                "Invalid UTF-8 in %s run, truncating token stream", self._kind.value
            )
            return False
        self._tokens.append(Token(self._kind, text))
        return True


def decode_lines(lines: Iterable[str]) -> list[Token]:
    """Decode lines of tool output into merged tokens.

    Args:
        lines: Lines of tool output, without line terminators

    Returns:
        Tokens in output order
    """
    acc = TokenAccumulator()
    for line in lines:
        if not acc.feed(line):
            break
    tokens = acc.finish()
    logger.debug("Decoded %d tokens%s", len(tokens), " (truncated)" if acc.halted else "")
    return tokens


def decode_output(output: str) -> list[Token]:
    """Decode the complete standard output of the lexer tool."""
    return decode_lines(output.splitlines())
