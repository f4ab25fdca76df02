"""Lexer for web-style search expressions.

Scans the UTF-8 bytes of the expression with an explicit cursor. ASCII
whitespace and the full-width space U+3000 (`E3 80 80`) both separate tokens.
Multi-byte characters otherwise pass through untouched as part of a term.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from QueryKit.text.utf8 import as_utf8_bytes

FULLWIDTH_SPACE: Final[bytes] = b"\xe3\x80\x80"

_QUOTE: Final[int] = ord('"')
_BACKSLASH: Final[int] = ord("\\")
_TERM_STOP_BYTES: Final[frozenset[int]] = frozenset(b'+-()"')


class TokenType(Enum):
    """Lexical token kinds."""

    TERM = "term"
    QUOTED_TERM = "quoted_term"
    PLUS = "+"
    MINUS = "-"
    OR = "OR"
    LPAREN = "("
    RPAREN = ")"
    END = "end"


_SINGLE_CHAR_TOKENS: Final[dict[int, TokenType]] = {
    ord("+"): TokenType.PLUS,
    ord("-"): TokenType.MINUS,
    ord("("): TokenType.LPAREN,
    ord(")"): TokenType.RPAREN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token. `value` holds term text (quotes stripped for quoted terms)."""

    type: TokenType
    value: str = ""


def is_fullwidth_space(data: bytes, pos: int) -> bool:
    """Return True if the three bytes at `pos` encode U+3000."""
    return data[pos : pos + 3] == FULLWIDTH_SPACE


def _is_ascii_space(byte: int) -> bool:
    return byte in b" \t\n\r\x0b\x0c"


def _is_ascii_alnum(byte: int) -> bool:
    return (0x30 <= byte <= 0x39) or (0x41 <= byte <= 0x5A) or (0x61 <= byte <= 0x7A)


def _to_text(raw: bytes | bytearray) -> str:
    return bytes(raw).decode("utf-8", errors="replace")


class ExpressionTokenizer:
    """Cursor-based tokenizer over a search expression.

    The cursor can be read and reset through `position`, which lets the parser
    look one token ahead and rewind.
    """

    def __init__(self, text: str | bytes) -> None:
        self._data = as_utf8_bytes(text)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @position.setter
    def position(self, value: int) -> None:
        self._pos = value

    def next_token(self) -> Token:
        """Return the next token, or an END token once input is exhausted."""
        self._skip_whitespace()
        data = self._data

        if self._pos >= len(data):
            return Token(TokenType.END)

        current = data[self._pos]
        if current == _QUOTE:
            return Token(TokenType.QUOTED_TERM, self._read_quoted())

        single = _SINGLE_CHAR_TOKENS.get(current)
        if single is not None:
            self._pos += 1
            return Token(single)

        if self._at_or_keyword():
            self._pos += 2
            return Token(TokenType.OR, "OR")

        return Token(TokenType.TERM, self._read_term())

    def tokens(self) -> list[Token]:
        """Tokenize the remaining input, excluding the final END token."""
        out: list[Token] = []
        while True:
            token = self.next_token()
            if token.type is TokenType.END:
                return out
            out.append(token)

    def _skip_whitespace(self) -> None:
        data = self._data
        while self._pos < len(data):
            if is_fullwidth_space(data, self._pos):
                self._pos += 3
            elif _is_ascii_space(data[self._pos]):
                self._pos += 1
            else:
                break

    def _at_or_keyword(self) -> bool:
        data = self._data
        pos = self._pos
        if data[pos : pos + 2] != b"OR":
            return False
        if pos > 0 and _is_ascii_alnum(data[pos - 1]):
            return False
        if pos + 2 < len(data) and _is_ascii_alnum(data[pos + 2]):
            return False
        return True

    def _read_term(self) -> str:
        data = self._data
        start = self._pos
        while self._pos < len(data):
            if is_fullwidth_space(data, self._pos):
                break
            current = data[self._pos]
            if _is_ascii_space(current) or current in _TERM_STOP_BYTES:
                break
            self._pos += 1
        return _to_text(data[start : self._pos])

    def _read_quoted(self) -> str:
        data = self._data
        self._pos += 1  # opening quote
        term = bytearray()
        while self._pos < len(data):
            current = data[self._pos]
            if current == _QUOTE:
                self._pos += 1
                return _to_text(term)
            if current == _BACKSLASH and self._pos + 1 < len(data):
                term.append(data[self._pos + 1])
                self._pos += 2
            else:
                term.append(current)
                self._pos += 1
        # unterminated: keep what was read
        return _to_text(term)
