"""Error types raised by the expression and wire layers."""

from __future__ import annotations

from enum import Enum


class SyntaxErrorKind(str, Enum):
    """Kinds of query syntax failures."""

    EMPTY_EXPRESSION = "empty_expression"
    MISSING_OPERAND = "missing_operand"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    UNEXPECTED_TOKEN = "unexpected_token"


class QuerySyntaxError(ValueError):
    """Raised when a search expression cannot be parsed.

    Attributes:
        kind: Machine-readable failure kind.
        message: Human-readable description.
    """

    def __init__(self, kind: SyntaxErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"QuerySyntaxError(kind={self.kind.value!r}, message={self.message!r})"


class CommandArgumentError(ValueError):
    """Raised when a wire command argument is not acceptable."""
