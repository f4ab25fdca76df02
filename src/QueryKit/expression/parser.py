"""Recursive-descent parser for web-style search expressions.

Grammar (informal):

    expr     := (prefixed | group | or_chain | term)*
    prefixed := ('+' | '-') (term | quoted | group)
    group    := '(' (term | quoted | '+' | '-' | 'OR')* ')'
    or_chain := (term | quoted) ('OR' (term | quoted | group))+

Groups and OR chains are not parsed into a tree. They are re-serialized
token by token into text and passed through to the query string unchanged.
"""

from __future__ import annotations

from QueryKit.core.errors import QuerySyntaxError, SyntaxErrorKind
from QueryKit.core.expression import SearchExpression
from QueryKit.expression.tokenizer import ExpressionTokenizer, Token, TokenType
from QueryKit.utils.log import log

_TERM_TYPES = (TokenType.TERM, TokenType.QUOTED_TERM)

# Literal text emitted for structural tokens inside a captured group
_GROUP_TEXT: dict[TokenType, str] = {
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.OR: " OR ",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
}


def _term_text(token: Token) -> str:
    if token.type is TokenType.QUOTED_TERM:
        return f'"{token.value}"'
    return token.value


class ExpressionParser:
    """Single-pass parser producing a `SearchExpression`.

    Holds the current token and a tokenizer. One token of lookahead is done by
    saving the tokenizer cursor, advancing, and restoring.
    """

    def __init__(self, text: str | bytes) -> None:
        self._tokenizer = ExpressionTokenizer(text)
        self._current = Token(TokenType.END)
        self._advance()

    def parse(self) -> SearchExpression:
        """Parse the whole input.

        Returns:
            Parsed expression.

        Raises:
            QuerySyntaxError: On a missing operand, unbalanced parentheses, a
                leading OR, or a stray closing parenthesis.
        """
        required: list[str] = []
        excluded: list[str] = []
        raw_parts: list[str] = []

        while self._current.type is not TokenType.END:
            token_type = self._current.type
            if token_type is TokenType.PLUS:
                self._advance()
                required.append(self._parse_prefixed_term("+"))
            elif token_type is TokenType.MINUS:
                self._advance()
                excluded.append(self._parse_prefixed_term("-"))
            elif token_type is TokenType.LPAREN:
                raw_parts.append(self._capture_group())
            elif token_type in _TERM_TYPES:
                if self._starts_or_chain():
                    chain = self._capture_or_chain()
                    if chain is not None:
                        raw_parts.append(chain)
                else:
                    required.append(_term_text(self._current))
                    self._advance()
            elif token_type is TokenType.OR:
                raise QuerySyntaxError(SyntaxErrorKind.UNEXPECTED_TOKEN, "Unexpected 'OR' operator")
            else:
                raise QuerySyntaxError(SyntaxErrorKind.UNEXPECTED_TOKEN, "Unexpected ')'")

        return SearchExpression(
            required_terms=tuple(required),
            excluded_terms=tuple(excluded),
            optional_terms=(),
            raw_expression=" ".join(raw_parts),
        )

    def _advance(self) -> None:
        self._current = self._tokenizer.next_token()

    def _parse_prefixed_term(self, prefix: str) -> str:
        token = self._current
        if token.type is TokenType.LPAREN:
            return self._capture_group()
        if token.type in _TERM_TYPES:
            self._advance()
            return _term_text(token)
        raise QuerySyntaxError(SyntaxErrorKind.MISSING_OPERAND, f"Expected term after '{prefix}'")

    def _starts_or_chain(self) -> bool:
        saved_pos = self._tokenizer.position
        saved_current = self._current
        self._advance()
        has_or = self._current.type is TokenType.OR
        self._tokenizer.position = saved_pos
        self._current = saved_current
        return has_or

    def _capture_or_chain(self) -> str | None:
        """Capture `term OR term ...` as text.

        Returns None when an `OR` is not followed by an operand. The partial
        chain is dropped and the cursor stays on the offending token, so the
        main loop handles it next (`)` is reported as unexpected, `-b` is read
        as an exclusion).
        """
        parts = [_term_text(self._current)]
        self._advance()

        while self._current.type is TokenType.OR:
            parts.append(" OR ")
            self._advance()
            token = self._current
            if token.type in _TERM_TYPES:
                parts.append(_term_text(token))
                self._advance()
            elif token.type is TokenType.LPAREN:
                parts.append(self._capture_group())
            else:
                log.debug("Dropping OR chain without operand before %s", token.type.name)
                return None

        return "".join(parts)

    def _capture_group(self) -> str:
        parts: list[str] = []
        depth = 0
        while True:
            token = self._current
            if token.type is TokenType.END:
                raise QuerySyntaxError(SyntaxErrorKind.UNBALANCED_PARENTHESES, "Unbalanced parentheses")
            if token.type is TokenType.LPAREN:
                depth += 1
            elif token.type is TokenType.RPAREN:
                depth -= 1
            parts.append(_GROUP_TEXT.get(token.type) or _term_text(token))
            self._advance()
            if depth == 0:
                return "".join(parts)


def parse_search_expression(expression: str | bytes) -> SearchExpression:
    """Parse a web-style search expression.

    Examples:
        - `golang tutorial` -> required ["golang", "tutorial"]
        - `+golang -old` -> required ["golang"], excluded ["old"]
        - `python OR ruby` -> raw_expression "python OR ruby"

    Args:
        expression: Expression text.

    Returns:
        Parsed expression components.

    Raises:
        QuerySyntaxError: If the expression is empty or malformed.
    """
    if not expression:
        raise QuerySyntaxError(SyntaxErrorKind.EMPTY_EXPRESSION, "Empty search expression")

    expr = ExpressionParser(expression).parse()
    log.debug(
        "Parsed expression required=%s excluded=%s raw=%r",
        list(expr.required_terms),
        list(expr.excluded_terms),
        expr.raw_expression,
    )
    return expr
