"""Search-expression compiler: tokenizer, parser and query string emitter."""

from __future__ import annotations

from QueryKit.expression.emitter import (
    convert_search_expression,
    simplify_search_expression,
    to_query_string,
)
from QueryKit.expression.parser import ExpressionParser, parse_search_expression
from QueryKit.expression.tokenizer import ExpressionTokenizer, Token, TokenType

__all__ = [
    "ExpressionParser",
    "ExpressionTokenizer",
    "Token",
    "TokenType",
    "convert_search_expression",
    "parse_search_expression",
    "simplify_search_expression",
    "to_query_string",
]
