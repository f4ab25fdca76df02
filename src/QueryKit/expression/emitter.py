"""Boolean query string emitter.

Turns a `SearchExpression` into the query string sent to the search engine.

Rules
- Required terms are joined with ` AND `.
- Each excluded term becomes `NOT <term>`, ANDed onto what came before.
- A non-empty raw expression is wrapped in one pair of parentheses and ANDed
  onto the result.
- Optional terms are ignored.

An expression with nothing in it renders as an empty string. Whether that is
acceptable is up to the command that embeds it.
"""

from __future__ import annotations

from QueryKit.core.errors import QuerySyntaxError
from QueryKit.core.expression import (
    SearchExpression,
    SimplifiedExpression,
    SimplifyFailure,
    SimplifyResult,
)
from QueryKit.expression.parser import parse_search_expression


def to_query_string(expr: SearchExpression) -> str:
    """Render an expression as a boolean query string.

    Examples:
        - required ["golang"], excluded ["old"] -> `golang AND NOT old`
        - raw "python OR ruby" -> `(python OR ruby)`

    Args:
        expr: Parsed expression.

    Returns:
        Query string, possibly empty.
    """
    parts: list[str] = list(expr.required_terms)
    parts.extend(f"NOT {term}" for term in expr.excluded_terms)
    if expr.raw_expression:
        parts.append(f"({expr.raw_expression})")
    return " AND ".join(parts)


def convert_search_expression(expression: str | bytes) -> str:
    """Parse `expression` and render it as a query string in one step.

    Raises:
        QuerySyntaxError: If the expression is empty or malformed.
    """
    return to_query_string(parse_search_expression(expression))


def simplify_search_expression(expression: str | bytes) -> SimplifyResult:
    """Reduce an expression to (main term, AND terms, NOT terms).

    For callers that can only send one main term plus AND/NOT lists. OR chains
    and groups are dropped, so the result is lossy for complex expressions.

    Args:
        expression: Expression text.

    Returns:
        `SimplifiedExpression` on success. `SimplifyFailure` when parsing fails
        or no required term exists.
    """
    try:
        expr = parse_search_expression(expression)
    except QuerySyntaxError as e:
        return SimplifyFailure(reason=e.message)

    if not expr.required_terms:
        return SimplifyFailure(reason="no terms found")

    return SimplifiedExpression(
        main_term=expr.required_terms[0],
        and_terms=tuple(expr.required_terms[1:]),
        not_terms=tuple(expr.excluded_terms),
    )
