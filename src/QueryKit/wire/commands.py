"""Wire command builders for SEARCH and COUNT.

Builds the single-line text commands understood by the search server. Only
string construction happens here; sending and response handling belong to
the network client.

Command layout
- SEARCH <table> <query> [AND <t>]* [NOT <t>]* [FILTER <k> = <v>]*
  [SORT <col> DESC|ASC | SORT ASC] [LIMIT <n> | LIMIT <offset>,<n>]
- COUNT  <table> <query> [AND <t>]* [NOT <t>]* [FILTER <k> = <v>]*

Values that contain whitespace or quote characters are double-quoted, with
`"` and `\\` backslash-escaped.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from QueryKit.core.errors import CommandArgumentError
from QueryKit.core.expression import SearchExpression
from QueryKit.expression.emitter import to_query_string

_QUOTE_TRIGGERS = frozenset(" \t\n\r\"'")
_COUNT_OPTIONS = frozenset({"filters"})


def escape_query_string(value: str) -> str:
    """Quote `value` for the wire if it contains whitespace or quotes."""
    if not any(ch in _QUOTE_TRIGGERS for ch in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def validate_no_control_characters(value: str, field_name: str) -> None:
    """Reject ASCII control characters in a command argument.

    Args:
        value: Argument value.
        field_name: Name used in the error message.

    Raises:
        CommandArgumentError: If `value` contains a byte in 0x00-0x1F or 0x7F.
    """
    for ch in value:
        code = ord(ch)
        if code < 0x20 or code == 0x7F:
            raise CommandArgumentError(
                f"Input for {field_name} contains control character 0x{code:02X}, which is not allowed"
            )


def _validate_common(
    table: str,
    query: str,
    and_terms: Sequence[str],
    not_terms: Sequence[str],
    filters: Sequence[tuple[str, str]],
) -> None:
    validate_no_control_characters(table, "table name")
    validate_no_control_characters(query, "search query")
    for term in and_terms:
        validate_no_control_characters(term, "AND term")
    for term in not_terms:
        validate_no_control_characters(term, "NOT term")
    for key, value in filters:
        validate_no_control_characters(key, "filter key")
        validate_no_control_characters(value, "filter value")


def _clauses(
    and_terms: Iterable[str],
    not_terms: Iterable[str],
    filters: Iterable[tuple[str, str]],
) -> list[str]:
    parts = [f"AND {escape_query_string(t)}" for t in and_terms]
    parts.extend(f"NOT {escape_query_string(t)}" for t in not_terms)
    parts.extend(f"FILTER {k} = {escape_query_string(v)}" for k, v in filters)
    return parts


def build_search_command(
    *,
    table: str,
    query: str,
    limit: int = 1000,
    offset: int = 0,
    and_terms: Sequence[str] = (),
    not_terms: Sequence[str] = (),
    filters: Sequence[tuple[str, str]] = (),
    sort_column: str = "",
    sort_desc: bool = True,
) -> str:
    """Build a SEARCH command line (without the CRLF terminator).

    Args:
        table: Table name.
        query: Main query text.
        limit: Maximum results; 0 omits the LIMIT clause.
        offset: Result offset, sent as `LIMIT <offset>,<limit>` when both are set.
        and_terms: Additional required terms.
        not_terms: Excluded terms.
        filters: (column, value) equality filters.
        sort_column: Column for the SORT clause; empty sorts by primary key.
        sort_desc: Descending order. The server default is primary key DESC.

    Returns:
        Command string.

    Raises:
        CommandArgumentError: If any argument contains control characters or
            `limit`/`offset` is negative.
    """
    _validate_common(table, query, and_terms, not_terms, filters)
    if sort_column:
        validate_no_control_characters(sort_column, "sort column")
    if limit < 0 or offset < 0:
        raise CommandArgumentError("limit and offset must not be negative")

    parts = ["SEARCH", table, escape_query_string(query)]
    parts.extend(_clauses(and_terms, not_terms, filters))

    if sort_column:
        parts.append(f"SORT {sort_column} {'DESC' if sort_desc else 'ASC'}")
    elif not sort_desc:
        parts.append("SORT ASC")

    if limit > 0 and offset > 0:
        parts.append(f"LIMIT {offset},{limit}")
    elif limit > 0:
        parts.append(f"LIMIT {limit}")

    return " ".join(parts)


def build_count_command(
    *,
    table: str,
    query: str,
    and_terms: Sequence[str] = (),
    not_terms: Sequence[str] = (),
    filters: Sequence[tuple[str, str]] = (),
) -> str:
    """Build a COUNT command line (without the CRLF terminator).

    Raises:
        CommandArgumentError: If any argument contains control characters.
    """
    _validate_common(table, query, and_terms, not_terms, filters)
    parts = ["COUNT", table, escape_query_string(query)]
    parts.extend(_clauses(and_terms, not_terms, filters))
    return " ".join(parts)


def build_expression_command(
    expr: SearchExpression,
    *,
    table: str,
    count: bool = False,
    **options: Any,
) -> str:
    """Build a SEARCH or COUNT command for a parsed expression.

    Plain expressions go out as main term plus AND/NOT clauses. Expressions
    with OR chains or groups go out as one boolean query string. An
    expression needs a required term or an OR group to search for; exclusions
    alone are rejected.

    Args:
        expr: Parsed expression.
        table: Table name.
        count: Build COUNT instead of SEARCH.
        **options: Extra keyword arguments for the builder (filters, limit,
            offset, sort_column, sort_desc). COUNT only accepts filters.

    Returns:
        Command string.

    Raises:
        CommandArgumentError: If the expression has no required term or OR
            group, if COUNT gets a SEARCH-only option, or if an argument is
            rejected.
    """
    if not expr.required_terms and not expr.raw_expression:
        if expr.excluded_terms:
            raise CommandArgumentError("search query needs a required term or OR group, not only exclusions")
        raise CommandArgumentError("search query must not be empty")
    if count:
        unsupported = sorted(set(options) - _COUNT_OPTIONS)
        if unsupported:
            raise CommandArgumentError(f"COUNT does not accept: {', '.join(unsupported)}")

    if expr.has_complex_expression() or not expr.required_terms:
        query = to_query_string(expr)
        and_terms: tuple[str, ...] = ()
        not_terms: tuple[str, ...] = ()
    else:
        query = expr.required_terms[0]
        and_terms = tuple(expr.required_terms[1:])
        not_terms = tuple(expr.excluded_terms)

    if count:
        return build_count_command(
            table=table,
            query=query,
            and_terms=and_terms,
            not_terms=not_terms,
            filters=options.get("filters", ()),
        )
    return build_search_command(table=table, query=query, and_terms=and_terms, not_terms=not_terms, **options)
