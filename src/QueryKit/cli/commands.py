"""Command implementations for the QueryKit CLI.

Encapsulates the logic behind each CLI action, separated from click
parameter handling and from output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from QueryKit.config import AppConfig
from QueryKit.core.expression import SimplifiedExpression
from QueryKit.expression import parse_search_expression, simplify_search_expression, to_query_string
from QueryKit.renderers import CommandResult, OutputWriter
from QueryKit.text import format_bytes, generate_hybrid_ngrams, generate_ngrams, normalize_text
from QueryKit.wire import build_expression_command
from QueryKit.utils.log import log


@dataclass(slots=True)
class ConvertCommand:
    """Convert a search expression into a boolean query string."""

    expression: str
    output_writer: OutputWriter

    def execute(self) -> None:
        expr = parse_search_expression(self.expression)
        query = to_query_string(expr)
        if not query:
            log.warning("Expression produced an empty query string")
        self.output_writer.write_result(
            CommandResult(action="convert", input=self.expression, payload={"query": query})
        )


@dataclass(slots=True)
class ParseCommand:
    """Show the components of a parsed search expression."""

    expression: str
    output_writer: OutputWriter

    def execute(self) -> None:
        expr = parse_search_expression(self.expression)
        self.output_writer.write_result(
            CommandResult(
                action="parse",
                input=self.expression,
                payload={
                    "required_terms": tuple(expr.required_terms),
                    "excluded_terms": tuple(expr.excluded_terms),
                    "raw_expression": expr.raw_expression,
                    "complex": expr.has_complex_expression(),
                },
            )
        )


@dataclass(slots=True)
class SimplifyCommand:
    """Reduce a search expression to main/AND/NOT terms.

    Failure to simplify is reported as a result, not raised.
    """

    expression: str
    output_writer: OutputWriter

    def execute(self) -> None:
        result = simplify_search_expression(self.expression)
        if isinstance(result, SimplifiedExpression):
            payload = {
                "main_term": result.main_term,
                "and_terms": result.and_terms,
                "not_terms": result.not_terms,
            }
        else:
            log.warning("Cannot simplify expression: %s", result.reason)
            payload = {"error": result.reason}
        self.output_writer.write_result(CommandResult(action="simplify", input=self.expression, payload=payload))


@dataclass(slots=True)
class NgramCommand:
    """Generate n-grams for a text using configured (or overridden) sizes.

    `size`, `ascii_size`, `kanji_size` and `hybrid` override the `ngram`
    config section when set.
    """

    text: str
    config: AppConfig
    output_writer: OutputWriter
    hybrid: bool | None = None
    size: int | None = None
    ascii_size: int | None = None
    kanji_size: int | None = None

    def execute(self) -> None:
        ngram_cfg = self.config.ngram
        norm_cfg = self.config.normalize

        text = self.text
        if norm_cfg.enabled:
            text = normalize_text(text, nfkc=norm_cfg.nfkc, width=norm_cfg.width, lower=norm_cfg.lower)
        log.debug("Input %s normalized=%r", format_bytes(len(text.encode("utf-8"))), text)

        hybrid = ngram_cfg.mode == "hybrid" if self.hybrid is None else self.hybrid
        if hybrid:
            ascii_size = self.ascii_size if self.ascii_size is not None else ngram_cfg.ascii_size
            kanji_size = self.kanji_size if self.kanji_size is not None else ngram_cfg.kanji_size
            ngrams = generate_hybrid_ngrams(text, ascii_size, kanji_size)
            payload = {"mode": "hybrid", "ascii_size": ascii_size, "kanji_size": kanji_size}
        else:
            size = self.size if self.size is not None else ngram_cfg.size
            ngrams = generate_ngrams(text, size)
            payload = {"mode": "uniform", "size": size}

        payload["count"] = len(ngrams)
        payload["ngrams"] = tuple(ngrams)
        self.output_writer.write_result(CommandResult(action="ngrams", input=self.text, payload=payload))


@dataclass(slots=True)
class WireCommand:
    """Build the SEARCH or COUNT wire command for a search expression."""

    expression: str
    config: AppConfig
    output_writer: OutputWriter
    table: str | None = None
    count: bool = False
    limit: int | None = None
    offset: int = 0

    def execute(self) -> None:
        cmd_cfg = self.config.command
        table = self.table or cmd_cfg.table
        if not table:
            raise ValueError("A table name is required (--table or command.table)")

        expr = parse_search_expression(self.expression)
        if self.count:
            line = build_expression_command(expr, table=table, count=True)
        else:
            line = build_expression_command(
                expr,
                table=table,
                limit=self.limit if self.limit is not None else cmd_cfg.limit,
                offset=self.offset,
                sort_column=cmd_cfg.sort_column,
                sort_desc=cmd_cfg.sort_desc,
            )
        self.output_writer.write_result(CommandResult(action="command", input=self.expression, payload={"command": line}))
