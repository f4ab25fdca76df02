from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


def _has_operator_text(term: str) -> bool:
    return "OR" in term or "(" in term or ")" in term


@dataclass(frozen=True, slots=True)
class SearchExpression:
    """Parsed form of a web-style search expression.

    The structure is intentionally flat:

    - `required_terms`: terms that must all match (`+term` and bare terms).
      Quoted phrases keep their surrounding quotes.
    - `excluded_terms`: terms that followed a `-` prefix.
    - `optional_terms`: kept for compatibility with older callers; the parser
      never fills it.
    - `raw_expression`: parenthesized groups and OR chains, re-serialized as
      text and joined with single spaces.

    Grouped text is never parsed further; the emitter passes it through as an
    opaque sub-query.
    """

    required_terms: Sequence[str] = ()
    excluded_terms: Sequence[str] = ()
    optional_terms: Sequence[str] = ()
    raw_expression: str = ""

    def has_complex_expression(self) -> bool:
        """Return True when the expression carries OR chains or grouping."""
        if self.raw_expression:
            return True
        return any(
            _has_operator_text(term)
            for terms in (self.required_terms, self.excluded_terms, self.optional_terms)
            for term in terms
        )

    def to_query_string(self) -> str:
        """Render this expression as a boolean query string."""
        from QueryKit.expression.emitter import to_query_string

        return to_query_string(self)


@dataclass(frozen=True, slots=True)
class SimplifiedExpression:
    """Reduced (main term, AND terms, NOT terms) view of an expression.

    Lossy for anything containing OR chains or grouping.
    """

    main_term: str
    and_terms: tuple[str, ...] = ()
    not_terms: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SimplifyFailure:
    """Reason a search expression could not be simplified."""

    reason: str


SimplifyResult = Union[SimplifiedExpression, SimplifyFailure]
