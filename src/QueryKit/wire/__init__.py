"""Wire-level command construction for the search server protocol."""

from __future__ import annotations

from QueryKit.wire.commands import (
    build_count_command,
    build_expression_command,
    build_search_command,
    escape_query_string,
    validate_no_control_characters,
)

__all__ = [
    "build_count_command",
    "build_expression_command",
    "build_search_command",
    "escape_query_string",
    "validate_no_control_characters",
]
