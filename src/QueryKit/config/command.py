"""Wire command defaults (table, limit, sort)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryKit.config.common import get_section, optional_bool, optional_int, optional_str


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """Defaults used when building SEARCH/COUNT commands."""

    table: str = ""
    limit: int = 1000
    sort_column: str = ""
    sort_desc: bool = True


def load_command(raw: Mapping[str, Any]) -> CommandConfig:
    """Load the `command` section.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed command defaults.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "command")
    return CommandConfig(
        table=optional_str(section, "table", "", "command.table").strip(),
        limit=optional_int(section, "limit", 1000, "command.limit"),
        sort_column=optional_str(section, "sort_column", "", "command.sort_column").strip(),
        sort_desc=optional_bool(section, "sort_desc", True, "command.sort_desc"),
    )


def check_command(config: CommandConfig) -> None:
    """Validate command defaults.

    Raises:
        ValueError: If `limit` is negative or names contain whitespace.
    """
    if config.limit < 0:
        raise ValueError("command.limit must not be negative")
    if any(ch.isspace() for ch in config.table):
        raise ValueError("command.table must not contain whitespace")
    if any(ch.isspace() for ch in config.sort_column):
        raise ValueError("command.sort_column must not contain whitespace")
