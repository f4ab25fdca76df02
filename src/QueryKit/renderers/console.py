"""Console text output renderers.

Renders a `CommandResult` into human-friendly text.
Provides ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from typing import Any

from QueryKit.renderers.base import CommandResult, OutputWriter
from QueryKit.utils.log import log


def _fmt_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        if not value:
            return "-"
        return " | ".join(str(item) for item in value)
    if value is None or value == "":
        return "-"
    return str(value)


def render_text(result: CommandResult) -> str:
    """Render a command result into a text block.

    Args:
        result: Command result.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [f"{result.action}: {result.input}"]
    for key, value in result.payload.items():
        lines.append(f"   {key}: {_fmt_value(value)}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, result: CommandResult) -> None:
        """Write one result to the console."""
        for line in render_text(result).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
