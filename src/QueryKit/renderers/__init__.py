"""Output renderers for command results.

Provides abstraction and implementations for writing command results to
console or JSON files, plus a factory that picks writers from configuration.
"""

from __future__ import annotations

from QueryKit.config import AppConfig
from QueryKit.renderers.base import CommandResult, MultiOutputWriter, OutputWriter
from QueryKit.renderers.console import ConsoleOutputWriter, render_text
from QueryKit.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer fanning out to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "CommandResult",
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
