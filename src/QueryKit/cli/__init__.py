"""CLI package for QueryKit command orchestration.

This package contains the modular CLI components, factored into click
definitions, command implementations, and a runner.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from QueryKit.cli.runner import CommandRunner
from QueryKit.cli.ui import cli


def main() -> None:
    """Run QueryKit CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
