"""Command runner for coordinating CLI execution.

Manages logging configuration, output writer lifecycle, and error handling
for command execution.
"""

from __future__ import annotations

from typing import Callable, Protocol

import click

from QueryKit.config import AppConfig
from QueryKit.renderers import OutputWriter, create_output_writer
from QueryKit.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> None: ...


CommandFactory = Callable[[AppConfig, OutputWriter], Command]


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, output writer creation, and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, action: str, factory: CommandFactory) -> None:
        """Build and execute one command.

        Args:
            action: The CLI command name (e.g., 'convert').
            factory: Builds the command from config and output writer.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            output_writer = create_output_writer(self.config)
            command = factory(self.config, output_writer)
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
