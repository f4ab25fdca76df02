"""Base classes for output writers.

Provides abstraction for writing command results to console or files.
Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of one CLI action.

    Attributes:
        action: Action name (e.g. "convert", "ngrams").
        input: The text the action was run on.
        payload: Ordered, JSON-serializable result fields.
    """

    action: str
    input: str
    payload: Mapping[str, Any] = field(default_factory=dict)


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, result: CommandResult) -> None:
        """Write one command result.

        Args:
            result: Result to display or store.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'convert').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: CommandResult) -> None:
        """Send the result to all writers."""
        for writer in self.writers:
            writer.write_result(result)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
