"""JSON output renderers.

Renders `CommandResult` objects into JSON-serializable dicts.
Provides JsonFileWriter implementation for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from QueryKit.renderers.base import CommandResult, OutputWriter
from QueryKit.utils.log import log


def render_json(result: CommandResult) -> dict:
    """Render a command result into a JSON-serializable dict."""
    payload = {key: list(value) if isinstance(value, tuple) else value for key, value in result.payload.items()}
    return {
        "action": result.action,
        "input": result.input,
        "result": payload,
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_result(self, result: CommandResult) -> None:
        """Accumulate a result for later writing."""
        self.all_results.append(render_json(result))

    def finalize(self, action: str) -> None:
        """Write accumulated results to a JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        if not self.all_results:
            return
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
