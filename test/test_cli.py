"""End-to-end tests for the QueryKit CLI."""

import json
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryKit.cli import cli
from QueryKit.config.runtime import LOG_LEVEL_ENV_VAR
from QueryKit.utils.log import log


def _make_runner() -> CliRunner:
    """Create CliRunner with best-effort stderr capture."""
    try:
        return CliRunner(mix_stderr=True)
    except TypeError:
        # Older Click versions don't support mix_stderr.
        return CliRunner()


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ, {}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(LOG_LEVEL_ENV_VAR, None)
        # handlers are bound to the runner's captured stderr
        self.addCleanup(log.handlers.clear)
        self.runner = _make_runner()

    def _invoke(self, args: list[str]):
        # isolated cwd: no config/default.yml, so built-in defaults apply
        with self.runner.isolated_filesystem():
            return self.runner.invoke(cli, args)

    def test_convert(self) -> None:
        result = self._invoke(["convert", "+golang -old"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("query: golang AND NOT old", result.output)

    def test_convert_empty_expression_aborts(self) -> None:
        result = self._invoke(["convert", ""])
        self.assertEqual(result.exit_code, 1, result.output)
        self.assertIn("Convert failed: Empty search expression", result.output)

    def test_parse(self) -> None:
        result = self._invoke(["parse", "+golang python OR ruby"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("required_terms: golang", result.output)
        self.assertIn("raw_expression: python OR ruby", result.output)
        self.assertIn("complex: True", result.output)

    def test_simplify_failure_is_reported_not_raised(self) -> None:
        result = self._invoke(["simplify", "python OR ruby"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("error: no terms found", result.output)

    def test_simplify(self) -> None:
        result = self._invoke(["simplify", "golang tutorial -old"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("main_term: golang", result.output)
        self.assertIn("and_terms: tutorial", result.output)
        self.assertIn("not_terms: old", result.output)

    def test_ngrams_default_hybrid(self) -> None:
        result = self._invoke(["ngrams", "AI漢字test"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("ngrams: AI | 漢 | 字 | te | es | st", result.output)
        self.assertIn("count: 6", result.output)

    def test_ngrams_uniform(self) -> None:
        result = self._invoke(["ngrams", "--uniform", "--n", "2", "hello"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("ngrams: he | el | ll | lo", result.output)

    def test_ngrams_rejects_zero_size(self) -> None:
        result = self._invoke(["ngrams", "--n", "0", "hello"])
        self.assertEqual(result.exit_code, 2, result.output)

    def test_command(self) -> None:
        result = self._invoke(["command", "--table", "articles", "golang -old"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("command: SEARCH articles golang NOT old LIMIT 1000", result.output)

    def test_command_count(self) -> None:
        result = self._invoke(["command", "--table", "articles", "--count", "golang -old"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("command: COUNT articles golang NOT old", result.output)

    def test_command_requires_table(self) -> None:
        result = self._invoke(["command", "golang"])
        self.assertEqual(result.exit_code, 1, result.output)
        self.assertIn("A table name is required", result.output)

    def test_missing_config_file(self) -> None:
        result = self._invoke(["--config", "missing.yml", "convert", "golang"])
        self.assertEqual(result.exit_code, 2, result.output)
        self.assertIn("Config file not found", result.output)

    def test_config_file_sets_table_and_json_output(self) -> None:
        config_yaml = "command:\n  table: articles\n  limit: 5\noutput:\n  base_dir: out\n  formats: [console, json]\n"
        with self.runner.isolated_filesystem():
            Path("custom.yml").write_text(config_yaml, encoding="utf-8")
            result = self.runner.invoke(cli, ["--config", "custom.yml", "command", "golang"])
            json_files = sorted(Path("out/json").glob("command_*.json"))
            data = json.loads(json_files[0].read_text(encoding="utf-8")) if json_files else None

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("command: SEARCH articles golang LIMIT 5", result.output)
        self.assertEqual(len(json_files), 1)
        self.assertEqual(
            data,
            [{"action": "command", "input": "golang", "result": {"command": "SEARCH articles golang LIMIT 5"}}],
        )

    def test_invalid_config_is_bad_parameter(self) -> None:
        with self.runner.isolated_filesystem():
            Path("bad.yml").write_text("ngram:\n  mode: trigram\n", encoding="utf-8")
            result = self.runner.invoke(cli, ["--config", "bad.yml", "ngrams", "abc"])

        self.assertEqual(result.exit_code, 2, result.output)
        self.assertIn("ngram.mode", result.output)


if __name__ == "__main__":
    unittest.main()
