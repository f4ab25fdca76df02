"""Tests for SEARCH/COUNT command construction."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryKit.core.errors import CommandArgumentError
from QueryKit.expression.parser import parse_search_expression
from QueryKit.wire.commands import (
    build_count_command,
    build_expression_command,
    build_search_command,
    escape_query_string,
    validate_no_control_characters,
)


class TestEscapeQueryString(unittest.TestCase):
    def test_plain_value_is_unchanged(self) -> None:
        self.assertEqual(escape_query_string("golang"), "golang")
        self.assertEqual(escape_query_string("機械学習"), "機械学習")

    def test_whitespace_triggers_quoting(self) -> None:
        self.assertEqual(escape_query_string("machine learning"), '"machine learning"')

    def test_quotes_and_backslashes_are_escaped(self) -> None:
        self.assertEqual(escape_query_string('say "hi"'), '"say \\"hi\\""')
        self.assertEqual(escape_query_string("it's a\\b"), '"it\'s a\\\\b"')


class TestValidateNoControlCharacters(unittest.TestCase):
    def test_accepts_printable(self) -> None:
        validate_no_control_characters("hello 世界", "search query")

    def test_rejects_control_characters(self) -> None:
        with self.assertRaises(CommandArgumentError) as ctx:
            validate_no_control_characters("arti\ncles", "table name")
        message = str(ctx.exception)
        self.assertIn("table name", message)
        self.assertIn("0x0A", message)

        with self.assertRaises(CommandArgumentError):
            validate_no_control_characters("x\x7f", "search query")


class TestBuildSearchCommand(unittest.TestCase):
    def test_minimal(self) -> None:
        self.assertEqual(build_search_command(table="articles", query="hello"), "SEARCH articles hello LIMIT 1000")

    def test_all_clauses(self) -> None:
        command = build_search_command(
            table="articles",
            query="golang",
            and_terms=("tutorial",),
            not_terms=("old",),
            filters=(("status", "1"),),
            sort_column="created_at",
            sort_desc=False,
            limit=10,
            offset=20,
        )
        self.assertEqual(
            command,
            "SEARCH articles golang AND tutorial NOT old FILTER status = 1 SORT created_at ASC LIMIT 20,10",
        )

    def test_sort_ascending_by_primary_key(self) -> None:
        self.assertEqual(
            build_search_command(table="t", query="q", sort_desc=False, limit=0),
            "SEARCH t q SORT ASC",
        )

    def test_negative_limit_is_rejected(self) -> None:
        with self.assertRaises(CommandArgumentError):
            build_search_command(table="t", query="q", limit=-1)

    def test_control_character_in_filter_value(self) -> None:
        with self.assertRaises(CommandArgumentError) as ctx:
            build_search_command(table="t", query="q", filters=(("status", "a\tb"),))
        self.assertIn("filter value", str(ctx.exception))


class TestBuildCountCommand(unittest.TestCase):
    def test_quoted_query_and_not(self) -> None:
        self.assertEqual(
            build_count_command(table="articles", query="machine learning", not_terms=("old",)),
            'COUNT articles "machine learning" NOT old',
        )


class TestBuildExpressionCommand(unittest.TestCase):
    def test_plain_expression_uses_clauses(self) -> None:
        expr = parse_search_expression("golang tutorial -old")
        self.assertEqual(
            build_expression_command(expr, table="articles"),
            "SEARCH articles golang AND tutorial NOT old LIMIT 1000",
        )

    def test_complex_expression_uses_query_string(self) -> None:
        expr = parse_search_expression("golang python OR ruby")
        self.assertEqual(
            build_expression_command(expr, table="articles"),
            'SEARCH articles "golang AND (python OR ruby)" LIMIT 1000',
        )

    def test_count(self) -> None:
        expr = parse_search_expression("+golang -old")
        self.assertEqual(
            build_expression_command(expr, table="articles", count=True),
            "COUNT articles golang NOT old",
        )

    def test_options_are_forwarded(self) -> None:
        expr = parse_search_expression("golang")
        self.assertEqual(
            build_expression_command(expr, table="articles", limit=5, sort_column="id"),
            "SEARCH articles golang SORT id DESC LIMIT 5",
        )

    def test_empty_query_is_rejected(self) -> None:
        expr = parse_search_expression("   ")
        with self.assertRaisesRegex(CommandArgumentError, "must not be empty"):
            build_expression_command(expr, table="articles")

    def test_exclusions_only_are_rejected(self) -> None:
        expr = parse_search_expression("-old -legacy")
        with self.assertRaisesRegex(CommandArgumentError, "only exclusions"):
            build_expression_command(expr, table="articles")
        with self.assertRaises(CommandArgumentError):
            build_expression_command(expr, table="articles", count=True)

    def test_or_group_without_required_terms(self) -> None:
        expr = parse_search_expression("python OR ruby")
        self.assertEqual(
            build_expression_command(expr, table="articles", count=True),
            'COUNT articles "(python OR ruby)"',
        )

    def test_count_rejects_search_only_options(self) -> None:
        expr = parse_search_expression("golang")
        for option in ({"limit": 5}, {"offset": 10}, {"sort_column": "id"}, {"sort_desc": False}):
            with self.subTest(option=option):
                with self.assertRaisesRegex(CommandArgumentError, "COUNT does not accept"):
                    build_expression_command(expr, table="articles", count=True, **option)

    def test_count_accepts_filters(self) -> None:
        expr = parse_search_expression("golang")
        self.assertEqual(
            build_expression_command(expr, table="articles", count=True, filters=(("status", "1"),)),
            "COUNT articles golang FILTER status = 1",
        )


if __name__ == "__main__":
    unittest.main()
