"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the command runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from QueryKit.cli.commands import ConvertCommand, NgramCommand, ParseCommand, SimplifyCommand, WireCommand
from QueryKit.cli.runner import CommandRunner
from QueryKit.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)


def _load_app_config(config_path: Path) -> AppConfig:
    """Load config, layering an explicit file over the defaults file when both exist."""
    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.exists():
        return load_config_with_defaults(config_path, DEFAULT_CONFIG_PATH)
    if config_path.exists():
        return load_config(config_path)
    if config_path == DEFAULT_CONFIG_PATH:
        return parse_config_dict({})
    raise click.BadParameter(f"Config file not found: {config_path}", param_hint="--config")


@click.group(help="QueryKit: compile search expressions and generate n-grams.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    try:
        ctx.obj = _load_app_config(config_path)
    except (TypeError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


@cli.command("convert")
@click.argument("expression")
@click.pass_context
def convert_cmd(ctx: click.Context, expression: str) -> None:
    """Convert EXPRESSION into a boolean query string."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda config, writer: ConvertCommand(expression=expression, output_writer=writer),
    )


@cli.command("parse")
@click.argument("expression")
@click.pass_context
def parse_cmd(ctx: click.Context, expression: str) -> None:
    """Show the parsed components of EXPRESSION."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda config, writer: ParseCommand(expression=expression, output_writer=writer),
    )


@cli.command("simplify")
@click.argument("expression")
@click.pass_context
def simplify_cmd(ctx: click.Context, expression: str) -> None:
    """Reduce EXPRESSION to main, AND and NOT terms."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda config, writer: SimplifyCommand(expression=expression, output_writer=writer),
    )


@cli.command("ngrams")
@click.argument("text")
@click.option("--hybrid/--uniform", "hybrid", default=None, help="Override ngram.mode.")
@click.option("--n", "size", type=click.IntRange(min=1), default=None, help="Window size for uniform mode.")
@click.option("--ascii-n", "ascii_size", type=click.IntRange(min=1), default=None, help="Non-CJK window size.")
@click.option("--kanji-n", "kanji_size", type=click.IntRange(min=1), default=None, help="CJK window size.")
@click.pass_context
def ngrams_cmd(
    ctx: click.Context,
    text: str,
    hybrid: bool | None,
    size: int | None,
    ascii_size: int | None,
    kanji_size: int | None,
) -> None:
    """Generate character n-grams for TEXT."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda config, writer: NgramCommand(
            text=text,
            config=config,
            output_writer=writer,
            hybrid=hybrid,
            size=size,
            ascii_size=ascii_size,
            kanji_size=kanji_size,
        ),
    )


@cli.command("command")
@click.argument("expression")
@click.option("--table", default=None, help="Table name (defaults to command.table).")
@click.option("--count", is_flag=True, default=False, help="Build COUNT instead of SEARCH.")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Result limit (SEARCH only).")
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Result offset.")
@click.pass_context
def command_cmd(
    ctx: click.Context,
    expression: str,
    table: str | None,
    count: bool,
    limit: int | None,
    offset: int,
) -> None:
    """Print the wire command that searches for EXPRESSION."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda config, writer: WireCommand(
            expression=expression,
            config=config,
            output_writer=writer,
            table=table,
            count=count,
            limit=limit,
            offset=offset,
        ),
    )
