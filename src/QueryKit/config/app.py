from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from QueryKit.config.command import CommandConfig, check_command, load_command
from QueryKit.config.output import OutputConfig, check_output, load_output
from QueryKit.config.runtime import RuntimeConfig, check_runtime, load_runtime
from QueryKit.config.tokenize import (
    NgramConfig,
    NormalizeConfig,
    check_ngram,
    check_normalize,
    load_ngram,
    load_normalize,
)

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    ngram: NgramConfig = field(default_factory=NgramConfig)
    normalize: NormalizeConfig = field(default_factory=NormalizeConfig)
    command: CommandConfig = field(default_factory=CommandConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    ngram = load_ngram(raw)
    normalize = load_normalize(raw)
    command = load_command(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_ngram(ngram)
    check_normalize(normalize)
    check_command(command)
    check_output(output)

    config = AppConfig(
        runtime=runtime,
        ngram=ngram,
        normalize=normalize,
        command=command,
        output=output,
    )
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    _defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override file.
        default_path: Defaults file.
        _defaults_text: Defaults YAML given inline instead of `default_path`.

    Returns:
        Parsed configuration.
    """
    if _defaults_text is not None:
        base = parse_yaml(_defaults_text)
    else:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
        if config_path == default_path:
            return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    if "json" in config.output.formats and not config.output.base_dir.strip():
        raise ValueError("output.formats=json requires a non-empty output.base_dir")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
