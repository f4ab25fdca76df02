from __future__ import annotations

"""Public configuration API for QueryKit."""

from QueryKit.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from QueryKit.config.command import CommandConfig
from QueryKit.config.output import OutputConfig
from QueryKit.config.runtime import RuntimeConfig
from QueryKit.config.tokenize import NgramConfig, NormalizeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "NgramConfig",
    "NormalizeConfig",
    "CommandConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "check_cross_domain",
]
