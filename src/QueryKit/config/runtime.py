"""Runtime domain configuration (logging, process behavior)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from QueryKit.config.common import get_section, optional_bool, optional_str

LOG_LEVEL_ENV_VAR = "QUERYKIT_LOG_LEVEL"
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Store validated runtime behavior settings."""

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load runtime configuration from raw mapping.

    The `QUERYKIT_LOG_LEVEL` environment variable, when set, wins over
    `log.level`.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed runtime configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "log")
    level = optional_str(section, "level", "INFO", "log.level")
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_level:
        level = env_level
    return RuntimeConfig(
        level=level.upper(),
        to_file=optional_bool(section, "to_file", False, "log.to_file"),
        dir=optional_str(section, "dir", "log", "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate runtime domain constraints.

    Args:
        config: Parsed runtime configuration.

    Raises:
        ValueError: If values violate runtime constraints.
    """
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if not config.dir.strip():
        raise ValueError("log.dir must not be empty")
