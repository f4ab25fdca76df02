"""Tokenization domain configuration: n-gram sizes and text normalization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryKit.config.common import get_section, optional_bool, optional_int, optional_str
from QueryKit.text.normalize import ALLOWED_WIDTHS

_ALLOWED_MODES = {"uniform", "hybrid"}


@dataclass(frozen=True, slots=True)
class NgramConfig:
    """N-gram generation settings."""

    mode: str = "hybrid"
    size: int = 1
    ascii_size: int = 2
    kanji_size: int = 1


@dataclass(frozen=True, slots=True)
class NormalizeConfig:
    """Text normalization applied before n-gram generation."""

    enabled: bool = True
    nfkc: bool = True
    width: str = "narrow"
    lower: bool = False


def load_ngram(raw: Mapping[str, Any]) -> NgramConfig:
    """Load the `ngram` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "ngram")
    return NgramConfig(
        mode=optional_str(section, "mode", "hybrid", "ngram.mode").strip().lower(),
        size=optional_int(section, "size", 1, "ngram.size"),
        ascii_size=optional_int(section, "ascii_size", 2, "ngram.ascii_size"),
        kanji_size=optional_int(section, "kanji_size", 1, "ngram.kanji_size"),
    )


def check_ngram(config: NgramConfig) -> None:
    """Validate n-gram constraints.

    Raises:
        ValueError: If a mode is unknown or a size is not positive.
    """
    if config.mode not in _ALLOWED_MODES:
        raise ValueError(f"ngram.mode must be one of {sorted(_ALLOWED_MODES)}")
    if config.size <= 0:
        raise ValueError("ngram.size must be positive")
    if config.ascii_size <= 0:
        raise ValueError("ngram.ascii_size must be positive")
    if config.kanji_size <= 0:
        raise ValueError("ngram.kanji_size must be positive")


def load_normalize(raw: Mapping[str, Any]) -> NormalizeConfig:
    """Load the `normalize` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "normalize")
    return NormalizeConfig(
        enabled=optional_bool(section, "enabled", True, "normalize.enabled"),
        nfkc=optional_bool(section, "nfkc", True, "normalize.nfkc"),
        width=optional_str(section, "width", "narrow", "normalize.width").strip().lower(),
        lower=optional_bool(section, "lower", False, "normalize.lower"),
    )


def check_normalize(config: NormalizeConfig) -> None:
    """Validate normalization constraints."""
    if config.width not in ALLOWED_WIDTHS:
        raise ValueError(f"normalize.width must be one of {sorted(ALLOWED_WIDTHS)}")
