"""Text normalization applied before n-gram generation."""

from __future__ import annotations

import unicodedata
from typing import Final

ALLOWED_WIDTHS: Final[frozenset[str]] = frozenset({"keep", "narrow", "wide"})

_FULLWIDTH_OFFSET: Final[int] = 0xFEE0
_HALFWIDTH_FIRST: Final[int] = 0x21
_HALFWIDTH_LAST: Final[int] = 0x7E
_IDEOGRAPHIC_SPACE: Final[str] = "\u3000"

_TO_NARROW: Final[dict[int, str]] = {
    **{cp + _FULLWIDTH_OFFSET: chr(cp) for cp in range(_HALFWIDTH_FIRST, _HALFWIDTH_LAST + 1)},
    ord(_IDEOGRAPHIC_SPACE): " ",
}

_TO_WIDE: Final[dict[int, str]] = {
    **{cp: chr(cp + _FULLWIDTH_OFFSET) for cp in range(_HALFWIDTH_FIRST, _HALFWIDTH_LAST + 1)},
    ord(" "): _IDEOGRAPHIC_SPACE,
}


def normalize_text(text: str, *, nfkc: bool = True, width: str = "narrow", lower: bool = False) -> str:
    """Normalize text the way the search engine does before indexing.

    Args:
        text: Input text.
        nfkc: Apply Unicode NFKC normalization.
        width: Width conversion, one of "keep", "narrow" or "wide". "narrow"
            maps full-width ASCII variants and U+3000 to half-width; "wide"
            does the reverse.
        lower: Lowercase the result.

    Returns:
        Normalized text.

    Raises:
        ValueError: If `width` is unknown.
    """
    if width not in ALLOWED_WIDTHS:
        raise ValueError(f"width must be one of {sorted(ALLOWED_WIDTHS)}")

    result = unicodedata.normalize("NFKC", text) if nfkc else text
    if width == "narrow":
        result = result.translate(_TO_NARROW)
    elif width == "wide":
        result = result.translate(_TO_WIDE)
    if lower:
        result = result.lower()
    return result
