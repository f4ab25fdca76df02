from __future__ import annotations

from typing import Final

_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
_BYTES_PER_KB: Final[float] = 1024.0


def format_bytes(size_bytes: int) -> str:
    """Format a byte count as a short human-readable string (e.g. "1.50KB")."""
    if size_bytes <= 0:
        return "0B"

    size = float(size_bytes)
    unit_index = 0
    while size >= _BYTES_PER_KB and unit_index < len(_UNITS) - 1:
        size /= _BYTES_PER_KB
        unit_index += 1

    if size >= 100:
        precision = 0
    elif size >= 10:
        precision = 1
    else:
        precision = 2
    return f"{size:.{precision}f}{_UNITS[unit_index]}"
