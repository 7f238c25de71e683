"""Human-readable renderings of byte counts, percentages and durations."""
from __future__ import annotations

import datetime as dt

_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
_MEGABYTE = 1024 * 1024


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_bytes(num_bytes: float) -> str:
    """Format a byte count with binary units, e.g. 1572864 -> "1.5 MB"."""
    value = float(max(0, num_bytes))
    if value == 0:
        return "0 B"
    unit = 0
    while value >= 1024 and unit < len(_BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{_trim(value)} {_BYTE_UNITS[unit]}"


def to_megabytes(num_bytes: float) -> float:
    return num_bytes / _MEGABYTE


def format_megabytes(num_bytes: float) -> str:
    return f"{to_megabytes(num_bytes):.2f} MB"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_duration(seconds: float) -> str:
    seconds = int(max(0, seconds))
    delta = dt.timedelta(seconds=seconds)
    days = delta.days
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
