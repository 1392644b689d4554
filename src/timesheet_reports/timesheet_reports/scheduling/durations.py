"""Signed ``H:MM:SS`` durations as stored for breaks, net time and over/under time.

Values may be negative (a deficit against contracted hours). Malformed entries are
excluded from sums rather than rejected.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import TYPOGRAPHIC_MINUS


def parse_signed_duration(text: Optional[str]) -> Optional[int]:
    """Parse ``[-]H:MM:SS`` into signed seconds.

    Returns 0 for empty input and ``None`` (skip) for malformed input.
    """
    if text is None:
        return 0
    value = str(text).strip()
    if not value:
        return 0

    sign = 1
    if value.startswith("-"):
        sign = -1
        value = value[1:]

    parts = value.split(":")
    if len(parts) != 3:
        return None
    try:
        hours, minutes, seconds = (int(p) for p in parts)
    except ValueError:
        return None
    if hours < 0 or minutes < 0 or seconds < 0:
        return None

    return sign * (hours * 3600 + minutes * 60 + seconds)


def format_signed_duration(total_seconds: int) -> str:
    sign = "-" if total_seconds < 0 else ""
    magnitude = abs(int(total_seconds))
    hours = magnitude // 3600
    minutes = (magnitude % 3600) // 60
    seconds = magnitude % 60
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"


def sum_durations(values: Iterable[Optional[str]]) -> str:
    total = 0
    for value in values:
        seconds = parse_signed_duration(value)
        if seconds is None:
            continue
        total += seconds
    return format_signed_duration(total)


def format_for_display(text: Optional[str]) -> str:
    """Swap a leading ``-`` for the typographic minus used in documents."""
    if not text:
        return ""
    if text.startswith("-"):
        return TYPOGRAPHIC_MINUS + text[1:]
    return text
