from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Any


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by ``delta`` months, wrapping the year."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping ``day`` to the last day of the month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(max(int(day), 1), last_day))


def format_date_de(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime("%d.%m.%Y")


def clock_time(value: Any) -> str:
    """Render a clock-in/out timestamp as HH:MM.

    Accepts datetimes and ISO strings (``2024-03-01T08:15:00``).
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        return value.strftime("%H:%M")
    return str(value)[11:16]
