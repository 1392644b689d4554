from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class TimeRecord:
    """Domain entity: one day of attendance for one employee (Tageszeit).

    Durations are signed ``H:MM:SS`` text; over/under time is negative for a deficit.
    """

    work_date: date
    first_start: Optional[datetime]
    last_end: Optional[datetime]
    break_total: Optional[str]
    net_total: Optional[str]
    over_under: Optional[str]
    day_status: Optional[str] = None
