from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet

from ..common.datetime_utils import clamped_date, shift_month

SATURDAY = 5


def shipment_candidate(*, sollversand: int, today: date) -> date:
    """Target ship day in the month after ``today``, before any weekend/holiday slide.

    Always later than ``today`` since it falls in the following month.
    """
    year, month = shift_month(today.year, today.month, 1)
    return clamped_date(year, month, sollversand)


def holiday_window(candidate: date) -> tuple[date, date]:
    """Date range whose holidays can affect sliding back from ``candidate``.

    Sliding can cross into the preceding month, so the window starts on the 1st of
    the month before the candidate's month.
    """
    year, month = shift_month(candidate.year, candidate.month, -1)
    return date(year, month, 1), candidate


def is_business_day(day: date, holidays: AbstractSet[date]) -> bool:
    return day.weekday() < SATURDAY and day not in holidays


def next_shipment_date(*, sollversand: int, today: date, holidays: AbstractSet[date] = frozenset()) -> date:
    """Next valid shipment date, never later than the target day.

    Weekends and holidays move the date backward to the nearest preceding business day.
    """
    shipment = shipment_candidate(sollversand=sollversand, today=today)
    while not is_business_day(shipment, holidays):
        shipment -= timedelta(days=1)
    return shipment
