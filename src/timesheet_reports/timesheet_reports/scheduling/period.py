from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import clamped_date, format_date_de, shift_month
from ..core.constants import FIRST_REPORT_LOOKBACK_MONTHS


@dataclass(frozen=True)
class ReportPeriod:
    """Inclusive date range a client's reports cover."""

    start: date
    end: date

    @property
    def label(self) -> str:
        return f"{format_date_de(self.start)} - {format_date_de(self.end)}"


def resolve_period(*, today: date, lastversand: Optional[int]) -> ReportPeriod:
    """Compute the reporting period for a run on ``today``.

    The period always ends yesterday. With a previous shipment on day ``lastversand``
    it starts on that day of the preceding month, which continues exactly where the
    previous report (ending the day before its run) stopped. Without history it starts
    on the 1st, two months back.
    """
    end = today - timedelta(days=1)

    if lastversand:
        year, month = shift_month(today.year, today.month, -1)
        start = clamped_date(year, month, lastversand)
    else:
        year, month = shift_month(today.year, today.month, -FIRST_REPORT_LOOKBACK_MONTHS)
        start = date(year, month, 1)

    return ReportPeriod(start=start, end=end)
