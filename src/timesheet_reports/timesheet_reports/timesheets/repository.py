from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import TimeRecord


class TimeRecordRepository(Protocol):
    def list_for_employee(
        self,
        *,
        client_id: str,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[TimeRecord]:
        """Records in the inclusive range, ordered by date ascending."""

        raise NotImplementedError
