from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import ScheduleOutcome, UnitStatus
from ..scheduling.period import ReportPeriod


@dataclass(frozen=True)
class UnitResult:
    """Outcome of one employee's report."""

    employee_id: str
    employee_name: str
    status: UnitStatus
    reason: Optional[str] = None
    paths: tuple[str, ...] = ()


@dataclass
class ClientOutcome:
    client_id: str
    client_name: str
    period: Optional[ReportPeriod] = None
    units: list[UnitResult] = field(default_factory=list)
    schedule: ScheduleOutcome = ScheduleOutcome.NOT_ADVANCED
    next_shipment: Optional[date] = None
    reason: Optional[str] = None

    def count(self, status: UnitStatus) -> int:
        return sum(1 for u in self.units if u.status == status)

    @property
    def published(self) -> int:
        return self.count(UnitStatus.PUBLISHED)


@dataclass
class RunSummary:
    run_date: date
    clients: list[ClientOutcome] = field(default_factory=list)

    def count(self, status: UnitStatus) -> int:
        return sum(c.count(status) for c in self.clients)

    @property
    def clients_skipped(self) -> int:
        return sum(1 for c in self.clients if c.reason is not None)

    def as_log_fields(self) -> dict:
        return {
            "run_date": self.run_date.isoformat(),
            "clients": len(self.clients),
            "clients_skipped": self.clients_skipped,
            "published": self.count(UnitStatus.PUBLISHED),
            "skipped": self.count(UnitStatus.SKIPPED),
            "failed": self.count(UnitStatus.FAILED),
            "schedules_failed": sum(1 for c in self.clients if c.schedule == ScheduleOutcome.FAILED),
        }
