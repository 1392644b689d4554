from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import structlog

from ..clients.model import Client
from ..clients.repository import ClientRepository
from ..common.datetime_utils import clock_time, format_date_de
from ..core.enums import ScheduleOutcome, UnitStatus
from ..core.exceptions import DataAccessError, DomainError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from ..publishing.service import ReportPublisher
from ..rendering.base import DocumentRenderer
from ..rendering.model import EmployeeReport, ReportRow
from ..scheduling.durations import format_for_display, sum_durations
from ..scheduling.period import ReportPeriod, resolve_period
from ..scheduling.shipment import holiday_window, next_shipment_date, shipment_candidate
from ..timesheets.model import TimeRecord
from ..timesheets.repository import TimeRecordRepository
from .model import ClientOutcome, RunSummary, UnitResult

log = structlog.get_logger("timesheet_reports.reporting")


def build_employee_report(
    client: Client,
    employee: Employee,
    period: ReportPeriod,
    records: Sequence[TimeRecord],
    *,
    logo_path: Optional[str] = None,
) -> EmployeeReport:
    rows = tuple(
        ReportRow(
            date=format_date_de(r.work_date),
            status=r.day_status or "",
            start=clock_time(r.first_start),
            end=clock_time(r.last_end),
            break_total=format_for_display(r.break_total),
            net_total=format_for_display(r.net_total),
            over_under=format_for_display(r.over_under),
        )
        for r in records
    )
    return EmployeeReport(
        client_id=client.client_id,
        client_name=client.name,
        employee_id=employee.employee_id,
        employee_name=employee.name,
        period=period,
        rows=rows,
        total_break=format_for_display(sum_durations(r.break_total for r in records)),
        total_net=format_for_display(sum_durations(r.net_total for r in records)),
        total_over_under=format_for_display(sum_durations(r.over_under for r in records)),
        logo_path=logo_path,
    )


class ReportRunService:
    """Generates, publishes and schedules the reports of every client due on a day.

    Clients and employees are processed one after another; a failing unit is recorded
    in the summary and the run moves on to the next one.
    """

    def __init__(
        self,
        clients: ClientRepository,
        employees: EmployeeRepository,
        time_records: TimeRecordRepository,
        holidays: HolidayRepository,
        *,
        renderers: Sequence[DocumentRenderer],
        publisher: ReportPublisher,
        logo_path: Optional[str] = None,
    ):
        self._clients = clients
        self._employees = employees
        self._time_records = time_records
        self._holidays = holidays
        self._renderers = list(renderers)
        self._publisher = publisher
        self._logo_path = logo_path

    def run(self, *, today: date) -> RunSummary:
        clients = self._clients.list_due(shipment_day=today.day)
        log.info("clients_due", run_date=today.isoformat(), count=len(clients), names=[c.name for c in clients])

        summary = RunSummary(run_date=today)
        for client in clients:
            summary.clients.append(self.process_client(client, today=today))

        log.info("run_finished", **summary.as_log_fields())
        return summary

    def process_client(self, client: Client, *, today: date) -> ClientOutcome:
        clog = log.bind(client_id=client.client_id, client_name=client.name)
        period = resolve_period(today=today, lastversand=client.lastversand)
        outcome = ClientOutcome(client_id=client.client_id, client_name=client.name, period=period)
        clog.info("client_processing", period_start=period.start.isoformat(), period_end=period.end.isoformat())

        try:
            employees = self._employees.list_active_for_client(client.client_id)
        except DataAccessError as exc:
            clog.error("employees_query_failed", error=str(exc))
            outcome.reason = f"employees query failed: {exc}"
            return outcome

        clog.info("employees_found", names=[e.name for e in employees])
        for employee in employees:
            outcome.units.append(self.process_employee(client, employee, period=period, today=today))

        if outcome.published:
            self._advance_schedule(client, outcome, today=today)
        else:
            clog.info("schedule_unchanged", reason="no documents published")
        return outcome

    def process_employee(self, client: Client, employee: Employee, *, period: ReportPeriod, today: date) -> UnitResult:
        elog = log.bind(
            client_id=client.client_id,
            client_name=client.name,
            employee_id=employee.employee_id,
            employee_name=employee.name,
        )

        def result(status: UnitStatus, reason: Optional[str] = None, paths: tuple[str, ...] = ()) -> UnitResult:
            return UnitResult(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                status=status,
                reason=reason,
                paths=paths,
            )

        try:
            records = self._time_records.list_for_employee(
                client_id=client.client_id,
                employee_id=employee.employee_id,
                start_date=period.start,
                end_date=period.end,
            )
        except DataAccessError as exc:
            elog.error("time_records_query_failed", error=str(exc))
            return result(UnitStatus.FAILED, f"time records query failed: {exc}")

        elog.info("time_records_found", count=len(records))
        if not records:
            return result(UnitStatus.SKIPPED, "no time records in period")

        report = build_employee_report(client, employee, period, records, logo_path=self._logo_path)

        try:
            documents = [
                self._publisher.document(report, kind=r.kind, content=r.render(report), run_date=today)
                for r in self._renderers
            ]
        except DomainError as exc:
            elog.error("render_failed", error=str(exc))
            return result(UnitStatus.FAILED, f"render failed: {exc}")

        try:
            self._publisher.publish(documents)
        except DomainError as exc:
            elog.error("upload_failed", error=str(exc))
            return result(UnitStatus.FAILED, f"upload failed: {exc}")

        elog.info("report_published")
        return result(UnitStatus.PUBLISHED, paths=tuple(d.path for d in documents))

    def _advance_schedule(self, client: Client, outcome: ClientOutcome, *, today: date) -> None:
        clog = log.bind(client_id=client.client_id, client_name=client.name)
        istversand: Optional[int] = None

        try:
            if client.sollversand:
                candidate = shipment_candidate(sollversand=client.sollversand, today=today)
                start, end = holiday_window(candidate)
                holidays = {
                    h.holiday_date
                    for h in self._holidays.list_range(
                        country_code=client.country_code,
                        region_code=client.region_code,
                        start=start,
                        end=end,
                    )
                }
                outcome.next_shipment = next_shipment_date(sollversand=client.sollversand, today=today, holidays=holidays)
                istversand = outcome.next_shipment.day

            updated = self._clients.update_schedule(
                client_id=client.client_id,
                lastversand=today.day,
                istversand=istversand,
            )
        except DataAccessError as exc:
            # Published documents stay in place; the schedule is stale until fixed.
            clog.error("schedule_update_failed", error=str(exc))
            outcome.schedule = ScheduleOutcome.FAILED
            return

        if not updated:
            clog.warning("schedule_update_failed", error="client row not found")
            outcome.schedule = ScheduleOutcome.FAILED
            return

        outcome.schedule = ScheduleOutcome.ADVANCED if istversand is not None else ScheduleOutcome.LAST_ONLY
        clog.info(
            "schedule_advanced",
            lastversand=today.day,
            istversand=istversand,
            next_shipment=outcome.next_shipment.isoformat() if outcome.next_shipment else None,
        )
