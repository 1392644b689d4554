from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.timesheet_reports.timesheet_reports.clients.model import Client
from src.timesheet_reports.timesheet_reports.core.enums import ClientStatus, DocumentKind, ScheduleOutcome, UnitStatus
from src.timesheet_reports.timesheet_reports.core.exceptions import DataAccessError, RenderError, StorageError
from src.timesheet_reports.timesheet_reports.employees.model import Employee
from src.timesheet_reports.timesheet_reports.holidays.model import Holiday
from src.timesheet_reports.timesheet_reports.publishing.service import ReportPublisher
from src.timesheet_reports.timesheet_reports.rendering.base import DocumentRenderer
from src.timesheet_reports.timesheet_reports.reporting.service import ReportRunService, build_employee_report
from src.timesheet_reports.timesheet_reports.scheduling.period import ReportPeriod
from src.timesheet_reports.timesheet_reports.timesheets.model import TimeRecord

TODAY = date(2024, 3, 10)


def make_client(**overrides) -> Client:
    values = dict(
        client_id="c1",
        name="Muster GmbH",
        status=ClientStatus.ACTIVE,
        sollversand=10,
        lastversand=15,
        istversand=10,
        created_on=date(2023, 5, 1),
        country_code="DE",
        region_code="BY",
    )
    values.update(overrides)
    return Client(**values)


def record(day: int, *, net="8:00:00", brk="0:30:00", over="0:00:00", status="anwesend") -> TimeRecord:
    return TimeRecord(
        work_date=date(2024, 3, day),
        first_start=datetime(2024, 3, day, 8, 0),
        last_end=datetime(2024, 3, day, 16, 30),
        break_total=brk,
        net_total=net,
        over_under=over,
        day_status=status,
    )


class FakeClientsRepo:
    def __init__(self, clients, *, fail_update=False, missing_row=False):
        self._clients = list(clients)
        self.updates: list[dict] = []
        self._fail_update = fail_update
        self._missing_row = missing_row

    def list_due(self, *, shipment_day: int):
        return [c for c in self._clients if c.istversand == shipment_day and c.status == ClientStatus.ACTIVE]

    def update_schedule(self, *, client_id: str, lastversand: int, istversand: Optional[int] = None) -> bool:
        if self._fail_update:
            raise DataAccessError("connection lost")
        if self._missing_row:
            return False
        self.updates.append({"client_id": client_id, "lastversand": lastversand, "istversand": istversand})
        return True


class FakeEmployeesRepo:
    def __init__(self, by_client, *, failing=()):
        self._by_client = by_client
        self._failing = set(failing)

    def list_active_for_client(self, client_id: str):
        if client_id in self._failing:
            raise DataAccessError("employees table unavailable")
        return [e for e in self._by_client.get(client_id, []) if e.deleted_at is None]


class FakeTimeRecordsRepo:
    def __init__(self, by_employee, *, failing=()):
        self._by_employee = by_employee
        self._failing = set(failing)
        self.calls: list[dict] = []

    def list_for_employee(self, *, client_id, employee_id, start_date, end_date):
        self.calls.append({"employee_id": employee_id, "start_date": start_date, "end_date": end_date})
        if employee_id in self._failing:
            raise DataAccessError("timeout")
        rows = [r for r in self._by_employee.get(employee_id, []) if start_date <= r.work_date <= end_date]
        return sorted(rows, key=lambda r: r.work_date)


class FakeHolidaysRepo:
    def __init__(self, holidays=(), *, fail=False):
        self._holidays = list(holidays)
        self._fail = fail
        self.calls: list[dict] = []

    def list_range(self, *, country_code, region_code, start, end):
        self.calls.append({"country_code": country_code, "region_code": region_code, "start": start, "end": end})
        if self._fail:
            raise DataAccessError("holidays table unavailable")
        return [h for h in self._holidays if start <= h.holiday_date <= end]


class FakeStorage:
    def __init__(self, *, fail=False):
        self.uploads: list[dict] = []
        self._fail = fail

    def upload(self, *, bucket, path, content, content_type):
        if self._fail:
            raise StorageError("HTTP 503")
        self.uploads.append({"bucket": bucket, "path": path, "content": content, "content_type": content_type})


class FakeRenderer(DocumentRenderer):
    def __init__(self, kind: DocumentKind, *, fail_for=()):
        self.kind = kind
        self._fail_for = set(fail_for)
        self.rendered = []

    def render(self, report):
        if report.employee_name in self._fail_for:
            raise RenderError("broken template")
        self.rendered.append(report)
        return f"{self.kind.value}:{report.employee_name}".encode()


def build_service(clients_repo, employees_repo, records_repo, holidays_repo=None, storage=None, renderers=None):
    storage = storage if storage is not None else FakeStorage()
    renderers = renderers or [FakeRenderer(DocumentKind.PDF), FakeRenderer(DocumentKind.SPREADSHEET)]
    svc = ReportRunService(
        clients_repo,
        employees_repo,
        records_repo,
        holidays_repo or FakeHolidaysRepo(),
        renderers=renderers,
        publisher=ReportPublisher(storage, bucket="berichte"),
    )
    return svc, storage


def test_one_employee_produces_pdf_and_spreadsheet_and_advances_schedule():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="Erika Mustermann")]})
    records = FakeTimeRecordsRepo({"e1": [record(1), record(4)]})

    svc, storage = build_service(clients, employees, records)
    summary = svc.run(today=TODAY)

    assert [u["path"] for u in storage.uploads] == [
        "c1/2024_3/Muster_GmbH_3_2024_Erika_Mustermann.pdf",
        "c1/2024_3/Muster_GmbH_3_2024_Erika_Mustermann.xlsx",
    ]
    assert storage.uploads[0]["content_type"] == "application/pdf"
    assert storage.uploads[1]["content_type"] == (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert all(u["bucket"] == "berichte" for u in storage.uploads)

    # 2024-04-10 is a Wednesday
    assert clients.updates == [{"client_id": "c1", "lastversand": 10, "istversand": 10}]
    outcome = summary.clients[0]
    assert outcome.schedule == ScheduleOutcome.ADVANCED
    assert outcome.next_shipment == date(2024, 4, 10)
    assert summary.count(UnitStatus.PUBLISHED) == 1


def test_records_are_fetched_for_resolved_period():
    clients = FakeClientsRepo([make_client(lastversand=15)])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})
    records = FakeTimeRecordsRepo({"e1": [record(1)]})

    svc, _ = build_service(clients, employees, records)
    summary = svc.run(today=TODAY)

    assert records.calls == [{"employee_id": "e1", "start_date": date(2024, 2, 15), "end_date": date(2024, 3, 9)}]
    assert summary.clients[0].period == ReportPeriod(start=date(2024, 2, 15), end=date(2024, 3, 9))


def test_employee_without_records_is_skipped_and_schedule_is_kept():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})
    records = FakeTimeRecordsRepo({})

    svc, storage = build_service(clients, employees, records)
    summary = svc.run(today=TODAY)

    assert storage.uploads == []
    assert clients.updates == []
    assert summary.clients[0].units[0].status == UnitStatus.SKIPPED
    assert summary.clients[0].schedule == ScheduleOutcome.NOT_ADVANCED


def test_client_without_employees_produces_nothing():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({
        "c1": [Employee(employee_id="e1", client_id="c1", name="Gone", deleted_at=datetime(2024, 1, 1))]
    })

    svc, storage = build_service(clients, employees, FakeTimeRecordsRepo({}))
    summary = svc.run(today=TODAY)

    assert storage.uploads == []
    assert clients.updates == []
    assert summary.clients[0].units == []


def test_clients_not_due_today_are_ignored():
    clients = FakeClientsRepo([
        make_client(client_id="c1", istversand=11),
        make_client(client_id="c2", status=ClientStatus.INACTIVE),
    ])

    svc, _ = build_service(clients, FakeEmployeesRepo({}), FakeTimeRecordsRepo({}))

    assert svc.run(today=TODAY).clients == []


def test_without_target_day_only_last_shipment_is_updated():
    clients = FakeClientsRepo([make_client(sollversand=None)])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})
    holidays = FakeHolidaysRepo()

    svc, _ = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}), holidays)
    summary = svc.run(today=TODAY)

    assert clients.updates == [{"client_id": "c1", "lastversand": 10, "istversand": None}]
    assert holidays.calls == []
    assert summary.clients[0].schedule == ScheduleOutcome.LAST_ONLY


def test_schedule_slides_over_holidays_of_client_region():
    clients = FakeClientsRepo([make_client(sollversand=1)])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})
    holidays = FakeHolidaysRepo([
        Holiday(holiday_date=date(2024, 3, 29), country_code="DE", name="Karfreitag"),
        Holiday(holiday_date=date(2024, 4, 1), country_code="DE", name="Ostermontag"),
    ])

    svc, _ = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}), holidays)
    svc.run(today=TODAY)

    assert holidays.calls == [
        {"country_code": "DE", "region_code": "BY", "start": date(2024, 3, 1), "end": date(2024, 4, 1)}
    ]
    assert clients.updates == [{"client_id": "c1", "lastversand": 10, "istversand": 28}]


def test_failing_employee_does_not_stop_the_others():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({
        "c1": [
            Employee(employee_id="e1", client_id="c1", name="A"),
            Employee(employee_id="e2", client_id="c1", name="B"),
            Employee(employee_id="e3", client_id="c1", name="C"),
        ]
    })
    records = FakeTimeRecordsRepo({"e2": [record(1)], "e3": [record(2)]}, failing={"e1"})
    renderers = [FakeRenderer(DocumentKind.PDF, fail_for={"C"}), FakeRenderer(DocumentKind.SPREADSHEET)]

    svc, storage = build_service(clients, employees, records, renderers=renderers)
    summary = svc.run(today=TODAY)

    statuses = [(u.employee_name, u.status) for u in summary.clients[0].units]
    assert statuses == [("A", UnitStatus.FAILED), ("B", UnitStatus.PUBLISHED), ("C", UnitStatus.FAILED)]
    assert len(storage.uploads) == 2
    assert len(clients.updates) == 1


def test_failing_client_query_skips_only_that_client():
    clients = FakeClientsRepo([make_client(client_id="c1"), make_client(client_id="c2", name="Zweite AG")])
    employees = FakeEmployeesRepo(
        {"c2": [Employee(employee_id="e9", client_id="c2", name="Z")]},
        failing={"c1"},
    )

    svc, storage = build_service(clients, employees, FakeTimeRecordsRepo({"e9": [record(3)]}))
    summary = svc.run(today=TODAY)

    assert summary.clients[0].reason.startswith("employees query failed")
    assert summary.clients_skipped == 1
    assert [u["path"] for u in storage.uploads][0].startswith("c2/2024_3/Zweite_AG_3_2024_Z")
    assert [u["client_id"] for u in clients.updates] == ["c2"]


def test_upload_failure_keeps_schedule():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})

    svc, _ = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}), storage=FakeStorage(fail=True))
    summary = svc.run(today=TODAY)

    assert summary.clients[0].units[0].status == UnitStatus.FAILED
    assert "upload failed" in summary.clients[0].units[0].reason
    assert clients.updates == []


def test_schedule_update_failure_is_recorded_without_undoing_uploads():
    clients = FakeClientsRepo([make_client()], fail_update=True)
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})

    svc, storage = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}))
    summary = svc.run(today=TODAY)

    assert len(storage.uploads) == 2
    assert summary.clients[0].schedule == ScheduleOutcome.FAILED
    assert summary.as_log_fields()["schedules_failed"] == 1


def test_holiday_lookup_failure_keeps_uploads_and_skips_schedule_write():
    clients = FakeClientsRepo([make_client()])
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})
    holidays = FakeHolidaysRepo(fail=True)

    svc, storage = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}), holidays_repo=holidays)
    summary = svc.run(today=TODAY)

    assert len(storage.uploads) == 2
    assert len(holidays.calls) == 1
    assert clients.updates == []
    assert summary.clients[0].schedule == ScheduleOutcome.FAILED
    assert summary.clients[0].next_shipment is None


def test_schedule_write_on_missing_client_row_is_recorded_as_failed():
    clients = FakeClientsRepo([make_client()], missing_row=True)
    employees = FakeEmployeesRepo({"c1": [Employee(employee_id="e1", client_id="c1", name="A")]})

    svc, storage = build_service(clients, employees, FakeTimeRecordsRepo({"e1": [record(1)]}))
    summary = svc.run(today=TODAY)

    assert len(storage.uploads) == 2
    assert summary.clients[0].schedule == ScheduleOutcome.FAILED
    assert summary.as_log_fields()["schedules_failed"] == 1


def test_failure_loading_due_clients_aborts_run():
    class BrokenClients(FakeClientsRepo):
        def list_due(self, *, shipment_day: int):
            raise DataAccessError("database down")

    svc, _ = build_service(BrokenClients([]), FakeEmployeesRepo({}), FakeTimeRecordsRepo({}))

    with pytest.raises(DataAccessError):
        svc.run(today=TODAY)


def test_build_employee_report_formats_rows_and_totals():
    period = ReportPeriod(start=date(2024, 2, 15), end=date(2024, 3, 9))
    records = [
        record(1, net="8:00:00", brk="0:30:00", over="0:30:00", status="anwesend"),
        TimeRecord(
            work_date=date(2024, 3, 4),
            first_start="2024-03-04T07:45:00+00:00",
            last_end=None,
            break_total=None,
            net_total="6:00:00",
            over_under="-2:00:00",
            day_status=None,
        ),
    ]

    report = build_employee_report(
        make_client(),
        Employee(employee_id="e1", client_id="c1", name="Erika"),
        period,
        records,
        logo_path="/srv/logo.png",
    )

    first, second = report.rows
    assert (first.date, first.status, first.start, first.end) == ("01.03.2024", "anwesend", "08:00", "16:30")
    assert (second.start, second.end, second.break_total, second.over_under) == ("07:45", "", "", "−2:00:00")
    assert report.total_break == "0:30:00"
    assert report.total_net == "14:00:00"
    assert report.total_over_under == "−1:30:00"
    assert report.template_fields()["zeitraum_start"] == "15.02.2024"
    assert report.template_fields()["logo_path"] == "/srv/logo.png"
