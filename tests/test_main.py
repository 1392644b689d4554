from __future__ import annotations

import sys
from datetime import date
from types import SimpleNamespace

import pytest

from src.timesheet_reports.timesheet_reports import main as main_module
from src.timesheet_reports.timesheet_reports.core.exceptions import DataAccessError, TemplateError
from src.timesheet_reports.timesheet_reports.reporting.model import RunSummary


class FakeReportService:
    def __init__(self, error=None):
        self.runs: list[date] = []
        self._error = error

    def run(self, *, today):
        self.runs.append(today)
        if self._error:
            raise self._error
        return RunSummary(run_date=today)


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


def test_run_for_given_date_exits_zero(monkeypatch):
    service = FakeReportService()
    monkeypatch.setattr(main_module, "build_container", lambda settings: SimpleNamespace(report_service=service))

    assert main_module.main(["--date", "2024-03-10"]) == main_module.EXIT_OK
    assert service.runs == [date(2024, 3, 10)]


def test_missing_template_exits_with_config_status(monkeypatch):
    def fail(settings):
        raise TemplateError("report template not found")

    monkeypatch.setattr(main_module, "build_container", fail)

    assert main_module.main([]) == main_module.EXIT_CONFIG


def test_invalid_settings_exit_with_config_status(monkeypatch):
    monkeypatch.setattr(main_module, "get_settings_module", lambda: "config.testing")
    monkeypatch.setattr("config.testing.STORAGE_URL", "")

    assert main_module.main([]) == main_module.EXIT_CONFIG


def test_top_level_failure_exits_non_zero(monkeypatch):
    service = FakeReportService(error=DataAccessError("database down"))
    monkeypatch.setattr(main_module, "build_container", lambda settings: SimpleNamespace(report_service=service))

    assert main_module.main(["--date", "2024-03-10"]) == main_module.EXIT_FAILURE


def test_non_numeric_db_port_from_environment_exits_with_config_status(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("DB_PORT", "abc")
    monkeypatch.setenv("STORAGE_URL", "http://localhost:54321")
    monkeypatch.setenv("STORAGE_KEY", "service-key")
    monkeypatch.delitem(sys.modules, "config.config", raising=False)
    monkeypatch.delitem(sys.modules, "config.development", raising=False)
    monkeypatch.setattr(main_module, "build_container", lambda settings: pytest.fail("container built"))

    assert main_module.main([]) == main_module.EXIT_CONFIG
