from datetime import date

from src.timesheet_reports.timesheet_reports.scheduling.period import ReportPeriod, resolve_period


def test_period_continues_from_last_shipment_day():
    period = resolve_period(today=date(2024, 3, 10), lastversand=15)

    assert period.start == date(2024, 2, 15)
    assert period.end == date(2024, 3, 9)


def test_first_report_looks_back_two_months():
    period = resolve_period(today=date(2024, 3, 10), lastversand=None)

    assert period == ReportPeriod(start=date(2024, 1, 1), end=date(2024, 3, 9))


def test_previous_month_wraps_year():
    period = resolve_period(today=date(2024, 1, 5), lastversand=20)

    assert period.start == date(2023, 12, 20)
    assert period.end == date(2024, 1, 4)


def test_first_report_in_february_starts_in_previous_year():
    assert resolve_period(today=date(2024, 2, 3), lastversand=None).start == date(2023, 12, 1)


def test_last_shipment_day_beyond_month_end_is_clamped():
    assert resolve_period(today=date(2024, 3, 5), lastversand=31).start == date(2024, 2, 29)
    assert resolve_period(today=date(2023, 3, 5), lastversand=30).start == date(2023, 2, 28)


def test_period_never_includes_today():
    period = resolve_period(today=date(2024, 3, 1), lastversand=1)

    assert period.end == date(2024, 2, 29)
    assert period.start == date(2024, 2, 1)


def test_label_uses_german_dates():
    period = ReportPeriod(start=date(2024, 2, 15), end=date(2024, 3, 9))

    assert period.label == "15.02.2024 - 09.03.2024"
