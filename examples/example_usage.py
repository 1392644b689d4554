"""Example: compute one client's period and next shipment date without a database."""

from datetime import date

from src.timesheet_reports.timesheet_reports.scheduling.period import resolve_period
from src.timesheet_reports.timesheet_reports.scheduling.shipment import next_shipment_date


def main():
    today = date(2024, 3, 10)
    print(resolve_period(today=today, lastversand=15).label)
    print(next_shipment_date(sollversand=6, today=today, holidays={date(2024, 4, 5)}))


if __name__ == "__main__":
    main()
