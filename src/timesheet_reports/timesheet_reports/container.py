from __future__ import annotations

from dataclasses import dataclass

from .clients.mysql_client_repository import MySQLClientRepository
from .database.connection import DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .publishing.service import ReportPublisher
from .publishing.storage import SupabaseStorage
from .rendering.html_template import HtmlReportTemplate
from .rendering.pdf_renderer import PdfRenderer
from .rendering.spreadsheet_renderer import SpreadsheetRenderer
from .reporting.service import ReportRunService
from .settings import ReportSettings
from .timesheets.mysql_time_record_repository import MySQLTimeRecordRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    clients_repo: MySQLClientRepository
    employees_repo: MySQLEmployeeRepository
    time_records_repo: MySQLTimeRecordRepository
    holidays_repo: MySQLHolidayRepository

    storage: SupabaseStorage
    publisher: ReportPublisher
    report_service: ReportRunService


def build_container(settings: ReportSettings) -> Container:
    """Wire repositories, renderers and storage.

    Raises TemplateError when the report template cannot be loaded.
    """
    template = HtmlReportTemplate.load(settings.template_path)
    conn = DatabaseConnection(settings.db)

    clients_repo = MySQLClientRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    time_records_repo = MySQLTimeRecordRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)

    storage = SupabaseStorage(
        base_url=settings.storage_url,
        service_key=settings.storage_key,
        timeout=settings.http_timeout,
    )
    publisher = ReportPublisher(storage, bucket=settings.bucket)

    logo_path = None
    if settings.logo_path and settings.logo_path.is_file():
        logo_path = str(settings.logo_path.resolve())

    report_service = ReportRunService(
        clients_repo,
        employees_repo,
        time_records_repo,
        holidays_repo,
        renderers=[PdfRenderer(template), SpreadsheetRenderer()],
        publisher=publisher,
        logo_path=logo_path,
    )

    return Container(
        conn=conn,
        clients_repo=clients_repo,
        employees_repo=employees_repo,
        time_records_repo=time_records_repo,
        holidays_repo=holidays_repo,
        storage=storage,
        publisher=publisher,
        report_service=report_service,
    )
