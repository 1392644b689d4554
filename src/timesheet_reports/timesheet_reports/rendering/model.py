from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import format_date_de
from ..core.enums import DocumentKind
from ..scheduling.period import ReportPeriod


@dataclass(frozen=True)
class ReportRow:
    """One table row, already formatted for display."""

    date: str
    status: str
    start: str
    end: str
    break_total: str
    net_total: str
    over_under: str


@dataclass(frozen=True)
class EmployeeReport:
    """Render input for one employee's report over one period."""

    client_id: str
    client_name: str
    employee_id: str
    employee_name: str
    period: ReportPeriod
    rows: tuple[ReportRow, ...]
    total_break: str
    total_net: str
    total_over_under: str
    logo_path: Optional[str] = None

    def template_fields(self) -> dict[str, str]:
        """Placeholder values of the HTML template, except ``table_rows``."""
        return {
            "firma_name": self.client_name,
            "mitarbeiter_name": self.employee_name,
            "zeitraum_start": format_date_de(self.period.start),
            "zeitraum_ende": format_date_de(self.period.end),
            "summe_pause": self.total_break,
            "summe_netto": self.total_net,
            "summe_uebermin": self.total_over_under,
            "logo_path": self.logo_path or "",
        }


@dataclass(frozen=True)
class RenderedDocument:
    kind: DocumentKind
    path: str
    content: bytes = field(repr=False)

    @property
    def content_type(self) -> str:
        return self.kind.content_type
