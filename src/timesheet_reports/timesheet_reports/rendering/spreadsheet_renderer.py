from __future__ import annotations

import io

import pandas as pd
from openpyxl.utils import get_column_letter

from ..core.constants import SPREADSHEET_SHEET_NAME
from ..core.enums import DocumentKind
from ..core.exceptions import RenderError
from .base import DocumentRenderer
from .model import EmployeeReport

COLUMNS = [
    ("Datum", 12),
    ("Status", 16),
    ("Start", 10),
    ("Ende", 10),
    ("Pause", 10),
    ("Netto", 10),
    ("Über-/Minusstunden", 14),
]


class SpreadsheetRenderer(DocumentRenderer):
    kind = DocumentKind.SPREADSHEET

    def render(self, report: EmployeeReport) -> bytes:
        data = [
            [r.date, r.status, r.start, r.end, r.break_total, r.net_total, r.over_under]
            for r in report.rows
        ]
        data.append([""] * len(COLUMNS))
        data.append(["Summe", "", "", "", report.total_break, report.total_net, report.total_over_under])

        df = pd.DataFrame(data, columns=[name for name, _ in COLUMNS])

        out = io.BytesIO()
        try:
            with pd.ExcelWriter(out, engine="openpyxl") as writer:
                df.to_excel(writer, index=False, sheet_name=SPREADSHEET_SHEET_NAME)
                sheet = writer.sheets[SPREADSHEET_SHEET_NAME]
                for idx, (_, width) in enumerate(COLUMNS):
                    sheet.column_dimensions[get_column_letter(idx + 1)].width = width
        except (ValueError, OSError) as exc:
            raise RenderError(f"spreadsheet export failed for {report.employee_name}: {exc}") from exc
        return out.getvalue()
