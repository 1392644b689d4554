from __future__ import annotations

import io

from xhtml2pdf import pisa

from ..core.enums import DocumentKind
from ..core.exceptions import RenderError
from .base import DocumentRenderer
from .html_template import HtmlReportTemplate
from .model import EmployeeReport


class PdfRenderer(DocumentRenderer):
    """HTML template -> A4 PDF (page size comes from the template's @page rule)."""

    kind = DocumentKind.PDF

    def __init__(self, template: HtmlReportTemplate):
        self._template = template

    def render(self, report: EmployeeReport) -> bytes:
        html = self._template.render(report)
        buf = io.BytesIO()
        status = pisa.CreatePDF(src=html, dest=buf, encoding="utf-8")
        if status.err:
            raise RenderError(f"PDF conversion failed for {report.employee_name} ({status.err} errors)")
        return buf.getvalue()
