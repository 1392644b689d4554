from __future__ import annotations

from datetime import date

import structlog

from ..core.enums import DocumentKind
from ..rendering.model import EmployeeReport, RenderedDocument
from .paths import document_path
from .storage import ObjectStorage

log = structlog.get_logger("timesheet_reports.publishing")


class ReportPublisher:
    """Writes rendered documents to the report bucket under deterministic paths."""

    def __init__(self, storage: ObjectStorage, *, bucket: str):
        self._storage = storage
        self._bucket = bucket

    def document(self, report: EmployeeReport, *, kind: DocumentKind, content: bytes, run_date: date) -> RenderedDocument:
        path = document_path(
            client_id=report.client_id,
            client_name=report.client_name,
            employee_name=report.employee_name,
            run_date=run_date,
            kind=kind,
        )
        return RenderedDocument(kind=kind, path=path, content=content)

    def publish(self, documents: list[RenderedDocument]) -> None:
        for doc in documents:
            self._storage.upload(bucket=self._bucket, path=doc.path, content=doc.content, content_type=doc.content_type)
            log.info("document_uploaded", bucket=self._bucket, path=doc.path, size_bytes=len(doc.content))
