from __future__ import annotations

from enum import Enum


class ClientStatus(str, Enum):
    """Status of a client organization as stored in the data store."""

    ACTIVE = "aktiv"
    INACTIVE = "inaktiv"


class DocumentKind(str, Enum):
    """Rendered document formats, keyed by file extension."""

    PDF = "pdf"
    SPREADSHEET = "xlsx"

    @property
    def content_type(self) -> str:
        return {
            DocumentKind.PDF: "application/pdf",
            DocumentKind.SPREADSHEET: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        }[self]


class UnitStatus(str, Enum):
    """Outcome of one processed unit (employee report)."""

    PUBLISHED = "PUBLISHED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class ScheduleOutcome(str, Enum):
    """What happened to a client's shipment schedule after its reports ran."""

    ADVANCED = "ADVANCED"
    LAST_ONLY = "LAST_ONLY"
    NOT_ADVANCED = "NOT_ADVANCED"
    FAILED = "FAILED"
