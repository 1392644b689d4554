from __future__ import annotations

import re
from datetime import date

from ..core.enums import DocumentKind

_FORBIDDEN = re.compile(r'[/\\?%*:|"<>]')
_WHITESPACE = re.compile(r"\s+")


def sanitize_filename(value: str) -> str:
    """Strip path/shell-unsafe characters and join words with underscores."""
    return _WHITESPACE.sub("_", _FORBIDDEN.sub("", value))


def base_file_name(*, client_name: str, employee_name: str, run_date: date) -> str:
    return f"{sanitize_filename(client_name)}_{run_date.month}_{run_date.year}_{sanitize_filename(employee_name)}"


def document_path(
    *,
    client_id: str,
    client_name: str,
    employee_name: str,
    run_date: date,
    kind: DocumentKind,
) -> str:
    """Object path inside the bucket: ``<client_id>/<year>_<month>/<base>.<ext>``."""
    base = base_file_name(client_name=client_name, employee_name=employee_name, run_date=run_date)
    return f"{client_id}/{run_date.year}_{run_date.month}/{base}.{kind.value}"
