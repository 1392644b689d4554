from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of exactly one client (Mitarbeiter)."""

    employee_id: str
    client_id: str
    name: str
    deleted_at: Optional[datetime] = None
