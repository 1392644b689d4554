from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ClientStatus


@dataclass(frozen=True)
class Client:
    """Domain entity: a client organization that receives reports (Kunde).

    Shipment days are stored as day-of-month only, without year or month.
    """

    client_id: str
    name: str
    status: ClientStatus
    sollversand: Optional[int]
    lastversand: Optional[int]
    istversand: Optional[int]
    created_on: Optional[date] = None
    country_code: Optional[str] = None
    region_code: Optional[str] = None
