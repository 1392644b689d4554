from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    country_code: str
    region_code: Optional[str] = None
    name: Optional[str] = None
