from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(
        self,
        *,
        country_code: Optional[str],
        region_code: Optional[str],
        start: date,
        end: date,
    ) -> Sequence[Holiday]:
        """Holidays of a country/region within the inclusive range.

        Nation-wide holidays (no region) apply to every region of the country.
        """

        raise NotImplementedError
