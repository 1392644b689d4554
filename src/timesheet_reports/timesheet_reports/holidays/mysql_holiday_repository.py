from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(
        self,
        *,
        country_code: Optional[str],
        region_code: Optional[str],
        start: date,
        end: date,
    ) -> Sequence[Holiday]:
        if not country_code:
            return []

        clauses = ["datum BETWEEN %s AND %s", "land=%s"]
        params: list[object] = [start, end, country_code]
        if region_code:
            clauses.append("(region IS NULL OR region=%s)")
            params.append(region_code)
        else:
            clauses.append("region IS NULL")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT datum, land, region, name
                FROM feiertage
                WHERE {where}
                ORDER BY datum ASC
                """,
                tuple(params),
            )
            return [
                Holiday(
                    holiday_date=r["datum"],
                    country_code=r["land"],
                    region_code=r.get("region"),
                    name=r.get("name"),
                )
                for r in fetchall(cur)
            ]
