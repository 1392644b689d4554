from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_interval
from .model import TimeRecord
from .repository import TimeRecordRepository


class MySQLTimeRecordRepository(TimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(
        self,
        *,
        client_id: str,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[TimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT datum, erster_start, letzter_ende, gesamt_pause, gesamt_netto,
                       ueber_unter_stunden, tagesstatus
                FROM tageszeiten
                WHERE kunden_id=%s AND mitarbeiter_id=%s AND datum BETWEEN %s AND %s
                ORDER BY datum ASC
                """,
                (client_id, employee_id, start_date, end_date),
            )
            return [
                TimeRecord(
                    work_date=r["datum"],
                    first_start=r.get("erster_start"),
                    last_end=r.get("letzter_ende"),
                    break_total=normalize_mysql_interval(r.get("gesamt_pause")),
                    net_total=normalize_mysql_interval(r.get("gesamt_netto")),
                    over_under=normalize_mysql_interval(r.get("ueber_unter_stunden")),
                    day_status=r.get("tagesstatus"),
                )
                for r in fetchall(cur)
            ]
