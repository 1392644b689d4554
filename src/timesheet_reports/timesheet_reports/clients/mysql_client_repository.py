from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ClientStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Client
from .repository import ClientRepository


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_due(self, *, shipment_day: int) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, status, sollversand, lastversand, istversand,
                       erstellungsdatum, land, region
                FROM kunden
                WHERE istversand=%s AND status=%s
                ORDER BY name ASC
                """,
                (int(shipment_day), ClientStatus.ACTIVE.value),
            )
            rows = fetchall(cur)
            return [
                Client(
                    client_id=str(r["id"]),
                    name=r["name"],
                    status=ClientStatus(r["status"]),
                    sollversand=r.get("sollversand"),
                    lastversand=r.get("lastversand"),
                    istversand=r.get("istversand"),
                    created_on=r.get("erstellungsdatum"),
                    country_code=r.get("land"),
                    region_code=r.get("region"),
                )
                for r in rows
            ]

    def update_schedule(self, *, client_id: str, lastversand: int, istversand: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if istversand is None:
                cur.execute(
                    "UPDATE kunden SET lastversand=%s WHERE id=%s",
                    (int(lastversand), client_id),
                )
            else:
                cur.execute(
                    "UPDATE kunden SET lastversand=%s, istversand=%s WHERE id=%s",
                    (int(lastversand), int(istversand), client_id),
                )
            return cur.rowcount > 0
