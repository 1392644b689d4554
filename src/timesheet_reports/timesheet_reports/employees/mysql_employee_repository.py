from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_client(self, client_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, kunden_id, name, deleted_at
                FROM mitarbeitende
                WHERE kunden_id=%s AND deleted_at IS NULL
                ORDER BY name ASC
                """,
                (client_id,),
            )
            return [
                Employee(
                    employee_id=str(r["id"]),
                    client_id=str(r["kunden_id"]),
                    name=r["name"],
                    deleted_at=r.get("deleted_at"),
                )
                for r in fetchall(cur)
            ]
