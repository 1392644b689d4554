from __future__ import annotations

from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import DataAccessError
from ..scheduling.durations import format_signed_duration
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise DataAccessError(str(exc)) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_interval(value: Any) -> Optional[str]:
    """Normalize MySQL TIME values to signed ``H:MM:SS`` text.

    mysql-connector can return TIME as:
    - datetime.timedelta (negative for a deficit, hours beyond 24 allowed)
    - string (e.g. '-01:30:00')
    """

    if value is None:
        return None

    if isinstance(value, timedelta):
        return format_signed_duration(int(value.total_seconds()))

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")

    if isinstance(value, str):
        return value.strip()

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
