from __future__ import annotations

from dataclasses import dataclass

import mysql.connector

from ..core.exceptions import DataAccessError


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
        )


class DatabaseConnection:
    """DB connection factory handed to every repository.

    Note: We create short-lived connections per operation (a batch run issues few queries).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as exc:
            raise DataAccessError(
                f"cannot connect to {self._config.user}@{self._config.host}:{self._config.port}/{self._config.database}: {exc}"
            ) from exc
