from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Optional

from .core.constants import DEFAULT_BUCKET, DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_TEMPLATE_PATH
from .core.exceptions import ConfigurationError
from .database.connection import DBConfig

_DB_KEYS = ("host", "user", "database")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ReportSettings:
    """Validated settings of one report run."""

    db: DBConfig
    storage_url: str
    storage_key: str
    bucket: str
    template_path: Path
    logo_path: Optional[Path]
    http_timeout: float
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_module(cls, settings: ModuleType | object) -> "ReportSettings":
        problems: list[str] = []

        db_config = dict(getattr(settings, "DB_CONFIG", None) or {})
        for key in _DB_KEYS:
            if db_config.get(key) in (None, ""):
                problems.append(f"DB_CONFIG.{key} is missing")
        try:
            port = int(db_config.get("port", 3306))
        except (TypeError, ValueError):
            problems.append(f"DB_CONFIG.port is not a number: {db_config.get('port')!r}")
            port = 0

        storage_url = str(getattr(settings, "STORAGE_URL", "") or "")
        storage_key = str(getattr(settings, "STORAGE_KEY", "") or "")
        if not storage_url:
            problems.append("STORAGE_URL is missing")
        if not storage_key:
            problems.append("STORAGE_KEY is missing")

        try:
            http_timeout = float(getattr(settings, "HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS))
        except (TypeError, ValueError):
            problems.append("HTTP_TIMEOUT_SECONDS is not a number")
            http_timeout = DEFAULT_HTTP_TIMEOUT_SECONDS

        log_json_raw = str(getattr(settings, "LOG_JSON", "") or "").strip().lower()
        if log_json_raw not in _TRUE | _FALSE:
            problems.append(f"LOG_JSON is not a boolean: {log_json_raw!r}")

        if problems:
            raise ConfigurationError(problems)

        logo = getattr(settings, "LOGO_PATH", None)
        return cls(
            db=DBConfig(
                host=str(db_config["host"]),
                port=port,
                user=str(db_config["user"]),
                password=str(db_config.get("password") or ""),
                database=str(db_config["database"]),
            ),
            storage_url=storage_url,
            storage_key=storage_key,
            bucket=str(getattr(settings, "STORAGE_BUCKET", "") or DEFAULT_BUCKET),
            template_path=Path(getattr(settings, "TEMPLATE_PATH", "") or DEFAULT_TEMPLATE_PATH),
            logo_path=Path(logo) if logo else None,
            http_timeout=http_timeout,
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO") or "INFO").upper(),
            log_json=log_json_raw in _TRUE,
        )
