from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timesheet_reports.timesheet_reports.database.bootstrap import apply_schema, list_tables
from src.timesheet_reports.timesheet_reports.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db, schema_path=schema_path)
    tables = list_tables(db)
    print(f"OK: Applied schema.sql -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
