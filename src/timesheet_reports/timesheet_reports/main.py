from __future__ import annotations

import argparse
import importlib
from datetime import date
from typing import Optional, Sequence

import structlog
from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import parse_iso_date, today_local
from .container import build_container
from .core.exceptions import ConfigurationError, TemplateError
from .logging_config import configure_logging
from .settings import ReportSettings

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2

log = structlog.get_logger("timesheet_reports")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="timesheet-reports",
        description="Generate and publish the timesheet reports of all clients due today.",
    )
    parser.add_argument(
        "--date",
        type=parse_iso_date,
        default=None,
        help="Run as of this day (YYYY-MM-DD) instead of today.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    load_dotenv(override=False)

    settings_module = get_settings_module()
    try:
        settings = ReportSettings.from_module(importlib.import_module(settings_module))
    except ConfigurationError as exc:
        configure_logging()
        log.error("configuration_invalid", settings=settings_module, problems=exc.problems)
        return EXIT_CONFIG

    configure_logging(settings.log_level, json=settings.log_json)
    log.info(
        "report_job_starting",
        settings=settings_module,
        db=f"{settings.db.user}@{settings.db.host}:{settings.db.port}/{settings.db.database}",
        bucket=settings.bucket,
    )

    try:
        container = build_container(settings)
    except TemplateError as exc:
        log.error("template_unavailable", error=str(exc))
        return EXIT_CONFIG

    today: date = args.date or today_local()
    try:
        container.report_service.run(today=today)
    except Exception:
        log.exception("report_job_failed", run_date=today.isoformat())
        return EXIT_FAILURE

    log.info("report_job_finished", run_date=today.isoformat())
    return EXIT_OK


def run() -> None:
    raise SystemExit(main())
