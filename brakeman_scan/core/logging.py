"""Structured JSON logging configuration.

All log output goes to stdout in JSON format so CI log collectors can
ingest it line by line.

Format per line:
    {"ts": "2025-03-01T12:00:00+00:00", "level": "INFO", "logger": "brakeman_scan.services.scan_service", "msg": "...", ...}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

from brakeman_scan.core.config import settings


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Include the report path if attached to the record via extra={}
        if hasattr(record, "report"):
            payload["report"] = record.report

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level_name: str | None = None, stream=None) -> None:
    """Configure root logger with JSON output to ``stream`` (stdout by default).

    The level defaults to ``settings.LOG_LEVEL`` (env ``LOG_LEVEL``,
    default ``INFO``).
    """
    level_name = (level_name or os.getenv("LOG_LEVEL") or settings.LOG_LEVEL or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers (e.g. uvicorn defaults)
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
