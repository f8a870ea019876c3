"""Logging setup for gnsstrack.

Everything logs under the ``gnsstrack`` logger: human-readable lines on
stderr, plus an optional JSON-lines file carrying the structured fields
passed through ``extra=``.

    configure_logging(level="DEBUG", json_file="gnsstrack.jsonl")
    logger = get_logger(__name__)
    logger.info("built track", extra={"track_id": "finland-gulf-run"})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ROOT = "gnsstrack"

# Fields lifted from extra={} into JSON records
STRUCTURED_FIELDS = ("track_id", "fix_index", "source", "error_type", "duration_ms")

_configured = False


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        doc: Dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        doc.update({key: getattr(record, key) for key in STRUCTURED_FIELDS if hasattr(record, key)})
        if record.exc_info:
            doc["traceback"] = self.formatException(record.exc_info)
        return json.dumps(doc, default=str)


class ConsoleFormatter(logging.Formatter):
    """``[time] LEVEL [module] message`` with the ``gnsstrack.`` prefix dropped."""

    def __init__(self) -> None:
        super().__init__("[%(asctime)s] %(levelname)-8s [%(short_name)s] %(message)s", "%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.short_name = record.name[len(ROOT) + 1:] if record.name.startswith(ROOT + ".") else record.name
        return super().format(record)


def _env_level() -> str:
    if os.environ.get("GNSSTRACK_DEBUG", "").strip().lower() in ("1", "true", "yes"):
        return "DEBUG"
    return os.environ.get("GNSSTRACK_LOG_LEVEL", "INFO")


def configure_logging(*, level: Optional[str] = None, json_file: Optional[str] = None) -> None:
    """(Re)install the gnsstrack handlers.

    ``level`` falls back to GNSSTRACK_DEBUG / GNSSTRACK_LOG_LEVEL, then INFO.
    """
    global _configured

    numeric_level = getattr(logging, (level or _env_level()).upper(), logging.INFO)
    root = logging.getLogger(ROOT)
    root.setLevel(numeric_level)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter())
    root.addHandler(console)

    if json_file:
        try:
            jsonl = logging.FileHandler(json_file, encoding="utf-8")
        except OSError as exc:
            root.warning("cannot open JSON log %s: %s", json_file, exc)
        else:
            jsonl.setFormatter(JSONFormatter())
            root.addHandler(jsonl)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure_logging()
    if name == "__main__":
        name = "main"
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, message: str, *, error_type: Optional[str] = None, **extra: Any) -> None:
    """logger.exception() with error_type folded into the structured extras."""
    if error_type:
        extra["error_type"] = error_type
    logger.exception(message, extra=extra)
