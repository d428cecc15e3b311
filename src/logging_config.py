"""Centralized logging configuration for the reply generator."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# HTTP client libraries log every request at DEBUG
NOISY_LOGGERS = ("urllib3", "requests")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for log aggregator compatibility.

    Produces one JSON object per line (NDJSON) with fields:
    timestamp, level, logger, message, and optionally exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def _build_handler(log_file: Optional[str]) -> logging.Handler:
    if log_file:
        return logging.FileHandler(log_file, encoding="utf-8")
    return logging.StreamHandler()


def configure_logging(
    level_override: Optional[str] = None,
    format_override: Optional[str] = None,
) -> None:
    """Configure the root logger from environment variables.

    Args:
        level_override: If set, takes precedence over LOG_LEVEL.
        format_override: If set, takes precedence over LOG_FORMAT.

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Defaults to INFO;
            unknown names also fall back to INFO.
        LOG_FORMAT: "json" for JSON lines, anything else for
            human-readable text. Defaults to "text".
        LOG_FILE: Write to this file instead of stderr.
    """
    level_name = (level_override or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    log_format = (format_override or os.getenv("LOG_FORMAT", "text")).lower()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = _build_handler(os.getenv("LOG_FILE"))
    handler.setLevel(level)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
