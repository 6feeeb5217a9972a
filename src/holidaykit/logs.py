"""
HolidayKit Logging Setup

Library modules only create loggers; handlers are installed by the CLI
(or by the embedding application) through configure_logging().
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGER = "holidaykit"


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        if hasattr(record, "provider_id"):
            log_entry["provider_id"] = record.provider_id
        if hasattr(record, "year"):
            log_entry["year"] = record.year
        if hasattr(record, "holiday_count"):
            log_entry["holiday_count"] = record.holiday_count
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: str = "WARNING", json_output: bool = False) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
