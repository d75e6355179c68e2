"""Structured Logging — JSON formatter and setup for registry observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (center_id, availability_id, error_code, ...) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for a single formatter
    - setup_logging is idempotent: it replaces its own handler, never stacks one
"""

import json
import logging
from datetime import datetime, timezone

_HANDLER_TAG = "_vaccine_registry_handler"

_EXTRA_KEYS = (
    "center_id", "availability_id", "error_code",
    "vaccine_type", "dose_type", "result_count",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the root logger. Returns the installed handler.

    Safe to call repeatedly: a handler installed by an earlier call is
    replaced, so the root logger carries exactly one registry handler.
    """
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
