"""Structured Logging — JSON formatter and setup for request/business-layer logs.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Extra fields (company, entity, entity_id, field, error_code, path) surfaced
      when present
    - setup_logging is idempotent: re-running the lifespan never duplicates output

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control over keys
    - json in production, plain text for local development (log_format setting)
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_KEYS = ("company", "entity", "entity_id", "field", "error_code", "path")

_HANDLER_NAME = "company_services"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger (replacing a previous one)."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
