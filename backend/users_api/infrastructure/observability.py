"""Service Logging — one root handler, JSON or text, with request context extras.

Invariants:
    - setup_logging is idempotent: the lifespan may run many times per process
      (tests, reloads) and the root logger still holds exactly one of our handlers
    - JSON lines carry timestamp (from the record), level, logger, message and
      whichever of user_id / operation / error_code / path the caller attached
    - pymongo and uvicorn.access sit at WARNING or above; at DEBUG they
      inherit the root level again

Design Decisions:
    - stdlib logging + a small formatter: every module logs through
      logging.getLogger(__name__) and passes context via extra={...}
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "users_api"
CONTEXT_FIELDS = ("user_id", "operation", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
QUIET_LOGGERS = ("pymongo", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: record.__dict__[key]
            for key in CONTEXT_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the service handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()

    handler = _build_handler(fmt)
    root.addHandler(handler)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    quiet_level = (
        logging.NOTSET if numeric_level <= logging.DEBUG
        else max(numeric_level, logging.WARNING)
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    return handler
