"""Logging setup: human-readable lines in dev, JSON lines in prod."""

import json
import logging
import sys
from datetime import UTC, datetime

from accounts_api.core.config import Settings

DEV_FORMAT = "%(asctime)s %(levelname)s %(service)s %(name)s %(message)s"
DEV_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"
HANDLER_NAME = "accounts_api"

# LogRecord attributes that are not user-supplied `extra` fields.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime", "service"}


class ServiceFilter(logging.Filter):
    """Stamp every record with the service tag."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, service, logger, message and extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "service": getattr(record, "service", None),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(settings: Settings) -> logging.Handler:
    """
    Install the app's stderr handler on the root logger and return it.

    Calling this again replaces the handler installed by a previous call;
    handlers added by anything else (test runners, uvicorn) are left alone.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(ServiceFilter(settings.SERVICE_NAME))
    if settings.is_production:
        handler.setFormatter(JsonFormatter())
    else:
        formatter = logging.Formatter(DEV_FORMAT, datefmt=DEV_DATEFMT)
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL)
    return handler
