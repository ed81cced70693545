"""JSON logging for the task board service.

Every record is written as a single JSON line carrying the service name, the
environment and the id of the request being handled. Request access lines come
from :mod:`todo_api.core.middleware` on the ``todo_api.access`` logger; the
uvicorn access logger is muted so each request is logged once.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import get_request_id

ACCESS_LOGGER_NAME = "todo_api.access"

_STANDARD_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "taskName",
    "request_id",
}


class JsonLogFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as one JSON object."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
            "environment": self._environment,
            "request_id": getattr(record, "request_id", "-"),
        }
        for key, value in _extras(record):
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _extras(record: logging.LogRecord) -> list[tuple[str, Any]]:
    return [
        (key, value)
        for key, value in vars(record).items()
        if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
    ]


class RequestContextFilter(logging.Filter):
    """Stamp records with the request id bound to the current context."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        return True


def configure_logging(settings: Settings) -> None:
    """Route application, access and uvicorn logs through one JSON handler."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.captureWarnings(True)

    routed = {"handlers": ["json"], "level": level, "propagate": False}
    loggers: dict[str, Any] = {
        "": {"handlers": ["json"], "level": level},
        ACCESS_LOGGER_NAME: dict(routed),
        "uvicorn": dict(routed),
        "uvicorn.error": dict(routed),
        "uvicorn.access": {"handlers": [], "level": logging.WARNING, "propagate": False},
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "service": settings.project_name,
                    "environment": settings.environment,
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "json": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "filters": ["request_context"],
                }
            },
            "loggers": loggers,
        }
    )


__all__ = [
    "ACCESS_LOGGER_NAME",
    "JsonLogFormatter",
    "RequestContextFilter",
    "configure_logging",
]
