"""
Central logging configuration.

Goals:
- One shared logging setup for the API process and the Celery migration worker.
- JSON logs to stdout for easy aggregation.
- Correlate logs with request_id / task_id / role_id / operation.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.config import dictConfig

from skillframe.core.request_context import get_context

# LogRecord attributes that are never copied into the JSON payload.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        base.update(get_context())

        # `extra={...}` fields, stringified when not JSON-serializable
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k.startswith("_") or k in base:
                continue
            try:
                json.dumps(v)
                base[k] = v
            except (TypeError, ValueError):
                base[k] = str(v)

        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False)


def configure_logging(level: str | None = None) -> None:
    """
    Call once at process startup (API + Celery worker).
    """
    if level is None:
        from skillframe.core.config import settings

        level = settings.LOG_LEVEL
    level = level.upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": "skillframe.core.logging_config.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
            "celery": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }

    dictConfig(logging_config)
