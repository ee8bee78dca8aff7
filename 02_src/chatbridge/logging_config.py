"""Structured logging configuration for chatbridge."""

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

SERVICE_NAME = "chatbridge"

# HTTP client libraries log every helpdesk request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def user_context(user_id: str, **refs: str | None) -> dict:
    """Build the ``extra`` mapping that tags a record with a user and refs."""
    context = {"user_id": user_id}
    context.update({key: value for key, value in refs.items() if value is not None})
    return {"context": context}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with handoff context when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        context = getattr(record, "context", None)
        if isinstance(context, dict):
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    console: bool | None = None,
) -> None:
    """
    Setup structured logging for the service.

    Args:
        log_level: Root level name. Defaults to LOG_LEVEL env var or INFO.
        log_file: Rotating JSON log file. Defaults to 04_logs/app.log.
        console: Also log to stdout. Defaults to LOG_CONSOLE env var or True.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    log_file = log_file or str(DEFAULT_LOG_PATH)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    if console is None:
        console = _env_flag("LOG_CONSOLE", True)

    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "chatbridge.logging_config.JSONFormatter"},
            },
            "handlers": handlers,
            "loggers": {name: {"level": "WARNING"} for name in NOISY_LOGGERS},
            "root": {"level": level, "handlers": list(handlers)},
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)."""
    return logging.getLogger(name)
