"""Structured logging configuration with JSON formatting.

This module provides centralized logging setup with support for both JSON
and text formats and an optional rotating file handler.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger  # type: ignore[import-untyped, unused-ignore]

from news_aggregator.core.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):  # type: ignore[name-defined, misc]
    """Custom JSON formatter with additional context fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log records.

        Args:
            log_record: The log record dictionary to modify
            record: The original LogRecord object
            message_dict: Additional message fields
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno
        log_record["environment"] = settings.environment

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def setup_logging() -> None:
    """Configure application-wide logging.

    Installs a console handler and, when ``settings.log_file`` is set, a
    rotating file handler. Both use the JSON or text format from settings.
    """
    level = getattr(logging, settings.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_file:
        log_file_path = Path(settings.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file_path,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
            )
        )

    if settings.log_format == "json":
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Outbound request chatter from the adapters
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str, extra: dict[str, Any] | None = None) -> logging.LoggerAdapter[logging.Logger]:
    """Get a logger with optional extra context.

    Args:
        name: Logger name (typically __name__)
        extra: Additional context to include in all log messages

    Returns:
        LoggerAdapter with extra context
    """
    return logging.LoggerAdapter(logging.getLogger(name), extra or {})
