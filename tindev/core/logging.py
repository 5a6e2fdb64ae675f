"""Logging configuration for the application."""
import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

import structlog
from pythonjsonlogger import jsonlogger

from tindev.core.config import settings


class SensitiveDataFilter(logging.Filter):
    """Filter to remove sensitive information from logs."""

    def __init__(self, fields: Optional[Iterable[str]] = None) -> None:
        """Initialize filter."""
        super().__init__()
        self.sensitive_fields = {f.lower() for f in (fields or settings.LOG_FILTER_FIELDS)}
        self.replace_with = "[REDACTED]"

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter sensitive data from log record."""
        if isinstance(record.args, dict):
            record.args = self._filter_dict(record.args)
        elif isinstance(record.args, (list, tuple)):
            record.args = tuple(
                self._filter_dict(arg) if isinstance(arg, dict) else arg
                for arg in record.args
            )

        for key in list(record.__dict__):
            if self._is_sensitive(key):
                setattr(record, key, self.replace_with)
            elif isinstance(record.__dict__[key], dict):
                setattr(record, key, self._filter_dict(record.__dict__[key]))

        return True

    def __call__(
        self, logger: Any, method_name: str, event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Redact a structlog event before it is rendered into the message."""
        return self._filter_dict(event_dict)

    def _is_sensitive(self, key: str) -> bool:
        return any(sensitive in key.lower() for sensitive in self.sensitive_fields)

    def _filter_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively filter dictionary values."""
        filtered = {}
        for key, value in data.items():
            if isinstance(key, str) and self._is_sensitive(key):
                filtered[key] = self.replace_with
            elif isinstance(value, dict):
                filtered[key] = self._filter_dict(value)
            elif isinstance(value, (list, tuple)):
                filtered[key] = [
                    self._filter_dict(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                filtered[key] = value
        return filtered


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that ensures proper timestamp formatting."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to the log record.

        Args:
            log_record: The log record to add fields to
            record: The original log record
            message_dict: The message dictionary
        """
        super().add_fields(log_record, record, message_dict)

        # structlog renders events as JSON strings; merge them into the record
        try:
            message = json.loads(record.getMessage())
            if isinstance(message, dict):
                log_record.update(message)
        except (json.JSONDecodeError, TypeError):
            log_record["message"] = record.getMessage()

        log_record.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = settings.ENVIRONMENT
        log_record["version"] = settings.VERSION


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Set up logging configuration for the application.

    Args:
        log_level: The log level to use. Defaults to "INFO".
        json_logs: Render console output as JSON instead of plain text.
        log_file: Optional path of a rotating JSON log file.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if json_logs else "standard",
            "stream": "ext://sys.stdout",
            "filters": ["sensitive"],
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": log_file,
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "filters": ["sensitive"],
        }

    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "sensitive": {"()": SensitiveDataFilter},
        },
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": handlers,
        "loggers": {
            "": {  # Root logger
                "handlers": list(handlers),
                "level": log_level,
                "propagate": True,
            },
            "uvicorn": {
                "handlers": list(handlers),
                "level": log_level,
                "propagate": False,
            },
            "sqlalchemy": {
                "handlers": list(handlers),
                "level": "WARNING",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            SensitiveDataFilter(),
            structlog.processors.JSONRenderer(default=str),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name.

    Args:
        name: The name of the logger.

    Returns:
        A configured logger instance.
    """
    return structlog.get_logger(name)
