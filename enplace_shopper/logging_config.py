"""Logging configuration for EnPlace Shopper."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, ensure_ascii=False)


class ReadableFormatter(logging.Formatter):
    """Human-readable formatter for terminal use."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        formatted = f"{timestamp} | {level} | {record.name} | {record.getMessage()}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)


def configure_logging(
    log_level: str = "WARNING",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for the application.

    Logs go to stderr so command output on stdout stays clean.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON lines instead of readable text
        log_file: Optional file path to also write logs to
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    formatter: logging.Formatter = JsonFormatter() if json_format else ReadableFormatter()

    package_logger = logging.getLogger("enplace_shopper")
    package_logger.setLevel(level)

    # Remove handlers from a previous configuration
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)

    package_logger.debug(
        f"Logging configured: level={log_level.upper()}, format={'json' if json_format else 'text'}"
    )
