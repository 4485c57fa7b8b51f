"""
Logging configuration and formatters for tinee.

Provides:
- JsonFormatter: one JSON object per line, safe for any message text
- setup_logging: console (and optional rotating file) logging on the tinee logger
- get_logger: child loggers under the tinee namespace
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO

LOGGER_NAME = "tinee"

TEXT_FORMAT = "%(asctime)s [PID: %(process)d] [%(levelname)s] %(name)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """
    Formatter that renders each record as a single JSON object.

    Message text is serialized with json.dumps, so quotes and newlines in
    driver errors or URLs never break the line.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the tinee logger, replacing handlers from earlier calls.

    Args:
        level: Log level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file, rotated at 5MB with 5 backups
        json_format: Emit one JSON object per line instead of text
        stream: Console stream (stdout if not specified)

    Returns:
        The configured tinee logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _build_formatter(json_format)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the tinee namespace."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
