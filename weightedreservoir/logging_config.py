"""Opt-in logging for weightedreservoir.

The package logger carries only a NullHandler, so sampling is silent until
one of these helpers attaches a real handler. The samplers log at DEBUG:
rejected weights, batch summaries and drains. Nothing is logged per
accepted item.

Example usage:
    import weightedreservoir

    weightedreservoir.enable_console_logging(level="DEBUG")
    weightedreservoir.enable_file_logging("logs/sampling.log")
    weightedreservoir.enable_json_logging()
    weightedreservoir.configure_from_env()

Environment variables read by configure_from_env():
    WR_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    WR_LOG_FILE: Path of a rotating log file
    WR_LOG_JSON: "1" for one JSON object per line
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEFAULT_BACKUP_COUNT = 3

LOGGER_NAME = "weightedreservoir"

ENV_LEVEL = "WR_LOGGING"
ENV_FILE = "WR_LOG_FILE"
ENV_JSON = "WR_LOG_JSON"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "DEBUG",
         "logger": "weightedreservoir.sampling.base", "message": "Batch complete: ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every non-null handler on the package logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter):
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return handler


def _rotating_handler(path: str | Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send package logs to stderr.

    Args:
        level: Level name or logging constant.
        format: Record format string.
        date_format: Format for %(asctime)s.

    Returns:
        The attached StreamHandler.
    """
    return _attach(logging.StreamHandler(), level, logging.Formatter(format, date_format))


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Write package logs to a size-rotated file.

    Missing parent directories are created.

    Args:
        path: Log file path.
        level: Level name or logging constant.
        max_bytes: Size at which the file rolls over.
        backup_count: Rolled-over files to keep.
        format: Record format string.
        date_format: Format for %(asctime)s.

    Returns:
        The attached RotatingFileHandler.
    """
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _attach(handler, level, logging.Formatter(format, date_format))


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Send package logs to stderr as JSON lines."""
    return _attach(logging.StreamHandler(), level, JsonFormatter())


def enable_json_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Write package logs as JSON lines to a size-rotated file."""
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _attach(handler, level, JsonFormatter())


def configure_from_env() -> None:
    """Configure logging from WR_LOGGING, WR_LOG_FILE and WR_LOG_JSON.

    Does nothing when neither a level nor a file is set. A file without a
    level logs at INFO.
    """
    level = os.environ.get(ENV_LEVEL, "").upper()
    log_file = os.environ.get(ENV_FILE, "")
    use_json = os.environ.get(ENV_JSON, "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if log_file:
        if use_json:
            enable_json_file_logging(log_file, level=level)
        else:
            enable_file_logging(log_file, level=level)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Change the package logger's level."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Change the level of one submodule, e.g. ``"sampling.base"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the package logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
