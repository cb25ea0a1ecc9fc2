"""
Logging configuration for claude-pretty-printer.

Diagnostics go to stderr (stdout carries the rendered records), colored
with colorlog, plus an optional rotating log file.

Usage:
    from .logging_config import setup_cli_logging

    setup_cli_logging(log_level="DEBUG", log_file=Path("pretty.log"))
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog

from .constants import (
    COLORLOG_COLORS,
    LOG_BACKUP_COUNT,
    LOG_FORMAT_COLORED,
    LOG_FORMAT_FILE,
    LOG_MAX_BYTES,
)


def _get_log_level(log_level: str) -> int:
    """
    Convert log level string to logging constant.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Logging level constant.
    """
    return getattr(logging, log_level.upper(), logging.WARNING)


def _create_rotating_file_handler(
    log_file: Path,
    level: int,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> RotatingFileHandler:
    """
    Create a rotating file handler with standard configuration.

    Args:
        log_file: Path to the log file.
        level: Logging level.
        max_bytes: Maximum file size before rotation.
        backup_count: Number of backup files to keep.

    Returns:
        Configured RotatingFileHandler.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_file),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
    return handler


def _create_console_handler(level: int) -> logging.Handler:
    """
    Create a colored stderr handler.

    Args:
        level: Logging level.

    Returns:
        Configured colorlog StreamHandler.
    """
    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT_COLORED,
            log_colors=COLORLOG_COLORS,
            secondary_log_colors={},
            style="%",
        )
    )
    handler.setLevel(level)
    return handler


def setup_cli_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for the CLI entry point.

    Replaces all handlers on the root logger with a colored stderr handler
    and, when log_file is given, a rotating file handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file.
    """
    level = _get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(_create_console_handler(level))

    if log_file is not None:
        root_logger.addHandler(_create_rotating_file_handler(log_file, level))
