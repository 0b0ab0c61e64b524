"""Logging setup shared by all pipeline modules."""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.conf.settings import settings


def setup_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[str | Path] = None,
) -> logging.Logger:
    """Configure a named logger with a console handler and optional file handler.

    Args:
        name: Logger name
        log_level: Level name (defaults to settings.log_level)
        log_file: File name for a file handler (None = console only)
        log_dir: Directory for the log file (defaults to settings.logs_path)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel((log_level or settings.log_level).upper())

    # Re-running setup must not stack handlers
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(settings.log_format)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_dir or settings.logs_path)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Handlers are left to the entry point (see setup_logger); module loggers
    propagate to whatever it configured.
    """
    return logging.getLogger(name)
