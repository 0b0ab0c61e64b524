"""Utility modules for motion statistics processing."""

from .logging_utils import setup_logger, get_logger
from .io_utils import (
    ensure_dir,
    save_json,
    load_json,
)

__all__ = [
    # Logging
    "setup_logger",
    "get_logger",
    # IO
    "ensure_dir",
    "save_json",
    "load_json",
]
