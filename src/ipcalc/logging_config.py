"""
Logging configuration for IPCalc.

Console logging on stderr, optional rotating file logging, and a counter
for defects reported by the calculation core.
"""

import logging
import sys
from collections import Counter
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)

LOG_MAX_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 5

_error_counts: Counter = Counter()


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """
    Configure the "ipcalc" logger.

    Args:
        level: Logging level name for the console (DEBUG, INFO, ...)
        log_file: Also log everything at DEBUG to this rotating file

    Returns:
        Configured package logger
    """
    root = logging.getLogger("ipcalc")
    root.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))
    root.handlers.clear()
    # Command output owns stdout
    root.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    root.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
        root.addHandler(file_handler)

    return root


def track_error(error_type: str, message: str, context: dict[str, Any] | None = None) -> None:
    """Count and log a defect of the given type."""
    _error_counts[error_type] += 1
    if context:
        message = f"{message} | Context: {context}"
    logger.error("%s: %s", error_type, message)


def get_error_stats() -> dict[str, int]:
    """Defect counts by type."""
    return dict(_error_counts)


def reset_error_stats() -> None:
    _error_counts.clear()
