"""Root logging setup for the canvas viewer CLI."""

from __future__ import annotations

import logging
import os
from datetime import datetime

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Third-party loggers held at WARNING regardless of the requested level
QUIET_LOGGERS = ("PIL", "asyncio", "OpenGL")


def configure_logging(
    level: int = logging.INFO, *, log_to_file: bool = False, log_dir: str = "logs"
) -> str | None:
    """Configure the root logger for a viewer run.

    Args:
        level: Root level; viewport config changes and drags log at DEBUG
        log_to_file: Also write to a timestamped file under log_dir
        log_dir: Directory for the log file, created if missing

    Returns:
        Path of the log file, or None when logging only to stderr
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if not log_to_file:
        return None

    os.makedirs(log_dir, exist_ok=True)
    path = os.path.join(log_dir, f"canvas-{datetime.now():%Y%m%d-%H%M%S}.log")
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
    logging.getLogger().addHandler(handler)
    return path


def parse_level(name: str) -> int:
    """Map a level name like "debug" or "INFO" to its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
