"""Structured logging for notification events (subscribe, deliver, complete, dispose)."""

import logging
import sys
from typing import Set

from notifykit.config import get_settings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Names already given a level (and handler), whether or not a handler was attached.
_configured: Set[str] = set()


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a configured logger; level and stdout handler follow the loaded settings."""
    logger = logging.getLogger(name)
    if name not in _configured:
        _configured.add(name)
        settings = get_settings()
        if settings.log_stdout and not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(level if level is not None else settings.level_number)
    return logger
