"""
Logging utilities for MatchCast.

Every module logs through ``get_logger(__name__)``. The first call configures
the root logger to stderr with a timestamped format; the level comes from
MATCHCAST_LOG_LEVEL (default INFO).
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _level_from_env() -> int:
    name = os.getenv("MATCHCAST_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger with the given name.

    If the root logger has no handlers configured yet, this function also
    configures a basic StreamHandler.

    Parameters
    ----------
    name : str | None
        Logger name. If None, the package logger "matchcast" is returned.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger_name = name if name is not None else "matchcast"
    logger = logging.getLogger(logger_name)

    if not logging.getLogger().handlers:
        # Configure root logger once
        logging.basicConfig(level=_level_from_env(), format=LOG_FORMAT)

    return logger
