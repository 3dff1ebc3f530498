"""
Configuration for the League Tables service.
Re-exports the tunable constants and provides the shared logger factory.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from .constants import (
    API_TIMEOUT_FOOTBALL_DATA,
    CACHE_DURATION_SECONDS,
    DEV_SERVER_HOST,
    DEV_SERVER_PORT,
    MAX_RETRY_COUNT,
    RATE_LIMIT_RETRY_AFTER,
    RETRY_DELAY_BASE,
)


API_TIMEOUT = int(os.getenv("FOOTBALL_DATA_TIMEOUT", API_TIMEOUT_FOOTBALL_DATA))
"""Timeout (seconds) for each outbound football-data.org call."""


def setup_logger(name: str) -> logging.Logger:
    """Create or retrieve a configured logger for the application."""

    logger = logging.getLogger(name)

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logger.setLevel(log_level)

    if logging.getLogger().handlers:
        logger.propagate = True
        return logger

    if not logger.handlers:
        log_file = os.path.join(os.path.dirname(os.path.dirname(__file__)), "league_tables.log")
        handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger


__all__ = [
    "API_TIMEOUT",
    "CACHE_DURATION_SECONDS",
    "DEV_SERVER_HOST",
    "DEV_SERVER_PORT",
    "MAX_RETRY_COUNT",
    "RATE_LIMIT_RETRY_AFTER",
    "RETRY_DELAY_BASE",
    "setup_logger",
]
