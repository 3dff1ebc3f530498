"""League Tables: football standings served from football-data.org."""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty HTTP client loggers, capped at WARNING.
_QUIET_LOGGERS = ("urllib3", "requests")


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once and quiet the HTTP client loggers."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()
