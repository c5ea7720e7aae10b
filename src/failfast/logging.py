import logging
import os

LOG_LEVEL_ENV = "FAILFAST_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(name: str) -> int:
    # The CLI talks at INFO; library modules stay quiet unless asked.
    default = logging.INFO if name.endswith(".cli") else logging.WARNING
    requested = os.getenv(LOG_LEVEL_ENV)
    if not requested:
        return default
    level = logging.getLevelName(requested.upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(name))
    return logger
