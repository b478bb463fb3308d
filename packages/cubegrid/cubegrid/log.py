"""Logger factory shared by the cube grid packages."""

import logging
import os

LOG_LEVEL_ENV_VAR = "CUBEGRID_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(name: str) -> int:
    """Map a level name to its number; anything unrecognised means WARNING."""

    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def _configure_logger(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with its own stream handler, level taken from the environment."""

    level = _resolve_level(os.getenv(LOG_LEVEL_ENV_VAR, ""))
    logger = logging.getLogger(name)
    _configure_logger(logger, level)
    return logger
