# snipcheck/utils/logging.py

from __future__ import annotations
import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "snipcheck"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger nested under the package logger.

    Modules call this once at import time (``log = get_logger(__name__)``);
    handlers are only attached by configure_logging().
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger and set its level.

    Safe to call more than once; later calls change the level and swap in a
    fresh handler bound to the current sys.stderr.
    """
    global _handler

    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # the previous stream may already be closed, so never flush it
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

    return logger
