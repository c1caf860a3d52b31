"""Logging for the ``volunteer_hub_api`` package.

Handlers go on the package logger rather than the root logger, so
uvicorn keeps its own access log formatting.
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "volunteer_hub_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Safe to call more than once: the level is updated every time, while
    the console handler and a file handler per ``logfile`` are attached
    only once.  The directory of ``logfile`` is created when missing.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # FileHandler subclasses StreamHandler, hence the exact type check.
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        _attach(logger, logging.StreamHandler())

    if logfile:
        path = os.path.abspath(logfile)
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in logger.handlers
        )
        if not attached:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            _attach(logger, logging.FileHandler(path, encoding="utf-8"))
    return logger
