"""Logging configuration for instagraph."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from instagraph.utils.config import APP_NAME, LOG_FILE

# Library records stay silent until an application configures logging
logging.getLogger(APP_NAME).addHandler(logging.NullHandler())


def _configured(logger: logging.Logger) -> bool:
    return any(not isinstance(h, logging.NullHandler) for h in logger.handlers)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Attach console and rotating-file handlers to the package logger.

    Meant for applications and scripts; importing the library never calls
    it. Calling it again once handlers are attached changes nothing.

    Args:
        level: Level for the package logger and the console
        log_file: Log file path (default: LOG_FILE from config)
        console: Also log to stdout

    Returns:
        The package logger
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    if _configured(logger):
        return logger

    if console:
        stream = logging.StreamHandler(sys.stdout)
        stream.setLevel(level)
        stream.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
        logger.addHandler(stream)

    path = Path(log_file or LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    rotating = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    rotating.setLevel(logging.DEBUG)
    rotating.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(rotating)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the package namespace, so ``setup_logging`` handlers apply."""
    if name is None or name == APP_NAME:
        return logging.getLogger(APP_NAME)
    if not name.startswith(f"{APP_NAME}."):
        name = f"{APP_NAME}.{name}"
    return logging.getLogger(name)
