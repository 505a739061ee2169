"""
Logging configuration for the registry.

``setup_logging`` configures the ``special_ed_api`` package logger,
which every module logger (``special_ed_api.app.services...``) reports
to.  Records still propagate to the root logger, so uvicorn or pytest
handlers keep seeing them.  Handlers are only added once: calling
``create_app`` repeatedly (as the test suite does) does not duplicate
output, but a later call with a new ``logfile`` attaches that file.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "special_ed_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotate the log file at 5 MB, keeping three old copies.
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path
        for h in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a rotating log file.  If omitted, only the console
        handler is attached.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(os.path.abspath(logfile))
        if not _has_file_handler(logger, log_path):
            file_handler = RotatingFileHandler(
                log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
