"""
Logging configuration for the FurryMatch API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a size-rotated file handler to the root logger.  The level of the
application's own ``furrymatch_api`` loggers follows ``LOG_LEVEL``;
uvicorn's per-request access log is only shown at ``DEBUG``.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "furrymatch_api"

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and application loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console.  Rotated at
        ``LOG_FILE_MAX_BYTES``.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if numeric_level <= logging.DEBUG else logging.WARNING
    )
    if root.handlers:
        # Handlers already installed (pytest, or a second create_app).
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
