"""Logging for the wall renderer."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "apus_wall"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def setup_logging(
    log_dir: str = "logs",
    level: int = logging.INFO,
    log_file: str = "apus_wall.log",
) -> tuple[logging.Logger, str]:
    """Point the package logger at ``log_dir/log_file``.

    Calling again with another path closes the old file handler, so every
    render logs next to its own config.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.abspath(os.path.join(log_dir, log_file))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in _file_handlers(logger):
        if handler.baseFilename == log_path:
            return logger, log_path
        logger.removeHandler(handler)
        handler.close()

    handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger, log_path
