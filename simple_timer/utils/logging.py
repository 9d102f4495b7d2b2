"""Package logging helpers."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "simple_timer"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger."""

    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_file_logger(log_path: Path, level: int = logging.DEBUG) -> logging.Logger:
    """Send package diagnostics to ``log_path``."""

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    handler = logging.FileHandler(log_path, mode="w")
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
