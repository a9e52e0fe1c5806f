"""
Logging setup for the grade calculation engine.

All modules log through children of the ``gradecalc`` logger so that a
hosting service can route or silence engine output in one place.
"""

import logging
from typing import Optional

from .config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER_NAME = "gradecalc"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger once and return it."""
    resolved = getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolved)

    # Avoid duplicate console handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(resolved)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    base = logging.getLogger(ROOT_LOGGER_NAME)
    return base.getChild(name) if name else base
