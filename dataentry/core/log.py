"""Logging setup for the diagnostic stream (stderr)."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the ``dataentry`` logger once and set its level."""
    logger = logging.getLogger("dataentry")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
