"""Logging configuration helpers for the admin console."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.INFO) -> Logger:
    """Configure process-wide logging and return the application logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # uvicorn's access log is noisy next to the Qt console output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logging.getLogger("classroom_admin")
