"""Logging configuration for the command-line tool."""

from __future__ import annotations

import logging


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Configure root logging (stderr) and return the package logger.

    The library itself never configures logging; only entry points call this.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    return logging.getLogger("name_suggest")
