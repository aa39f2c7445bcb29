# MIT License (see LICENSE)
"""
Logging setup for the field models and demo.

Log records go to stderr so the demo's stdout stays exactly the
printed field report.
"""
from __future__ import annotations
import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING, stream: TextIO | None = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Args:
        level: Logging level for the root logger and handler.
        stream: Destination stream (defaults to sys.stderr).
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (usually called with __name__)."""
    return logging.getLogger(name)


__all__ = [
    "setup_logging",
    "get_logger",
]
