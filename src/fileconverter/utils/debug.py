"""Logging helpers for fileconverter.

Everything the core logs goes to the ``fileconverter`` logger: grammar
rejections from ``core.path_grammar`` at DEBUG, numbered candidates tried by
``core.unique_path`` while allocating an output path, and CLI level notices.
Records are written to stderr so ``fileconverter inspect --json`` keeps a clean
stdout.

Set ``FILECONVERTER_DEBUG=1`` to see the DEBUG records.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "fileconverter"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

DEBUG_ON = os.getenv("FILECONVERTER_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """Attach a single stderr handler to the package logger, once."""
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message if FILECONVERTER_DEBUG is set."""
    if DEBUG_ON:
        setup_logger().debug(msg)


def info(msg: str) -> None:
    setup_logger().info(msg)


def warn(msg: str) -> None:
    setup_logger().warning(msg)


def error(msg: str) -> None:
    setup_logger().error(msg)
