"""
Logging setup for Relaxed Splines

Library modules only create ``logging.getLogger(__name__)`` loggers; this
helper is what applications (and the CLI) call to actually emit records.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "relaxed_splines"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, fmt: Optional[str] = None,
                  stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger

    Calling it again replaces the handler installed by the previous call,
    so handlers are never duplicated and a stream that has since been
    closed is never touched again.

    Args:
        level: Logging level for the package logger
        fmt: Optional log format string
        stream: Stream for the handler (defaults to the current stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old in [h for h in logger.handlers if getattr(h, '_relaxed_splines', False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._relaxed_splines = True
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    return logger
