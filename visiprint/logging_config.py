"""Handler setup for the ``visiprint`` logger.

Library modules only create module loggers and never attach handlers; entry
points such as :mod:`visiprint.cli` call :func:`setup_logging` once.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Route ``visiprint`` records to stderr and, optionally, a file.

    Calling it again replaces the previous handlers.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file to (over)write, if any.
    """
    logger = logging.getLogger("visiprint")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    # stdout carries the art, so nothing is logged there
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
