"""Logging setup for the omlox command-line tool."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``omlox`` logger.

    Library modules only emit through ``logging.getLogger(__name__)``; the
    handler is installed by the console script, once.
    """
    logger = logging.getLogger("omlox")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
