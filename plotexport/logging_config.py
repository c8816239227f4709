# plotexport/logging_config.py
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "plotexport"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Route the package's export logs to stdout (and optionally a file).

    Library modules only create loggers; the host application calls this
    once. Calling it again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(
            _make_handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)
        )

    logger.debug("Logging initialized.")
    return logger
