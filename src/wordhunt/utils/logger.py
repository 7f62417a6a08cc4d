"""
Logging setup for Word Hunt.

Library modules only ask for loggers under the ``wordhunt`` namespace;
handlers are installed by the CLI through :func:`configure_logging`.
"""

import logging
from typing import Optional


ROOT_LOGGER_NAME = "wordhunt"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# Silent until an application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO, fmt: str = LOG_FORMAT) -> logging.Handler:
    """
    Send log records to stderr with the project format.

    Replaces any handlers already on the root logger, so repeated calls do
    not duplicate output. Use ``logging.DEBUG`` to trace individual
    placement attempts.

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for `name`, kept under the ``wordhunt`` namespace."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
