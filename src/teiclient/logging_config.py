"""Opt-in console logging for tei-client.

The package installs a NullHandler on the ``teiclient`` logger, so a library
user sees nothing until their application configures logging. For quick
debugging, ``setup_logging()`` prints the client's request/response lines.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "teiclient"
CONSOLE_HANDLER_NAME = "teiclient-console"

# httpx logs its own "HTTP Request: ..." line per call at INFO
HTTP_LOGGERS = ("httpx", "httpcore")


def install_null_handler() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def setup_logging(level: int = logging.DEBUG, stream: TextIO | None = None) -> logging.Handler:
    """Attach a console handler to the ``teiclient`` logger and return it.

    Calling it again replaces the previous console handler instead of
    stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_console_handler(logger)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(level)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def reset_logging() -> None:
    """Drop the console handler and level set by setup_logging. For testing only."""
    logger = logging.getLogger(LOGGER_NAME)
    _remove_console_handler(logger)
    logger.setLevel(logging.NOTSET)


def _remove_console_handler(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            logger.removeHandler(handler)
