"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers under the ``fakegen`` namespace.
    - Allow an optional verbose mode for the command line interface.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays silent.
    - :func:`configure_logging` is idempotent; repeated calls adjust the level
      of the handler it installed and replace it when ``sys.stderr`` changed.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "fakegen"
_HANDLER_NAME = "fakegen-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if isinstance(handler, logging.StreamHandler) and handler.stream is not sys.stderr:
        # the old stream may already be closed; setStream() would flush it
        logger.removeHandler(handler)
        handler = None
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
