"""Logging setup for the varspec command line."""

from __future__ import annotations

import logging

import click

LOGGER_NAME = "varspec"


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes records to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            click.echo(msg, err=True)
        except Exception:
            self.handleError(record)


_logging_initialized: bool = False


def setup_logging(verbose: bool = False) -> None:
    """Attach the stderr handler to the package logger.

    The handler is added once; later calls only adjust the level.
    """
    global _logging_initialized

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _logging_initialized:
        return

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    _logging_initialized = True
    logger.debug("Logging initialized")
