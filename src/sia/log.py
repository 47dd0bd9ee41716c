"""
Sia Diagnostic Logging
======================

Every module logs through the standard ``logging`` package with a
module-level ``logger = logging.getLogger(__name__)``. This module wires
the ``sia`` logger to the terminal so diagnostics appear as:

    [ERROR] : "bogus" argument name is unknown
    [INFO] : lexing main.sia ...

Output goes through click.echo, so it follows whatever stream click is
writing to (including the one captured by click.testing.CliRunner).
"""

import logging
from typing import Union

import click

LOG_FORMAT = "[%(levelname)s] : %(message)s"


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes formatted records with click.echo."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record))
        except Exception:
            self.handleError(record)


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the ``sia`` logger.

    Safe to call more than once: the handler is installed only the first
    time, later calls just change the level.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"

    Returns:
        The configured ``sia`` logger
    """
    logger = logging.getLogger("sia")
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")
    logger.setLevel(level)

    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
