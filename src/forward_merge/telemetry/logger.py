"""Logging wrapper for forward-merge actions.

Records are rendered as GitHub Actions workflow commands so that debug,
warning and error messages are picked up by the runner's log viewer and
annotations.
"""

from __future__ import annotations

import logging
import sys

from ..constants import DEFAULT_LOG_LEVEL

PACKAGE_LOGGER = "forward_merge"

_COMMAND_BY_LEVEL = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def _escape_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Format records as ``::<command>::<message>`` workflow commands.

    INFO records are written as plain lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMAND_BY_LEVEL.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{_escape_data(message)}"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send every ``forward_merge`` log record to stdout as a workflow command.

    The runner only parses workflow commands from stdout.  Calling this again
    replaces the handler and level rather than adding a second handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, WorkflowCommandFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.INFO))
    logger.propagate = False
    return logger

