"""Access to the GitHub Actions runner: inputs, logging, outputs and failure.

``ActionCore`` covers the part of the runner toolkit the actions in this
package rely on.  Inputs arrive as ``INPUT_<NAME>`` environment variables;
log lines and group markers are workflow commands on stdout; outputs are
appended to the file named by ``GITHUB_OUTPUT``.
"""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Mapping

from .config import Config
from .telemetry.logger import configure_logging


class ActionCore:
    """Runner facilities bound to one action invocation."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        output_path: str | None = None,
        environ: Mapping[str, str] | None = None,
        log_level: str | None = None,
    ) -> None:
        if logger is None:
            configure_logging(log_level or Config.load_from_env().log_level)
            logger = logging.getLogger(__name__)
        self.logger = logger
        self._environ = environ if environ is not None else os.environ
        self.output_path = output_path or self._environ.get("GITHUB_OUTPUT") or None
        self.exit_code = 0

    def get_input(self, name: str, required: bool = False) -> str:
        """Return the value of action input ``name`` or an empty string.

        Raises ``ValueError`` if ``required`` and the input is not supplied.
        """
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        value = self._environ.get(key, "").strip()
        if required and not value:
            raise ValueError(f"Input required and not supplied: {name}")
        return value

    def debug(self, message: object) -> None:
        self.logger.debug("%s", message)

    def info(self, message: object) -> None:
        self.logger.info("%s", message)

    def warning(self, message: object) -> None:
        self.logger.warning("%s", message)

    def error(self, message: object) -> None:
        self.logger.error("%s", message)

    def set_output(self, name: str, value: object) -> None:
        """Publish a step output.

        Multi-line values are written with a heredoc delimiter.  Without an
        output file (e.g. when run locally) the pair is only logged.
        """
        text = "" if value is None else str(value)
        if not self.output_path:
            self.info(f"output {name}={text}")
            return
        with open(self.output_path, "a", encoding="utf-8") as fh:
            if "\n" in text:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                fh.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
            else:
                fh.write(f"{name}={text}\n")

    def set_failed(self, message: object) -> None:
        """Log ``message`` as an error and mark the step as failed."""
        self.exit_code = 1
        self.error(message)

    def start_group(self, label: str) -> None:
        """Open a collapsible log group; markers are INFO records."""
        self.info(f"::group::{label}")

    def end_group(self) -> None:
        self.info("::endgroup::")
