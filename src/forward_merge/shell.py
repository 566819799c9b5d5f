"""Shell command execution with dry-run support and logging."""

from __future__ import annotations

import logging
import subprocess

from .constants import COMMAND_TIMEOUT_S

logger = logging.getLogger(__name__)


class Shell:
    """Runs shell commands, logging each one through the action core.

    When the action's ``dry-run`` input is set, commands are logged and not
    executed.
    """

    def __init__(self, core, timeout_s: int = COMMAND_TIMEOUT_S) -> None:
        self.core = core
        self.timeout_s = timeout_s

    def exec(self, cmd: str) -> str | None:
        """Run ``cmd`` and return its stripped stdout.

        Returns ``None`` in dry-run mode.  A non-zero exit status raises
        ``subprocess.CalledProcessError``.
        """
        if self.core.get_input("dry-run"):
            self.core.info(f"dry run: {cmd}")
            return None

        self.core.info(f"Running: {cmd}")
        proc = subprocess.run(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=self.timeout_s,
            check=True,
        )
        if proc.stderr:
            self.core.info(proc.stderr)
        return proc.stdout.strip()

    def exec_quietly(self, cmd: str) -> str | None:
        """Run ``cmd`` and return ``None`` instead of raising on failure."""
        try:
            return self.exec(cmd)
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
            logger.debug("Ignoring failure of %r: %s", cmd, exc)
            return None
