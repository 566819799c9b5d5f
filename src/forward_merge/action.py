"""Base class for the actions in a forward-merge workflow.

``BaseAction`` provides the run/run_action/on_error template and
convenience methods for the shell, git and GitHub API.  New code can also
use ``Shell``, ``Git`` and ``GitHubClient`` directly.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Callable

from .core import ActionCore
from .git import Author, Git
from .github.api import GitHubClient
from .shell import Shell

logger = logging.getLogger(__name__)


class BaseAction:
    """Common operations actions invoke upon an instance of an action."""

    def __init__(self, core=None, github: GitHubClient | None = None) -> None:
        # Per-run state shared between steps (e.g. the commits of a PR)
        self.context: dict[str, object] = {}

        self.core = core or ActionCore()
        self.shell = Shell(self.core)
        self.gh = github or GitHubClient(core=self.core)
        self.git = Git(self.shell)

    def run(self) -> int:
        """Run the action and return the exit code for the step."""
        try:
            self.run_action()
        except Exception as err:
            self.on_error(err)
        return self.core.exit_code

    def on_error(self, err: Exception) -> None:
        """Report an uncaught error and fail the step.

        Subclasses can override this to do additional work on failure.
        """
        logger.debug("Action failed", exc_info=err)
        self.core.error(err)
        self.core.set_failed(err)

    def run_action(self) -> None:
        """Perform the action's work."""
        raise NotImplementedError("Subclasses must implement run_action")

    def exec(self, cmd: str) -> str | None:
        return self.shell.exec(cmd)

    def exec_quietly(self, cmd: str) -> str | None:
        return self.shell.exec_quietly(cmd)

    def exec_rest(
        self,
        api_fn: Callable[[GitHubClient, dict[str, object]], object],
        opts: dict[str, object],
        label: str = "",
    ) -> object:
        """Call ``api_fn`` with the GitHub client and the repository options.

        ``opts`` is merged over ``{"owner": ..., "repo": ...}``.  Fails if the
        action did not supply a ``repo-token`` input.
        """
        # Raises before any call is attempted when there is no repo-token
        self.gh.client
        all_options = {**self.gh.repo, **opts}
        self.core.debug(f"Invoking GitHub REST API {label}: {json.dumps(opts, default=str)}")
        return api_fn(self.gh, all_options)

    def fetch_commits(self, pr_number: int) -> list[dict[str, object]]:
        """Commits of pull request ``pr_number``, fetched once per action run."""
        if "commits" not in self.context:
            self.context["commits"] = self.gh.fetch_commits(pr_number)
        return self.context["commits"]

    def commit(self, message: str, author: Author | None = None) -> None:
        self.git.commit(message, author)

    def create_branch(self, name: str, sha: str) -> None:
        self.git.create_branch(name, sha)

    def delete_branch(self, name: str) -> str | None:
        return self.git.delete_branch(name)

    def log_error(self, exc: BaseException, prefix: str = "Error Detected") -> None:
        """Log a failed command without dumping raw process buffers."""
        status = getattr(exc, "returncode", None)
        stdout = getattr(exc, "stdout", None) or ""
        if isinstance(stdout, bytes):
            stdout = stdout.decode(errors="replace")
        if isinstance(exc, subprocess.CalledProcessError):
            detail = f"command: {exc.cmd}\nstderr: {exc.stderr or ''}"
        else:
            detail = f"error: {exc}"
        self.core.warning(f"{prefix}:\nstatus: {status}\n{detail}\nstdout: {stdout}")

    def start_group(self, label: str) -> None:
        self.core.start_group(label)

    def end_group(self) -> None:
        self.core.end_group()
