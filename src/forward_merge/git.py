"""Git porcelain commands used by the forward-merge actions.

Every command goes through ``Shell`` so it is logged and honours dry-run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .shell import Shell

COMMIT_MESSAGE_FILE = ".commitmsg"


@dataclass(frozen=True)
class Author:
    """Commit author override."""

    name: str
    email: str


class Git:
    """Thin wrapper around the git command line."""

    def __init__(self, shell: Shell) -> None:
        self.shell = shell

    def commit(self, message: str, author: Author | None = None) -> None:
        """Commit with ``message`` and push the current branch."""
        # The message goes through a file so it never needs shell quoting
        Path(COMMIT_MESSAGE_FILE).write_text(message, encoding="utf-8")
        options = f"--file={COMMIT_MESSAGE_FILE}"
        if author:
            options += f' --author "{author.name} <{author.email}>"'
        self.shell.exec(f"git commit {options}")
        self.shell.exec("git push")

    def create_branch(self, name: str, sha: str) -> None:
        """Create branch ``name`` at ``sha`` and push it to origin."""
        self.shell.exec(f"git checkout -b {name} {sha}")
        self.shell.exec(f"git push --set-upstream origin {name}")

    def delete_branch(self, name: str) -> str | None:
        """Delete the remote branch ``name``; a missing branch is not an error."""
        return self.shell.exec_quietly(f"git push origin --delete {name}")

    def checkout(self, branch: str) -> str | None:
        return self.shell.exec(f"git checkout {branch}")

    def pull(self) -> str | None:
        return self.shell.exec("git pull")

    def merge(self, ref: str, options: str = "") -> str | None:
        return self.shell.exec(f"git merge {ref} {options}".strip())

    def reset(self, ref: str, mode: str = "--hard") -> str | None:
        return self.shell.exec(f"git reset {mode} {ref}")

    def configure_identity(self, name: str, email: str) -> None:
        """Set the user name and email for commits made by the action."""
        self.shell.exec(f'git config user.email "{email}"')
        self.shell.exec(f'git config user.name "{name}"')

    def push(self, args: str = "") -> str | None:
        return self.shell.exec(f"git push {args}".strip())
