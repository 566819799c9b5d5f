"""Top‑level package for forward-merge actions.

Helpers used by GitHub Actions workflow scripts that forward-merge fixes
across active release branches: resolving the issue a pull request refers
to, reading the branch topology configuration, and thin wrappers around
the shell, git, the GitHub REST API and the Actions runner.
"""

from .action import BaseAction
from .branch_config import read_branch_config
from .issue_number import find_issue_number
from .testing import MockCore

__all__ = [
    "__version__",
    "BaseAction",
    "read_branch_config",
    "find_issue_number",
    "MockCore",
]
__version__ = "0.1.0"
