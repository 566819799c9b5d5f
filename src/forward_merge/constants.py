"""Global constants for forward-merge actions.

Defaults for command execution, GitHub API paging and logging.  Each can be
overridden through the environment of the workflow step.
"""

import os

# Limits
COMMAND_TIMEOUT_S = int(os.environ.get("COMMAND_TIMEOUT_S", 300))

# GitHub API
DEFAULT_GITHUB_API_URL = "https://api.github.com"
GITHUB_PAGE_SIZE = int(os.environ.get("GITHUB_PAGE_SIZE", 100))
GITHUB_TIMEOUT_S = float(os.environ.get("GITHUB_TIMEOUT_S", 10.0))

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
