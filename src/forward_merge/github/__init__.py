"""GitHub API integration."""

from .api import GitHubClient
from .auth import get_github_client
from .context import GitHubContext

__all__ = [
    "get_github_client",
    "GitHubClient",
    "GitHubContext",
]
