"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from ..constants import DEFAULT_GITHUB_API_URL, GITHUB_TIMEOUT_S


def get_github_client(token: str, api_url: str = DEFAULT_GITHUB_API_URL) -> httpx.Client:
    """Return a configured GitHub httpx client with the Authorization header set."""
    return httpx.Client(
        base_url=api_url,
        headers={
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "forward-merge-actions",
        },
        timeout=GITHUB_TIMEOUT_S,
    )
