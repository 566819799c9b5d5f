"""Configuration loading for forward-merge actions.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.  On a GitHub Actions
runner the values come from the variables the runner exports for every
step; locally a `.env` file can stand in for them.

Variables (all optional at load time):
- GITHUB_API_URL (default: 'https://api.github.com')
- GITHUB_EVENT_PATH
- GITHUB_EVENT_NAME
- GITHUB_REPOSITORY
- GITHUB_OUTPUT
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_GITHUB_API_URL, DEFAULT_LOG_LEVEL


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    github_api_url: str
    event_path: str | None
    event_name: str | None
    repository: str | None
    output_path: str | None
    log_level: str

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file in the working directory (or a parent) is loaded if
        present.  Nothing is required here;
        the consumer of a missing value raises `RuntimeError` when it
        actually needs it.
        """
        load_dotenv(find_dotenv(usecwd=True))

        github_api_url = os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL

        return cls(
            github_api_url=github_api_url.rstrip("/"),
            event_path=os.getenv("GITHUB_EVENT_PATH") or None,
            event_name=os.getenv("GITHUB_EVENT_NAME") or None,
            repository=os.getenv("GITHUB_REPOSITORY") or None,
            output_path=os.getenv("GITHUB_OUTPUT") or None,
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
