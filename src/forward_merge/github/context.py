"""Workflow run context: the triggering event and its payload."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from ..config import Config


@dataclass
class GitHubContext:
    """The event that triggered the workflow run."""

    event_name: str | None = None
    repository: str | None = None
    payload: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_env(cls, config: Config | None = None) -> GitHubContext:
        """Load the event payload from ``GITHUB_EVENT_PATH``.

        Outside a workflow run there is no event file and the payload is
        empty.
        """
        config = config or Config.load_from_env()
        payload: dict[str, object] = {}
        if config.event_path:
            with open(config.event_path, encoding="utf-8") as fh:
                payload = json.load(fh)
        return cls(event_name=config.event_name, repository=config.repository, payload=payload)
