"""GitHub REST API wrapper."""

from __future__ import annotations

import logging

import httpx

from ..config import Config
from ..constants import GITHUB_PAGE_SIZE
from ..core import ActionCore
from .auth import get_github_client
from .context import GitHubContext

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API operations for the repository the workflow runs in.

    The runner core and event context are bound at construction time; the
    HTTP client is created on first use from the action's ``repo-token``
    input and reused afterwards.
    """

    def __init__(
        self,
        core: ActionCore | None = None,
        context: GitHubContext | None = None,
        config: Config | None = None,
    ) -> None:
        self.core = core or ActionCore()
        self._config = config
        self._context = context
        self._client: httpx.Client | None = None

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = Config.load_from_env()
        return self._config

    @property
    def context(self) -> GitHubContext:
        if self._context is None:
            self._context = GitHubContext.from_env(self.config)
        return self._context

    @property
    def client(self) -> httpx.Client:
        """The authenticated client, created lazily."""
        if self._client is None:
            repo_token = self.core.get_input("repo-token")
            if not repo_token:
                raise RuntimeError("repo-token input is required")
            self._client = get_github_client(repo_token, self.config.github_api_url)
        return self._client

    @property
    def repo(self) -> dict[str, str]:
        """Owner and name of the repository from the event payload."""
        repository = self.context.payload.get("repository")
        if not repository:
            raise RuntimeError("Event payload does not describe a repository")
        return {
            "owner": repository["owner"]["login"],
            "repo": repository["name"],
        }

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        json: dict[str, object] | None = None,
    ) -> object:
        """Perform a request against the GitHub API and return the decoded body.

        Transport failures and non-2xx responses are raised as
        ``RuntimeError``.
        """
        try:
            resp = self.client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            logger.error("GitHub API request failed: %s", exc)
            raise RuntimeError(f"GitHub API request failed: {exc}") from exc

        if 200 <= resp.status_code < 300:
            return resp.json()

        logger.error("GitHub API error %s: %s", resp.status_code, resp.text)
        raise RuntimeError(f"GitHub API error {resp.status_code}: {resp.text}")

    def fetch_commits(self, pr_number: int) -> list[dict[str, object]]:
        """Return every commit of pull request ``pr_number``, oldest first."""
        repo = self.repo
        path = f"/repos/{repo['owner']}/{repo['repo']}/pulls/{pr_number}/commits"
        commits: list[dict[str, object]] = []
        page = 1
        while True:
            params = {"per_page": GITHUB_PAGE_SIZE, "page": page}
            items = self._request("GET", path, params=params)
            if not items:
                break
            commits.extend(items)
            if len(items) < GITHUB_PAGE_SIZE:
                break
            page += 1
        logger.debug("Fetched %d commits for pull request #%s", len(commits), pr_number)
        return commits

    def create_issue(
        self,
        title: str,
        milestone: int | None = None,
        labels: list[str] | None = None,
    ) -> dict[str, object]:
        """Open an issue, optionally assigned to a milestone and labelled."""
        repo = self.repo
        payload: dict[str, object] = {"title": title}
        if milestone is not None:
            payload["milestone"] = milestone
        if labels:
            payload["labels"] = labels
        return self._request("POST", f"/repos/{repo['owner']}/{repo['repo']}/issues", json=payload)
