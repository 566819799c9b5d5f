"""Find the issue a pull request refers to.

The issue number is taken from the first source that mentions one:

1. the commit messages, newest first (``#12345``)
2. the pull request title (``#12345``)
3. the source branch name (any run of three or more digits)

Numbers shorter than three digits are ignored so that short numeric tokens
are not mistaken for issue references.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ISSUE_PATTERN = re.compile(r"#([0-9]{3,})")
BRANCH_ISSUE_PATTERN = re.compile(r"([0-9]{3,})")


@dataclass(frozen=True)
class PullRequest:
    """The fields of a pull request event the lookup needs."""

    number: int
    title: str
    source_branch: str

    @classmethod
    def from_payload(cls, pull_request: Mapping[str, object]) -> PullRequest:
        """Build from the ``pull_request`` object of a webhook event."""
        head = pull_request.get("head") or {}
        return cls(
            number=pull_request["number"],
            title=pull_request.get("title") or "",
            source_branch=head.get("ref") or "",
        )


def search(text: str | None, source: str, pattern: re.Pattern[str] = ISSUE_PATTERN) -> str | None:
    """Return the first issue number ``pattern`` finds in ``text``."""
    if not text:
        return None
    match = pattern.search(text)
    if match is None:
        return None
    issue_number = match.group(1)
    logger.debug("issue number %s found in %s", issue_number, source)
    return issue_number


def commit_messages_from_api(commits: Iterable[Mapping[str, object]]) -> list[str]:
    """Messages of the commits returned by the pull request commits endpoint."""
    return [c["commit"]["message"] for c in commits]


def extract_from_commits(commit_messages: Sequence[str]) -> str | None:
    """Search the commit messages, most recent commit first.

    ``commit_messages`` is in the order the API returns them (oldest first).
    """
    logger.debug("commit messages: %s", list(commit_messages))
    for message in reversed(commit_messages):
        issue_number = search(message, "commits")
        if issue_number:
            return issue_number
    return None


def resolve_issue_number(
    commit_messages: Sequence[str],
    pr_title: str | None,
    source_branch: str | None,
) -> str | None:
    """Return the issue number for a pull request, or ``None`` if none is referenced."""
    issue_number = extract_from_commits(commit_messages)
    if not issue_number:
        issue_number = search(pr_title, "PR title")
    if not issue_number:
        issue_number = search(source_branch, "branch name", BRANCH_ISSUE_PATTERN)
    return issue_number


def find_issue_number(action, pull_request: Mapping[str, object] | PullRequest) -> str | None:
    """Resolve the issue number of the pull request in an action's event.

    The commits are fetched through ``action.fetch_commits`` so they are
    shared with anything else the action does with them.
    """
    if not isinstance(pull_request, PullRequest):
        pull_request = PullRequest.from_payload(pull_request)
    commits = action.fetch_commits(pull_request.number)
    return resolve_issue_number(
        commit_messages_from_api(commits),
        pull_request.title,
        pull_request.source_branch,
    )
