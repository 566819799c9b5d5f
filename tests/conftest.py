"""Pytest configuration and fixtures for forward-merge tests.

Runner state is faked with ``MockCore`` and the GitHub API with pytest-mock
``MagicMock`` clients, so no test needs network access or a workflow run.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from forward_merge.github.context import GitHubContext
from forward_merge.testing import MockCore

FIXTURES = Path(__file__).parent / "fixtures"


def _build_commits(messages: list[str]) -> list[dict[str, object]]:
    return [{"sha": f"{i:040x}", "commit": {"message": m}} for i, m in enumerate(messages)]


@pytest.fixture
def build_commits():
    """Build commits shaped like the pull request commits endpoint returns them."""
    return _build_commits


@pytest.fixture
def package_logger():
    """Undo any logging configuration a test applied to the package logger."""
    logger = logging.getLogger("forward_merge")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config_path() -> Path:
    return FIXTURES / "test-config.json"


@pytest.fixture
def mock_core() -> MockCore:
    return MockCore()


@pytest.fixture
def github_context() -> GitHubContext:
    return GitHubContext(
        event_name="pull_request",
        repository="test-owner/test-repo",
        payload={
            "repository": {
                "owner": {"login": "test-owner"},
                "name": "test-repo",
            },
        },
    )


@pytest.fixture
def recorded_commands(mocker):
    """Patch ``Shell.exec``/``Shell.exec_quietly`` to record instead of run."""
    calls: list[str] = []

    def record(self, cmd):
        calls.append(cmd)
        return ""

    mocker.patch("forward_merge.shell.Shell.exec", record)
    mocker.patch("forward_merge.shell.Shell.exec_quietly", record)
    return calls


@pytest.fixture
def git_repo(tmp_path, monkeypatch) -> Path:
    """An empty git repository as the working directory."""
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    subprocess.run(["git", "config", "user.email", "test@test.com"], cwd=tmp_path, check=True)
    subprocess.run(["git", "config", "user.name", "Test"], cwd=tmp_path, check=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path
