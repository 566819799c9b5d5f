"""Tests for git command construction."""

from __future__ import annotations

from forward_merge.git import Author, Git
from forward_merge.shell import Shell
from forward_merge.testing import MockCore


def _git() -> Git:
    return Git(Shell(MockCore()))


class TestCommit:
    def test_commits_with_message_and_author(self, tmp_path, monkeypatch, recorded_commands) -> None:
        monkeypatch.chdir(tmp_path)

        _git().commit("Test commit message", Author(name="Test User", email="test@example.com"))

        assert (tmp_path / ".commitmsg").read_text() == "Test commit message"
        assert any("git commit --file=.commitmsg" in c for c in recorded_commands)
        assert any('--author "Test User <test@example.com>"' in c for c in recorded_commands)
        assert recorded_commands[-1] == "git push"

    def test_commits_without_author(self, tmp_path, monkeypatch, recorded_commands) -> None:
        monkeypatch.chdir(tmp_path)

        _git().commit("Test commit message")

        assert recorded_commands == ["git commit --file=.commitmsg", "git push"]


def test_create_branch(recorded_commands) -> None:
    _git().create_branch("feature-branch", "abc123")
    assert recorded_commands == [
        "git checkout -b feature-branch abc123",
        "git push --set-upstream origin feature-branch",
    ]


def test_delete_branch(recorded_commands) -> None:
    _git().delete_branch("old-branch")
    assert recorded_commands == ["git push origin --delete old-branch"]


def test_checkout_and_pull(recorded_commands) -> None:
    git = _git()
    git.checkout("main")
    git.pull()
    assert recorded_commands == ["git checkout main", "git pull"]


def test_merge(recorded_commands) -> None:
    git = _git()
    git.merge("abc123", "--no-ff --no-commit")
    git.merge("def456")
    assert recorded_commands == ["git merge abc123 --no-ff --no-commit", "git merge def456"]


def test_reset(recorded_commands) -> None:
    git = _git()
    git.reset("HEAD~1")
    git.reset("HEAD~1", "--soft")
    assert recorded_commands == ["git reset --hard HEAD~1", "git reset --soft HEAD~1"]


def test_configure_identity(recorded_commands) -> None:
    _git().configure_identity("Test User", "test@example.com")
    assert recorded_commands == [
        'git config user.email "test@example.com"',
        'git config user.name "Test User"',
    ]


def test_push(recorded_commands) -> None:
    git = _git()
    git.push("--force origin my-branch")
    git.push()
    assert recorded_commands == ["git push --force origin my-branch", "git push"]
