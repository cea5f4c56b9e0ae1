"""Fixtures that build real git repositories in tmp_path."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    skip_no_git = pytest.mark.skip(reason="git binary not available")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
            if shutil.which("git") is None:
                item.add_marker(skip_no_git)


def run_git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_git_repo(repo: Path, branch: str) -> None:
    """Initialize a repository with identity config and no commits."""
    repo.mkdir(parents=True, exist_ok=True)
    run_git(repo, "init", "--initial-branch", branch)
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")


def commit_file(repo: Path, name: str, content: str, message: str) -> None:
    path = repo / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    run_git(repo, "add", name)
    run_git(repo, "commit", "-m", message)


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """Repository on branch main with no commits."""
    repo = tmp_path / "empty"
    init_git_repo(repo, "main")
    return repo


@pytest.fixture
def main_repo(tmp_path: Path) -> Path:
    """Repository on branch main with one commit containing tracked.txt and old.txt."""
    repo = tmp_path / "repo"
    init_git_repo(repo, "main")
    commit_file(repo, "tracked.txt", "one\n", "Add tracked file")
    commit_file(repo, "old.txt", "old\n", "Add old file")
    return repo


@pytest.fixture
def cloned_repo(tmp_path: Path) -> tuple[Path, Path]:
    """Return (origin, clone) where clone's main tracks origin/main."""
    origin = tmp_path / "origin"
    init_git_repo(origin, "main")
    commit_file(origin, "base.txt", "base\n", "Initial commit")

    clone = tmp_path / "clone"
    subprocess.run(
        ["git", "clone", str(origin), str(clone)],
        capture_output=True,
        text=True,
        check=True,
    )
    run_git(clone, "config", "user.email", "test@example.com")
    run_git(clone, "config", "user.name", "Test User")
    run_git(clone, "config", "commit.gpgsign", "false")
    return origin, clone


@pytest.fixture
def git() -> Callable[..., str]:
    """Run a git command in a repository and return its stdout."""
    return run_git


@pytest.fixture
def commit() -> Callable[[Path, str, str, str], None]:
    """Write, stage and commit a single file."""
    return commit_file
