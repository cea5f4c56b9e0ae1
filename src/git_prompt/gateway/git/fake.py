"""Fake implementation of the Git gateway for testing."""

from __future__ import annotations

from pathlib import Path

from git_prompt.gateway.git.abc import Git, GitRepository
from git_prompt.gateway.git.types import GitErrorCode, GitRepoError, StatusEntry


class FakeGitRepository(GitRepository):
    """In-memory repository with pre-configured state.

    Constructor Injection:
    ---------------------
    - bare: Whether the repository reports itself as bare
    - status_entries: Entries returned by get_status_entries
    - head_shorthand: Value returned by get_head_shorthand
    - head_error: If set, raised by get_head_shorthand instead
    - commits: Mapping of revision spec -> commit id ("HEAD", "@{u}", ...)
    - ahead_behind: Mapping of (local, upstream) -> (ahead, behind)
    - status_error: If set, raised by get_status_entries
    """

    def __init__(
        self,
        *,
        bare: bool = False,
        status_entries: list[StatusEntry] | None = None,
        head_shorthand: str | None = "main",
        head_error: GitRepoError | None = None,
        commits: dict[str, str] | None = None,
        ahead_behind: dict[tuple[str, str], tuple[int, int]] | None = None,
        status_error: GitRepoError | None = None,
    ) -> None:
        self._bare = bare
        self._status_entries = status_entries if status_entries is not None else []
        self._head_shorthand = head_shorthand
        self._head_error = head_error
        self._commits = commits if commits is not None else {}
        self._ahead_behind = ahead_behind if ahead_behind is not None else {}
        self._status_error = status_error

    @property
    def is_bare(self) -> bool:
        return self._bare

    def get_status_entries(self) -> list[StatusEntry]:
        if self._status_error is not None:
            raise self._status_error
        return list(self._status_entries)

    def get_head_shorthand(self) -> str | None:
        if self._head_error is not None:
            raise self._head_error
        return self._head_shorthand

    def resolve_commit(self, spec: str) -> str:
        if spec not in self._commits:
            raise GitRepoError(f"Revision not found: {spec}", GitErrorCode.NOT_FOUND)
        return self._commits[spec]

    def graph_ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        if (local, upstream) not in self._ahead_behind:
            raise GitRepoError(f"No merge base between {local} and {upstream}")
        return self._ahead_behind[(local, upstream)]


class FakeGit(Git):
    """Fake Git that hands out pre-configured repositories by path.

    Tracks opened paths for assertions in tests.
    """

    def __init__(self, *, repositories: dict[Path, FakeGitRepository] | None = None) -> None:
        self._repositories = repositories if repositories is not None else {}
        self._opened_paths: list[Path] = []

    def open_repository(self, path: Path) -> GitRepository:
        self._opened_paths.append(path)
        if path not in self._repositories:
            raise GitRepoError(
                f"Could not open repository at {path}: not a git repository",
                GitErrorCode.NOT_FOUND,
            )
        return self._repositories[path]

    @property
    def opened_paths(self) -> list[Path]:
        """Paths passed to open_repository, in call order."""
        return list(self._opened_paths)
