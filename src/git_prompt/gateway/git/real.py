"""Production implementation of the Git gateway using pygit2."""

from __future__ import annotations

import logging
from pathlib import Path

import pygit2
from pygit2.enums import RepositoryOpenFlag

from git_prompt.gateway.git.abc import Git, GitRepository
from git_prompt.gateway.git.types import (
    WORKTREE_FLAGS,
    FileStatus,
    GitErrorCode,
    GitRepoError,
    StatusEntry,
)

logger = logging.getLogger(__name__)


class RealGitRepository(GitRepository):
    """GitRepository backed by an open pygit2.Repository."""

    def __init__(self, repo: pygit2.Repository) -> None:
        self._repo = repo

    @property
    def is_bare(self) -> bool:
        return self._repo.is_bare

    def get_status_entries(self) -> list[StatusEntry]:
        try:
            raw = self._repo.status(untracked_files="all", ignored=False)
            submodules = set(self._repo.listall_submodules())
        except pygit2.GitError as e:
            raise GitRepoError(f"Failed to read status: {e}") from e

        entries = []
        for path, flags in raw.items():
            if path.rstrip("/") in submodules:
                continue
            status = FileStatus(flags)
            entries.append(
                StatusEntry(
                    path=path,
                    status=status,
                    has_worktree_delta=bool(status & WORKTREE_FLAGS),
                )
            )
        logger.debug("Collected %d status entries", len(entries))
        return entries

    def get_head_shorthand(self) -> str | None:
        if self._repo.head_is_unborn:
            raise GitRepoError("HEAD points to an unborn branch", GitErrorCode.UNBORN_BRANCH)
        try:
            head = self._repo.head
        except KeyError as e:
            raise GitRepoError(f"HEAD reference not found: {e}", GitErrorCode.NOT_FOUND) from e
        except pygit2.GitError as e:
            raise GitRepoError(f"Failed to resolve HEAD: {e}") from e
        return head.shorthand or None

    def resolve_commit(self, spec: str) -> str:
        try:
            obj = self._repo.revparse_single(spec)
            commit = obj.peel(pygit2.Commit)
        except KeyError as e:
            raise GitRepoError(f"Revision not found: {spec}", GitErrorCode.NOT_FOUND) from e
        except (pygit2.GitError, ValueError) as e:
            raise GitRepoError(f"Failed to resolve {spec}: {e}") from e
        return str(commit.id)

    def graph_ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        try:
            ahead, behind = self._repo.ahead_behind(local, upstream)
        except (pygit2.GitError, KeyError, ValueError) as e:
            raise GitRepoError(f"Failed to compare {local} with {upstream}: {e}") from e
        return ahead, behind


class RealGit(Git):
    """Opens repositories from disk with pygit2."""

    def open_repository(self, path: Path) -> GitRepository:
        try:
            repo = pygit2.Repository(str(path), RepositoryOpenFlag.NO_SEARCH)
        except (pygit2.GitError, KeyError) as e:
            raise GitRepoError(
                f"Could not open repository at {path}: {e}", GitErrorCode.NOT_FOUND
            ) from e
        return RealGitRepository(repo)
