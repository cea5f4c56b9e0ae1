"""Value types shared by all Git gateway implementations.

FileStatus mirrors libgit2's status bit layout so that raw flags coming back
from pygit2 convert without a lookup table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


class FileStatus(IntFlag):
    """Composite per-file status, index side and worktree side."""

    CURRENT = 0

    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4

    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12

    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


WORKTREE_FLAGS = (
    FileStatus.WT_NEW
    | FileStatus.WT_MODIFIED
    | FileStatus.WT_DELETED
    | FileStatus.WT_TYPECHANGE
    | FileStatus.WT_RENAMED
    | FileStatus.WT_UNREADABLE
)


@dataclass(frozen=True)
class StatusEntry:
    """One file reported by a status walk.

    has_worktree_delta is True when an index-to-workdir diff exists for the
    entry. An entry can be listed without one.
    """

    path: str
    status: FileStatus
    has_worktree_delta: bool


class GitErrorCode(Enum):
    UNBORN_BRANCH = "unborn-branch"
    NOT_FOUND = "not-found"
    BARE_REPOSITORY = "bare-repository"
    GENERIC = "generic"


class GitRepoError(Exception):
    """Any failure while reading repository state."""

    def __init__(self, message: str, code: GitErrorCode = GitErrorCode.GENERIC) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message
