"""Abstract interface for read-only Git repository access.

Git opens repositories; GitRepository answers queries about one opened
repository. All implementations (real, fake) must implement both interfaces.
This interface contains ONLY query operations (no mutations).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from git_prompt.gateway.git.types import StatusEntry


class GitRepository(ABC):
    """Queries against a single opened repository.

    Every method raises GitRepoError when the underlying lookup fails.
    """

    @property
    @abstractmethod
    def is_bare(self) -> bool:
        """True if the repository has no working tree."""
        ...

    @abstractmethod
    def get_status_entries(self) -> list[StatusEntry]:
        """List every non-clean file in the working tree.

        Untracked files are included and untracked directories are recursed
        into. Submodules are excluded.

        Returns:
            Status entries in the order the status walk produced them
        """
        ...

    @abstractmethod
    def get_head_shorthand(self) -> str | None:
        """Resolve HEAD and return its shorthand name.

        Returns:
            Shorthand such as "main", or None if the reference has none

        Raises:
            GitRepoError: with code UNBORN_BRANCH when HEAD points at a branch
                with no commits, NOT_FOUND when the reference is missing, or
                GENERIC for anything else
        """
        ...

    @abstractmethod
    def resolve_commit(self, spec: str) -> str:
        """Resolve a revision spec ("HEAD", "@{u}", ...) to a commit id.

        Args:
            spec: Any revision spec understood by git rev-parse

        Returns:
            Hex commit id
        """
        ...

    @abstractmethod
    def graph_ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        """Count commits unique to each side of two commits.

        Args:
            local: Commit id of the local tip
            upstream: Commit id of the upstream tip

        Returns:
            Tuple of (ahead, behind) where ahead counts commits reachable from
            local but not upstream
        """
        ...


class Git(ABC):
    """Entry point for opening repositories."""

    @abstractmethod
    def open_repository(self, path: Path) -> GitRepository:
        """Open the repository at path.

        Raises:
            GitRepoError: if path is not a repository
        """
        ...
