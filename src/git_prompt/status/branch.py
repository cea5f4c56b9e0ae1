"""Resolve the display name of the checked-out branch.

BranchResolved | NoBranch | BranchResolutionFailed follows the NonIdealState
pattern: callers switch on the result type instead of inspecting error codes.
"""

from __future__ import annotations

from dataclasses import dataclass

from git_prompt.gateway.git.abc import GitRepository
from git_prompt.gateway.git.types import GitErrorCode, GitRepoError

NO_BRANCH = "no branch"


@dataclass(frozen=True)
class BranchResolved:
    """HEAD resolved to a reference with a shorthand name."""

    name: str


@dataclass(frozen=True)
class NoBranch:
    """HEAD is unborn, missing, or has no shorthand. Implements NonIdealState."""

    @property
    def error_type(self) -> str:
        return "no-branch"


@dataclass(frozen=True)
class BranchResolutionFailed:
    """HEAD could not be read. Implements NonIdealState."""

    error: GitRepoError

    @property
    def error_type(self) -> str:
        return "branch-resolution-failed"


BranchResolution = BranchResolved | NoBranch | BranchResolutionFailed


def resolve_branch(repo: GitRepository) -> BranchResolution:
    try:
        shorthand = repo.get_head_shorthand()
    except GitRepoError as e:
        if e.code in (GitErrorCode.UNBORN_BRANCH, GitErrorCode.NOT_FOUND):
            return NoBranch()
        return BranchResolutionFailed(error=e)

    if not shorthand:
        return NoBranch()
    return BranchResolved(name=shorthand)


def get_branch_name(repo: GitRepository) -> str:
    """Return the branch shorthand, or NO_BRANCH when there is none.

    Raises:
        GitRepoError: if HEAD could not be read for any other reason
    """
    result = resolve_branch(repo)
    if isinstance(result, BranchResolutionFailed):
        raise result.error
    if isinstance(result, NoBranch):
        return NO_BRANCH
    return result.name
