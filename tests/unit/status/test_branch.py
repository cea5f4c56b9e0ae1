"""Tests for branch name resolution."""

import pytest

from git_prompt.gateway.git.fake import FakeGitRepository
from git_prompt.gateway.git.types import GitErrorCode, GitRepoError
from git_prompt.status.branch import (
    NO_BRANCH,
    BranchResolutionFailed,
    BranchResolved,
    NoBranch,
    get_branch_name,
    resolve_branch,
)


def test_resolved_head_returns_shorthand() -> None:
    repo = FakeGitRepository(head_shorthand="feature/login")

    assert resolve_branch(repo) == BranchResolved(name="feature/login")
    assert get_branch_name(repo) == "feature/login"


@pytest.mark.parametrize("code", [GitErrorCode.UNBORN_BRANCH, GitErrorCode.NOT_FOUND])
def test_unborn_or_missing_head_is_no_branch(code: GitErrorCode) -> None:
    repo = FakeGitRepository(head_error=GitRepoError("no head", code))

    assert resolve_branch(repo) == NoBranch()
    assert get_branch_name(repo) == NO_BRANCH == "no branch"


def test_missing_shorthand_is_no_branch() -> None:
    repo = FakeGitRepository(head_shorthand=None)

    assert isinstance(resolve_branch(repo), NoBranch)
    assert get_branch_name(repo) == "no branch"


def test_other_failures_are_reported_as_failed() -> None:
    error = GitRepoError("corrupt HEAD", GitErrorCode.GENERIC)
    repo = FakeGitRepository(head_error=error)

    result = resolve_branch(repo)

    assert isinstance(result, BranchResolutionFailed)
    assert result.error is error
    assert result.error_type == "branch-resolution-failed"


def test_get_branch_name_raises_on_failure() -> None:
    repo = FakeGitRepository(head_error=GitRepoError("corrupt HEAD"))

    with pytest.raises(GitRepoError, match="corrupt HEAD"):
        get_branch_name(repo)
