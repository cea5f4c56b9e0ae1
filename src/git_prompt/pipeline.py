"""Single pass from repository path to rendered status line."""

from __future__ import annotations

import logging
from pathlib import Path

from git_prompt.gateway.git.abc import Git
from git_prompt.gateway.git.types import GitErrorCode, GitRepoError
from git_prompt.render.color import RenderMode
from git_prompt.render.composer import compose_summary
from git_prompt.status.branch import get_branch_name
from git_prompt.status.classifier import classify_statuses
from git_prompt.status.divergence import compute_divergence

logger = logging.getLogger(__name__)


def build_status_line(git: Git, path: Path, mode: RenderMode) -> str:
    """Open the repository at path and render its summary line.

    Raises:
        GitRepoError: if the repository cannot be opened, is bare, or HEAD
            cannot be read. Nothing has been rendered when this is raised.
    """
    repo = git.open_repository(path)

    if repo.is_bare:
        raise GitRepoError(
            "Cannot report status on bare repository", GitErrorCode.BARE_REPOSITORY
        )

    index, worktree = classify_statuses(repo.get_status_entries())
    branch = get_branch_name(repo)
    divergence = compute_divergence(repo)

    logger.debug(
        "branch=%s divergence=%s index=%s worktree=%s", branch, divergence, index, worktree
    )
    return compose_summary(branch, divergence, index, worktree, mode)
