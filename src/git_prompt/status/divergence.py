"""Commit distance between HEAD and its upstream."""

from __future__ import annotations

import logging
from typing import NamedTuple

from git_prompt.gateway.git.abc import GitRepository
from git_prompt.gateway.git.types import GitRepoError

logger = logging.getLogger(__name__)

UPSTREAM_SPEC = "@{u}"


class DivergenceCounts(NamedTuple):
    ahead: int
    behind: int


def compute_divergence(repo: GitRepository) -> DivergenceCounts:
    """Count commits ahead of and behind the configured upstream.

    A missing upstream (or any other lookup failure) is not an error: it
    reports (0, 0), the same as a branch that is level with its upstream.
    """
    try:
        head = repo.resolve_commit("HEAD")
        upstream = repo.resolve_commit(UPSTREAM_SPEC)
        ahead, behind = repo.graph_ahead_behind(head, upstream)
    except GitRepoError as e:
        logger.debug("No divergence information: %s", e)
        return DivergenceCounts(0, 0)
    return DivergenceCounts(ahead, behind)
