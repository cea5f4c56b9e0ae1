"""PromptContext - dependency injection container for the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from git_prompt.gateway.git.abc import Git
from git_prompt.gateway.git.real import RealGit


@dataclass(frozen=True)
class PromptContext:
    """Context container for git-prompt.

    All repository access goes through the git gateway so tests can swap in
    FakeGit.
    """

    git: Git


def create_context() -> PromptContext:
    """Create a PromptContext with real gateway implementations."""
    return PromptContext(git=RealGit())
