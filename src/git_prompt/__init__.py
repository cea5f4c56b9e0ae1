"""git-prompt CLI entry point.

This package provides a Click-based CLI that prints a single-line summary of a
git working tree for embedding in shell prompts. See `git-prompt --help`.
"""

from git_prompt.cli import cli


def main() -> None:
    """CLI entry point used by the `git-prompt` console script."""
    cli()
