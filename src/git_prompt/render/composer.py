"""Assemble the bracketed one-line summary."""

from __future__ import annotations

from git_prompt.render.color import Color, RenderMode, format_color
from git_prompt.status.classifier import ChangeCounters
from git_prompt.status.divergence import DivergenceCounts

BRANCH_COLOR = Color.BLUE
AHEAD_COLOR = Color.GREEN
BEHIND_COLOR = Color.RED
PREFIX_COLOR = Color.YELLOW
INDEX_COLOR = Color.GREEN
WORKTREE_COLOR = Color.RED
BRACKET_COLOR = Color.YELLOW

INDEX_PREFIX = ""
WORKTREE_PREFIX = "| "


def stringify_status(
    counters: ChangeCounters, prefix: str, color: Color, mode: RenderMode
) -> str:
    """Render "<prefix>+new ~modified -deleted", or "" when all counts are zero."""
    if not counters.has_changes:
        return ""
    return format_color(prefix, PREFIX_COLOR, mode) + format_color(
        counters.describe(), color, mode
    )


def build_segments(
    branch: str,
    divergence: DivergenceCounts,
    index: ChangeCounters,
    worktree: ChangeCounters,
    mode: RenderMode,
) -> list[str]:
    """Build the five candidate segments in display order, empties included."""
    return [
        format_color(branch, BRANCH_COLOR, mode),
        format_color(f"↑{divergence.ahead}", AHEAD_COLOR, mode) if divergence.ahead > 0 else "",
        format_color(f"↓{divergence.behind}", BEHIND_COLOR, mode) if divergence.behind > 0 else "",
        stringify_status(index, INDEX_PREFIX, INDEX_COLOR, mode),
        stringify_status(worktree, WORKTREE_PREFIX, WORKTREE_COLOR, mode),
    ]


def compose_summary(
    branch: str,
    divergence: DivergenceCounts,
    index: ChangeCounters,
    worktree: ChangeCounters,
    mode: RenderMode,
) -> str:
    """Join the non-empty segments with single spaces inside colored brackets.

    Example (PLAIN): "[main ↑3 ↓1 +2 ~1 -0 | +0 ~4 -1]"
    """
    segments = build_segments(branch, divergence, index, worktree, mode)
    body = " ".join(segment for segment in segments if segment)
    return format_color("[", BRACKET_COLOR, mode) + body + format_color("]", BRACKET_COLOR, mode)
