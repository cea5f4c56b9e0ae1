"""Tests for color formatting under each render mode."""

import pytest

from git_prompt.render.color import Color, RenderMode, format_color


@pytest.mark.parametrize("color", list(Color))
def test_plain_mode_returns_text_unchanged(color: Color) -> None:
    assert format_color("main", color, RenderMode.PLAIN) == "main"


def test_terminal_mode_wraps_in_ansi() -> None:
    assert format_color("main", Color.BLUE, RenderMode.TERMINAL) == "\x1b[34mmain\x1b[0m"


def test_terminal_mode_uses_requested_color() -> None:
    assert format_color("↑3", Color.GREEN, RenderMode.TERMINAL).startswith("\x1b[32m")
    assert format_color("↓1", Color.RED, RenderMode.TERMINAL).startswith("\x1b[31m")


@pytest.mark.parametrize(
    ("color", "name"),
    [
        (Color.BLUE, "blue"),
        (Color.GREEN, "green"),
        (Color.RED, "red"),
        (Color.YELLOW, "yellow"),
    ],
)
def test_prompt_escape_mode_uses_named_color(color: Color, name: str) -> None:
    assert format_color("main", color, RenderMode.PROMPT_ESCAPE) == f"%F{{{name}}}main%f"


def test_prompt_escape_mode_unsupported_color_emits_placeholder() -> None:
    result = format_color("main", Color.MAGENTA, RenderMode.PROMPT_ESCAPE)

    assert result == "%F{not implemented yet}main%f"


@pytest.mark.parametrize("mode", list(RenderMode))
def test_empty_text_stays_empty(mode: RenderMode) -> None:
    assert format_color("", Color.YELLOW, mode) == ""
