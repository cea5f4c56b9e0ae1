"""Apply a color to a text fragment under one of three encodings."""

from __future__ import annotations

from enum import Enum

import click


class RenderMode(Enum):
    """How colors are encoded in the output line.

    PLAIN: no escapes at all
    TERMINAL: ANSI SGR sequences
    PROMPT_ESCAPE: zsh prompt expansion, %F{color}...%f
    """

    PLAIN = "plain"
    TERMINAL = "terminal"
    PROMPT_ESCAPE = "prompt-escape"


class Color(Enum):
    """Foreground colors, valued by their click color name."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


# Colors with a prompt-escape name. Anything else renders the placeholder.
PROMPT_COLOR_NAMES: dict[Color, str] = {
    Color.BLUE: "blue",
    Color.GREEN: "green",
    Color.RED: "red",
    Color.YELLOW: "yellow",
}

UNSUPPORTED_PROMPT_COLOR = "not implemented yet"


def format_color(text: str, color: Color, mode: RenderMode) -> str:
    """Wrap text in the escapes for color under mode.

    Empty text is returned unchanged so that no bare escape pair is emitted.
    """
    if not text or mode is RenderMode.PLAIN:
        return text
    if mode is RenderMode.PROMPT_ESCAPE:
        name = PROMPT_COLOR_NAMES.get(color, UNSUPPORTED_PROMPT_COLOR)
        return f"%F{{{name}}}{text}%f"
    return click.style(text, fg=color.value)
