"""Logging setup driven by environment variables.

Logging only ever goes to stderr and never changes the status line.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

import click

LOG_LEVEL_ENV = "GIT_PROMPT_LOG_LEVEL"
LOG_STYLE_ENV = "GIT_PROMPT_LOG_STYLE"

DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_STYLE = "auto"

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"

_EXTRA_LEVELS = {
    "TRACE": logging.DEBUG,
    "OFF": logging.CRITICAL + 10,
}

_LEVEL_COLORS = {
    logging.DEBUG: "cyan",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "magenta",
}


class StyledLevelFormatter(logging.Formatter):
    """Formatter that colors the level name."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = click.style(original, fg=color, bold=True)
        try:
            return super().format(record)
        finally:
            record.levelname = original


def parse_log_level(value: str | None) -> int:
    """Map a level name such as "debug" or "warn" to a logging level.

    Unknown names fall back to the default level.
    """
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if name in _EXTRA_LEVELS:
        return _EXTRA_LEVELS[name]
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        return logging.getLevelNamesMapping()[DEFAULT_LOG_LEVEL.upper()]
    return level


def should_style(value: str | None, *, is_tty: bool) -> bool:
    """Decide whether log output is colored.

    "always" and "never" force the choice; anything else behaves like "auto".
    """
    style = (value or DEFAULT_LOG_STYLE).strip().lower()
    if style == "always":
        return True
    if style == "never":
        return False
    return is_tty


def configure_logging(*, debug: bool, environ: Mapping[str, str] | None = None) -> None:
    """Configure the root logger once per process.

    Args:
        debug: Force DEBUG regardless of the environment
        environ: Environment to read, os.environ when None
    """
    env = os.environ if environ is None else environ
    level = logging.DEBUG if debug else parse_log_level(env.get(LOG_LEVEL_ENV))

    handler = logging.StreamHandler(sys.stderr)
    if should_style(env.get(LOG_STYLE_ENV), is_tty=sys.stderr.isatty()):
        handler.setFormatter(StyledLevelFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[handler])
