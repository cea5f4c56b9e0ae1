import logging
from pathlib import Path

import click

from git_prompt.context import PromptContext, create_context
from git_prompt.gateway.git.types import GitRepoError
from git_prompt.log_config import configure_logging
from git_prompt.pipeline import build_status_line
from git_prompt.render.color import RenderMode

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def select_render_mode(*, color: bool, zsh: bool) -> RenderMode:
    """Pick the output encoding from the command-line flags.

    --zsh wins over --color; with neither the line is plain text.
    """
    if zsh:
        return RenderMode.PROMPT_ESCAPE
    if color:
        return RenderMode.TERMINAL
    return RenderMode.PLAIN


@click.command(name="git-prompt", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-prompt")
@click.option(
    "--git-dir",
    "git_dir",
    metavar="dir",
    type=click.Path(path_type=Path),
    default=None,
    help="git directory to analyze",
)
@click.option("--color", is_flag=True, help="enable color")
@click.option("--zsh", is_flag=True, help="enable zsh encoded color")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, git_dir: Path | None, color: bool, zsh: bool, debug: bool) -> None:
    """Print a one-line summary of a git working tree for shell prompts.

    Output looks like "[main ↑1 ↓2 +1 ~0 -0 | +0 ~3 -1]". Prints nothing when
    the directory is not a usable repository.
    """
    configure_logging(debug=debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    prompt_ctx: PromptContext = ctx.obj

    mode = select_render_mode(color=color, zsh=zsh)
    path = git_dir if git_dir is not None else Path(".")

    try:
        line = build_status_line(prompt_ctx.git, path, mode)
    except GitRepoError as e:
        # Prompt embedding: print nothing rather than a broken line
        logger.debug("%s", e)
        return

    click.echo(line, color=mode is RenderMode.TERMINAL)
