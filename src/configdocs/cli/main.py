# topmark:header:start
#
#   project      : ConfigDocs
#   file         : main.py
#   file_relpath : src/configdocs/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs command-line interface.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from configdocs.cli.commands.export import export_command
from configdocs.cli.commands.formats import formats_command
from configdocs.cli.commands.render import render_command
from configdocs.cli.commands.version import version_command
from configdocs.cli.console import ClickConsole
from configdocs.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from configdocs.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from configdocs.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # CONFIGDOCS_LOG_LEVEL wins over -v/-q.
    level = resolve_env_log_level() or level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(
        cli_mode=effective_color_mode, stdout_isatty=sys.stdout.isatty()
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ConfigDocs: Markdown documentation for configuration records.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ConfigDocs CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'configdocs render package.module:Config' to document a record.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(formats_command)

cli.add_command(render_command)

cli.add_command(export_command)

if __name__ == "__main__":
    cli()
