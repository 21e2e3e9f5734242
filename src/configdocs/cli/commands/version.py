# topmark:header:start
#
#   project      : ConfigDocs
#   file         : version.py
#   file_relpath : src/configdocs/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs `version` command.

Prints the current ConfigDocs version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from configdocs.cli.cmd_common import get_console
from configdocs.constants import CONFIGDOCS_VERSION


@click.command(
    name="version",
    help="Show the current version of ConfigDocs.",
)
@click.option(
    "--markdown",
    "as_markdown",
    is_flag=True,
    help="Print the version as a Markdown snippet.",
)
def version_command(*, as_markdown: bool = False) -> None:
    """Show the current version of ConfigDocs.

    Args:
        as_markdown (bool): Render as Markdown instead of plain text.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    if as_markdown:
        console.print("# ConfigDocs Version\n")
        console.print(f"**ConfigDocs version: {CONFIGDOCS_VERSION}**")
    else:
        console.print(console.styled(CONFIGDOCS_VERSION, bold=True))
