# topmark:header:start
#
#   project      : ConfigDocs
#   file         : formats.py
#   file_relpath : src/configdocs/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs `formats` command.

Lists the registered example-syntax formats, including strategies registered
by plugins imported before the command runs.
"""

from __future__ import annotations

import click

from configdocs.cli.cmd_common import get_console
from configdocs.constants import CONFIGDOCS_VERSION
from configdocs.formats import format_names, get_format
from configdocs.rendering.markdown import render_markdown_table


@click.command(
    name="formats",
    help="List the available example formats.",
)
@click.option(
    "--markdown",
    "as_markdown",
    is_flag=True,
    help="Print a Markdown table instead of plain text.",
)
def formats_command(*, as_markdown: bool = False) -> None:
    """List registered formats with their file extension and comment prefix."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    strategies = [get_format(name) for name in format_names()]

    if as_markdown:
        console.print("# Supported Formats\n")
        console.print(f"ConfigDocs version **{CONFIGDOCS_VERSION}** supports these formats:\n")
        rows = [
            [
                f"`{fmt.name}`",
                f"`.{fmt.extension}.md`",
                f"`{fmt.line_prefix.strip()}`",
                "yes" if fmt.nested_table_paths else "no",
            ]
            for fmt in strategies
        ]
        console.print(
            render_markdown_table(
                ["Format", "File Suffix", "Comment", "Dotted Sections"],
                rows,
                align={3: "center"},
            ),
            nl=False,
        )
        return

    width = max((len(fmt.name) for fmt in strategies), default=0)
    for fmt in strategies:
        name = console.styled(f"{fmt.name:<{width}}", bold=True)
        console.print(f"{name}  *.{fmt.extension}.md  (comments: {fmt.line_prefix.strip()})")
