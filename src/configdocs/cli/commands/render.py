# topmark:header:start
#
#   project      : ConfigDocs
#   file         : render.py
#   file_relpath : src/configdocs/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs `render` command.

Renders the documentation of one record (``module:Class``) to stdout, or to a
file with ``--output``.
"""

from __future__ import annotations

from pathlib import Path

import click

from configdocs.cli.cmd_common import (
    get_console,
    get_settings,
    load_record,
    resolve_cli_format,
)
from configdocs.cli.errors import ConfigDocsIOError, from_library_error
from configdocs.cli.options import format_option, show_types_option
from configdocs.config.logging import get_logger
from configdocs.core.errors import ConfigDocsError
from configdocs.rendering import RenderOptions, render

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render the documentation of TARGET ('package.module:Class') as Markdown.",
)
@click.argument("target", metavar="TARGET")
@format_option
@click.option("--title", default=None, help="Document title (default: the record name).")
@show_types_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
def render_command(
    *,
    target: str,
    format_name: str | None,
    title: str | None,
    show_types: bool | None,
    output: Path | None,
) -> None:
    """Render one record's documentation.

    Args:
        target (str): ``module:attribute`` naming a dataclass or a `RecordSchema`.
        format_name (str | None): Format override.
        title (str | None): Title override.
        show_types (bool | None): Emit ``Type:`` comments (None: from settings).
        output (Path | None): Output file; stdout when None.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    settings = get_settings(ctx).merged(show_types=show_types)
    fmt = resolve_cli_format(format_name, settings)

    record = load_record(target)
    options = RenderOptions(format=fmt, title=title, show_types=settings.show_types)
    try:
        text = render(record, options)
    except ConfigDocsError as exc:
        raise from_library_error(exc) from exc

    if output is None:
        console.print(text, nl=False)
        return

    try:
        if output.parent != Path():
            output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigDocsIOError(f"Cannot write {output}: {exc}") from exc
    logger.info("Wrote %s", output)
    console.print(f"Generated documentation: {output}")
