# topmark:header:start
#
#   project      : ConfigDocs
#   file         : export.py
#   file_relpath : src/configdocs/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs `export` command.

Imports the given modules, then writes one documentation file per
``@config_docs`` dataclass defined in them. By default only classes decorated
with ``export=True`` are written; ``--all`` writes every decorated class.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from configdocs.cli.cmd_common import get_console, get_settings, resolve_cli_format
from configdocs.cli.errors import (
    ConfigDocsIOError,
    ConfigDocsSchemaError,
    from_library_error,
)
from configdocs.cli.options import format_option, show_types_option
from configdocs.config.logging import get_logger
from configdocs.core.errors import ConfigDocsError
from configdocs.export import export_classes, load_target
from configdocs.rendering import RenderOptions
from configdocs.schema.builder import decorated_classes

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def _classes_in(modules: Sequence[str]) -> list[type]:
    """Return decorated classes defined in (or below) ``modules``, in decoration order."""
    selected: list[type] = []
    for cls in decorated_classes():
        owner = cls.__module__
        if any(owner == m or owner.startswith(f"{m}.") for m in modules):
            selected.append(cls)
    return selected


@click.command(
    name="export",
    help="Write documentation files for the config classes of MODULES.",
    epilog="""
Each exported record is written to <output-dir>/<RecordName>.<format>.md.
The output directory defaults to CONFIGDOCS_OUTPUT_DIR, [tool.configdocs] output-dir or 'docs'.
""",
)
@click.argument("modules", nargs=-1, required=True, metavar="MODULES...")
@format_option
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the documentation files to.",
)
@show_types_option
@click.option(
    "--all",
    "export_all",
    is_flag=True,
    help="Export every @config_docs class, not only those marked export=True.",
)
def export_command(
    *,
    modules: tuple[str, ...],
    format_name: str | None,
    output_dir: Path | None,
    show_types: bool | None,
    export_all: bool,
) -> None:
    """Export documentation files for the decorated classes of ``modules``.

    Args:
        modules (tuple[str, ...]): Dotted module names to import.
        format_name (str | None): Format override.
        output_dir (Path | None): Output directory override.
        show_types (bool | None): Emit ``Type:`` comments (None: from settings).
        export_all (bool): Ignore the ``export`` flag of the decorator.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    settings = get_settings(ctx).merged(output_dir=output_dir, show_types=show_types)
    fmt = resolve_cli_format(format_name, settings)

    for name in modules:
        try:
            load_target(name)
        except ImportError as exc:
            raise ConfigDocsSchemaError(f"Cannot import '{name}': {exc}") from exc

    classes = _classes_in(modules)
    if not classes:
        console.warn(f"No @config_docs classes found in: {', '.join(modules)}")
        return

    options = RenderOptions(format=fmt, show_types=settings.show_types)
    try:
        written = export_classes(
            classes,
            fmt=fmt,
            output_dir=settings.output_dir,
            options=options,
            only_flagged=not export_all,
        )
    except ConfigDocsError as exc:
        raise from_library_error(exc) from exc
    except OSError as exc:
        raise ConfigDocsIOError(f"Cannot write documentation: {exc}") from exc

    if not written:
        console.warn("No classes are marked for export; use --all to export every class.")
        return
    for path in written:
        console.print(f"Generated documentation: {path}")
