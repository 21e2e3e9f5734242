# topmark:header:start
#
#   project      : ConfigDocs
#   file         : cmd_common.py
#   file_relpath : src/configdocs/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Helpers shared by ConfigDocs subcommands.

Settings are loaded lazily once per invocation and cached on ``ctx.obj``;
library errors are translated into CLI errors carrying exit codes.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import click

from configdocs.cli.errors import ConfigDocsSchemaError, from_library_error
from configdocs.config.logging import get_logger
from configdocs.config.settings import Settings, load_settings
from configdocs.core.errors import ConfigDocsError
from configdocs.export import load_target
from configdocs.formats import get_format
from configdocs.schema.builder import build_schema
from configdocs.schema.model import RecordSchema
from configdocs.schema.registry import validate_schema

if TYPE_CHECKING:
    from configdocs.cli.console import ConsoleLike
    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.formats.base import FormatStrategy

logger: ConfigDocsLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console initialized by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_settings(ctx: click.Context) -> Settings:
    """Return the project settings, loading them on first use.

    Raises:
        ConfigDocsConfigError: If ``[tool.configdocs]`` is malformed.
    """
    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings")
    if settings is None:
        try:
            settings = load_settings()
        except ConfigDocsError as exc:
            raise from_library_error(exc) from exc
        ctx.obj["settings"] = settings
    return settings


def resolve_cli_format(name: str | None, settings: Settings) -> FormatStrategy:
    """Return the strategy for ``--format`` (or the settings' format).

    Raises:
        ConfigDocsUsageError: If the name is not a registered format.
    """
    try:
        return get_format(name or settings.format)
    except ConfigDocsError as exc:
        raise from_library_error(exc) from exc


def load_record(target: str) -> RecordSchema:
    """Import ``module:attribute`` and return its (registered) record schema.

    The attribute may be a dataclass (its schema is built by reflection) or a
    hand-written `RecordSchema` (validated and registered).

    Raises:
        ConfigDocsSchemaError: If the target cannot be imported or is not a record.
    """
    if ":" not in target:
        raise ConfigDocsSchemaError(f"Expected 'module:attribute', got '{target}'")
    try:
        obj = load_target(target)
    except (ImportError, AttributeError) as exc:
        raise ConfigDocsSchemaError(f"Cannot load '{target}': {exc}") from exc

    try:
        if isinstance(obj, RecordSchema):
            validate_schema(obj)
            return obj
        if isinstance(obj, type) and dataclasses.is_dataclass(obj):
            return build_schema(obj)
    except ConfigDocsError as exc:
        raise from_library_error(exc) from exc
    raise ConfigDocsSchemaError(f"'{target}' is neither a dataclass nor a RecordSchema")
