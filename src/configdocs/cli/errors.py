# topmark:header:start
#
#   project      : ConfigDocs
#   file         : errors.py
#   file_relpath : src/configdocs/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Exceptions for the ConfigDocs CLI.

Usage:
    Commands translate library errors ([`configdocs.core.errors`][]) into these
    exceptions with [`from_library_error`][configdocs.cli.errors.from_library_error];
    Click prints them and exits with the carried exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from configdocs.cli.exit_codes import ExitCode
from configdocs.core.errors import (
    ConfigDocsError,
    ConfigError,
    SchemaError,
    UnknownFormatError,
    UnsupportedTypeError,
)


class ConfigDocsCliError(click.ClickException):
    """Base class for all ConfigDocs CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ConfigDocsUsageError(ConfigDocsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ConfigDocsSchemaError(ConfigDocsCliError):
    """Error for invalid or unloadable record schemas."""

    exit_code = ExitCode.SCHEMA_ERROR


class ConfigDocsUnsupportedTypeError(ConfigDocsCliError):
    """Error for fields the chosen format cannot render."""

    exit_code = ExitCode.UNSUPPORTED_TYPE


class ConfigDocsConfigError(ConfigDocsCliError):
    """Error for malformed ConfigDocs settings."""

    exit_code = ExitCode.CONFIG_ERROR


class ConfigDocsIOError(ConfigDocsCliError):
    """Error for failures writing documentation files."""

    exit_code = ExitCode.IO_ERROR


def from_library_error(exc: ConfigDocsError) -> ConfigDocsCliError:
    """Map a library error onto the CLI error carrying the matching exit code."""
    if isinstance(exc, UnsupportedTypeError):
        return ConfigDocsUnsupportedTypeError(str(exc))
    if isinstance(exc, UnknownFormatError):
        return ConfigDocsUsageError(str(exc))
    if isinstance(exc, SchemaError):
        return ConfigDocsSchemaError(str(exc))
    if isinstance(exc, ConfigError):
        return ConfigDocsConfigError(str(exc))
    return ConfigDocsCliError(str(exc))
