# topmark:header:start
#
#   project      : ConfigDocs
#   file         : options.py
#   file_relpath : src/configdocs/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Common CLI option utilities for the ConfigDocs Click commands.

This module centralizes reusable options (verbosity, color, format selection)
and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from configdocs.cli.errors import ConfigDocsUsageError
from configdocs.config.logging import TRACE_LEVEL
from configdocs.formats import format_names

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level as an integer.

    Raises:
        ConfigDocsUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` select TRACE, two DEBUG, one INFO.
        One or more ``-q`` select ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ConfigDocsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and
        NO_COLOR environment variables, and finally enables color on a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option choosing a registered format strategy.

    The value is validated against the registry when the command runs, so
    strategies registered by plugins after import are accepted too.
    """
    return click.option(
        "--format",
        "format_name",
        type=str,
        default=None,
        help=(
            "Example syntax "
            f"({', '.join(format_names())}); "
            "defaults to CONFIGDOCS_FORMAT, [tool.configdocs] or 'toml'."
        ),
    )(f)


def show_types_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--show-types/--no-show-types`` flag."""
    return click.option(
        "--show-types/--no-show-types",
        "show_types",
        default=None,
        help="Emit a 'Type:' comment line for every field.",
    )(f)
