# topmark:header:start
#
#   project      : ConfigDocs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""CLI test helpers for running ConfigDocs in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so settings discovery (the nearest
``pyproject.toml``) and relative output paths resolve against the temporary
test directory rather than the repository.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from configdocs.cli.exit_codes import ExitCode
from configdocs.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_MODULE = "tests.sample_app"


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for
            the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["render", "tests.sample_app:Server"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["export", "tests.sample_app"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, obj={})
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that neither read settings nor write files
    (``--help``, ``version``, ``formats``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={})


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``, showing output on failure."""
    assert result.exit_code == code, result.output


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert_exit(result, ExitCode.USAGE_ERROR)
