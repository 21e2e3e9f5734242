# topmark:header:start
#
#   project      : ConfigDocs
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""CLI tests: `render` command output, options and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from configdocs.cli.exit_codes import ExitCode
from configdocs.constants import FORMAT_ENV
from configdocs.rendering import render
from configdocs.schema.builder import build_schema
from tests import sample_app
from tests.cli.conftest import (
    SAMPLE_MODULE,
    assert_exit,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

SERVER = f"{SAMPLE_MODULE}:Server"


@mark_cli
def test_render_dataclass_to_stdout(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", SERVER])

    assert_SUCCESS(result)
    assert result.output == render(build_schema(sample_app.Server))
    assert result.output.startswith("# Server\n\nHTTP server settings.\n")
    assert "## Logging" in result.output


@mark_cli
def test_render_hand_written_schema(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", f"{SAMPLE_MODULE}:PLUGIN"])

    assert_SUCCESS(result)
    assert "# Plugin identifier.\nname = \"\"" in result.output
    assert "# Default: true\nenabled = true" in result.output


@mark_cli
def test_render_title_format_and_types(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["render", SERVER, "--format", "INI", "--title", "Server Configuration", "--show-types"],
    )

    assert_SUCCESS(result)
    assert result.output.startswith("# Server Configuration\n")
    assert "```ini" in result.output
    assert "; Type: integer\nport = 8080" in result.output


@mark_cli
def test_render_format_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(FORMAT_ENV, "ini")

    result = run_cli_in(tmp_path, ["render", SERVER])

    assert_SUCCESS(result)
    assert "```ini" in result.output


@mark_cli
def test_render_settings_from_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.configdocs]\nformat = "ini"\nshow-types = true\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["render", SERVER, "--no-show-types"])

    assert_SUCCESS(result)
    assert "```ini" in result.output
    assert "Type:" not in result.output


@mark_cli
def test_render_to_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", SERVER, "-o", "out/server.md"])

    assert_SUCCESS(result)
    written = (tmp_path / "out" / "server.md").read_text(encoding="utf-8")
    assert written == render(build_schema(sample_app.Server))
    assert "Generated documentation: out/server.md" in result.output


@mark_cli
def test_render_unknown_format_is_a_usage_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", SERVER, "--format", "xml"])

    assert_USAGE_ERROR(result)
    assert "Unknown format 'xml'" in result.output


@mark_cli
def test_render_unsupported_type(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", f"{SAMPLE_MODULE}:BROKEN"])

    assert_exit(result, ExitCode.UNSUPPORTED_TYPE)
    assert "timeout" in result.output
    assert "```" not in result.output


@mark_cli
def test_render_cyclic_schema(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", f"{SAMPLE_MODULE}:LOOP"])

    assert_exit(result, ExitCode.SCHEMA_ERROR)
    assert "Loop -> Loop" in result.output


@mark_cli
def test_render_bad_targets(tmp_path: Path) -> None:
    for target in (
        SAMPLE_MODULE,
        f"{SAMPLE_MODULE}:Missing",
        "tests.no_such_module:Server",
        f"{SAMPLE_MODULE}:NOT_A_RECORD",
    ):
        result = run_cli_in(tmp_path, ["render", target])
        assert_exit(result, ExitCode.SCHEMA_ERROR)


@mark_cli
def test_render_malformed_settings(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.configdocs\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["render", SERVER])

    assert_exit(result, ExitCode.CONFIG_ERROR)
