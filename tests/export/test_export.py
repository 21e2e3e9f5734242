# topmark:header:start
#
#   project      : ConfigDocs
#   file         : test_export.py
#   file_relpath : tests/export/test_export.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Tests for documentation file export (`configdocs.export`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from configdocs.constants import FORMAT_ENV
from configdocs.export import (
    doc_filename,
    export_classes,
    export_record,
    export_registered,
    load_target,
)
from configdocs.formats import get_format
from configdocs.rendering import RenderOptions, render
from configdocs.schema.builder import build_schema
from tests import sample_app
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from pathlib import Path

    from configdocs.schema.registry import SchemaRegistry


def test_doc_filename() -> None:
    record = sample_app.PLUGIN

    assert doc_filename(record, get_format("toml")) == "Plugin.toml.md"
    assert doc_filename(record, get_format("ini")) == "Plugin.ini.md"


@mark_integration
def test_export_record_creates_directory(tmp_path: Path, registry: SchemaRegistry) -> None:
    record = build_schema(sample_app.Server, registry=registry)
    out = tmp_path / "nested" / "docs"

    path = export_record(record, output_dir=out, registry=registry)

    assert path == out / "Server.toml.md"
    assert path.read_text(encoding="utf-8") == render(record, registry=registry)


@mark_integration
def test_export_format_from_environment(
    tmp_path: Path, registry: SchemaRegistry, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(FORMAT_ENV, "ini")
    record = build_schema(sample_app.Server, registry=registry)

    path = export_record(record, output_dir=tmp_path, registry=registry)

    assert path.name == "Server.ini.md"
    assert "; bind address" in path.read_text(encoding="utf-8")


@mark_integration
def test_export_defaults_to_docs_directory(
    tmp_path: Path, registry: SchemaRegistry, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    record = build_schema(sample_app.Server, registry=registry)

    path = export_record(record, registry=registry)

    assert (tmp_path / path).is_file()
    assert path.parts[0] == "docs"


@mark_integration
def test_export_passes_render_options(tmp_path: Path, registry: SchemaRegistry) -> None:
    record = build_schema(sample_app.Server, registry=registry)
    options = RenderOptions(title="Server Configuration", show_types=True)

    path = export_record(record, output_dir=tmp_path, options=options, registry=registry)
    text = path.read_text(encoding="utf-8")

    assert text.startswith("# Server Configuration\n")
    assert "# Type: integer" in text


@mark_integration
def test_export_registered_writes_flagged_records(
    tmp_path: Path, registry: SchemaRegistry
) -> None:
    build_schema(sample_app.Server, registry=registry)
    build_schema(sample_app.Worker, registry=registry)

    written = export_registered(output_dir=tmp_path, registry=registry)

    assert [p.name for p in written] == ["Server.toml.md"]


@mark_integration
def test_export_classes_only_flagged(tmp_path: Path, registry: SchemaRegistry) -> None:
    classes = [sample_app.Server, sample_app.Worker]

    flagged = export_classes(classes, output_dir=tmp_path, registry=registry, only_flagged=True)
    everything = export_classes(classes, output_dir=tmp_path, registry=registry)

    assert [p.name for p in flagged] == ["Server.toml.md"]
    assert [p.name for p in everything] == ["Server.toml.md", "Worker.toml.md"]
    worker = (tmp_path / "Worker.toml.md").read_text(encoding="utf-8")
    assert "max-jobs = 4" in worker
    assert 'queue-name = ""' in worker


def test_load_target() -> None:
    assert load_target("tests.sample_app:Server") is sample_app.Server
    assert load_target("tests.sample_app") is sample_app
    assert load_target("tests.sample_app:Server.__name__") == "Server"

    with pytest.raises(AttributeError):
        load_target("tests.sample_app:Missing")
    with pytest.raises(ImportError):
        load_target("tests.no_such_module:Server")
