# topmark:header:start
#
#   project      : ConfigDocs
#   file         : test_builder.py
#   file_relpath : tests/schema/test_builder.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Tests for reflection-based schema construction (`configdocs.schema.builder`).

Dataclasses are declared at module level so that their (string) annotations
resolve against this module's globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any, Literal, Optional

import pytest
import tomlkit

from configdocs.core.errors import CyclicSchemaError, DuplicateFieldError, DuplicateRecordError
from configdocs.rendering import render
from configdocs.schema.builder import (
    build_schema,
    config_docs,
    decorated_classes,
    doc_field,
    meta_of,
    type_label,
)
from configdocs.schema.naming import RenamePolicy
from tests.conftest import parametrize

if TYPE_CHECKING:
    from configdocs.schema.registry import SchemaRegistry


class Color(str, Enum):
    RED = "red"
    GREEN = "green"


class Duration:
    def __init__(self, seconds: int) -> None:
        self.seconds = seconds

    def __repr__(self) -> str:
        return f"Duration({self.seconds})"


@config_docs
@dataclass
class Rotation:
    """Log file rotation."""

    max_files: int = doc_field(7, doc="Files kept.")


@config_docs
@dataclass
class Logging:
    level: str = doc_field("info", doc="log level")
    rotation: Rotation = doc_field(default_factory=Rotation)


@config_docs(export=True)
@dataclass
class Server:
    """HTTP server settings."""

    address: str = doc_field("127.0.0.1", doc="bind address")
    port: int = 8080
    logging: Logging = doc_field(default_factory=Logging, doc="Where logs go.")


@config_docs(rename_all="camelCase", name="Tuning")
@dataclass
class TuningOptions:
    max_open_files: int = 1024
    read_timeout: Optional[float] = None  # noqa: UP045
    cache_dir: Path = Path("/var/cache/app")
    color: Color = Color.GREEN
    tags: list[str] = field(default_factory=lambda: ["a", "b"])
    limits: dict[str, int] = field(default_factory=lambda: {"cpu": 2})
    token: str = doc_field("", skip=True)
    backoff: Duration = doc_field(default_factory=lambda: Duration(5), type_label="duration")
    legacy_name: str = doc_field("x", rename="legacy")


@dataclass
class Node:
    child: Node | None = None


@dataclass
class Ping:
    pong: Pong | None = None


@dataclass
class Pong:
    ping: Ping | None = None


@dataclass
class Clash:
    first: int = doc_field(1, rename="value")
    second: int = doc_field(2, rename="value")


@dataclass
class Opaque:
    token: bytes = b"abc"
    ratio: Decimal = Decimal("0.5")


@config_docs(name="FileLogging")
@dataclass
class FileLogging:
    path: str = "app.log"


@config_docs(name="FileLogging")
@dataclass
class SyslogLogging:
    facility: str = "daemon"


@dataclass
class FileApp:
    logging: FileLogging = field(default_factory=FileLogging)


@dataclass
class SyslogApp:
    logging: SyslogLogging = field(default_factory=SyslogLogging)


@dataclass
class BothLoggers:
    file: FileLogging = field(default_factory=FileLogging)
    syslog: SyslogLogging = field(default_factory=SyslogLogging)


def test_build_schema_reflects_fields_in_declaration_order(registry: SchemaRegistry) -> None:
    record = build_schema(Server, registry=registry)

    assert record.name == "Server"
    assert record.doc == "HTTP server settings."
    assert record.field_names == ("address", "port", "logging")

    address, port, logging = record.fields
    assert address.type_summary == "string"
    assert address.doc == "bind address"
    assert address.default_repr == '"127.0.0.1"'
    assert port.doc is None
    assert port.default_repr == "8080"
    assert logging.nested == "Logging"
    assert logging.doc == "Where logs go."
    assert logging.default_repr is None


def test_nested_records_are_registered_in_the_same_batch(registry: SchemaRegistry) -> None:
    build_schema(Server, registry=registry)

    assert registry.names() == ("Logging", "Rotation", "Server")
    assert registry.resolve("Logging").nested_names == ("Rotation",)
    assert registry.resolve("Rotation").doc == "Log file rotation."


def test_dataclass_generated_docstring_is_ignored(registry: SchemaRegistry) -> None:
    build_schema(Server, registry=registry)

    assert registry.resolve("Logging").doc is None


def test_export_flag_is_recorded(registry: SchemaRegistry) -> None:
    build_schema(Server, registry=registry)
    build_schema(Server, registry=registry)

    assert registry.exported_names() == ("Server",)


def test_rename_policy_overrides_and_skips(registry: SchemaRegistry) -> None:
    record = build_schema(TuningOptions, registry=registry)

    assert record.name == "Tuning"
    assert record.field_names == (
        "maxOpenFiles",
        "readTimeout",
        "cacheDir",
        "color",
        "tags",
        "limits",
        "backoff",
        "legacy",
    )


def test_defaults_are_rendered_as_toml_literals(registry: SchemaRegistry) -> None:
    record = build_schema(TuningOptions, registry=registry)
    defaults = {f.name: f.default_repr for f in record.fields}

    assert defaults["maxOpenFiles"] == "1024"
    assert defaults["readTimeout"] is None
    assert defaults["cacheDir"] == '"/var/cache/app"'
    assert defaults["color"] == '"green"'
    assert defaults["tags"] == '["a", "b"]'


def test_unrenderable_default_is_quoted_as_string(
    registry: SchemaRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("WARNING")

    record = build_schema(TuningOptions, registry=registry)
    backoff = next(f for f in record.fields if f.name == "backoff")

    assert backoff.type_summary == "duration"
    assert backoff.default_repr == '"Duration(5)"'
    assert any("backoff" in r.getMessage() for r in caplog.records)


def test_unrenderable_defaults_keep_the_example_valid_toml(registry: SchemaRegistry) -> None:
    record = build_schema(Opaque, registry=registry)
    text = render(record, registry=registry)
    block = text.split("```toml\n", 1)[1].split("```", 1)[0]

    assert tomlkit.parse(block).unwrap() == {"token": "b'abc'", "ratio": "0.5"}


def test_type_labels_of_reflected_fields(registry: SchemaRegistry) -> None:
    record = build_schema(TuningOptions, registry=registry)
    labels = {f.name: f.type_summary for f in record.fields}

    assert labels == {
        "maxOpenFiles": "integer",
        "readTimeout": "float",
        "cacheDir": "path",
        "color": "string",
        "tags": "array",
        "limits": "table",
        "backoff": "duration",
        "legacy": "string",
    }


def test_self_nesting_is_rejected(registry: SchemaRegistry) -> None:
    with pytest.raises(CyclicSchemaError) as excinfo:
        build_schema(Node, registry=registry)

    assert excinfo.value.cycle == ("Node", "Node")
    assert len(registry) == 0


def test_mutual_nesting_is_rejected(registry: SchemaRegistry) -> None:
    with pytest.raises(CyclicSchemaError) as excinfo:
        build_schema(Ping, registry=registry)

    assert excinfo.value.cycle == ("Ping", "Pong", "Ping")


def test_renames_colliding_on_one_key_are_rejected(registry: SchemaRegistry) -> None:
    with pytest.raises(DuplicateFieldError) as excinfo:
        build_schema(Clash, registry=registry)

    assert excinfo.value.field == "value"


def test_same_class_can_be_built_twice(registry: SchemaRegistry) -> None:
    first = build_schema(FileApp, registry=registry)

    assert build_schema(FileApp, registry=registry) == first
    assert registry.names() == ("FileApp", "FileLogging")


def test_other_class_under_a_registered_name_is_rejected(registry: SchemaRegistry) -> None:
    build_schema(FileApp, registry=registry)

    with pytest.raises(DuplicateRecordError) as excinfo:
        build_schema(SyslogApp, registry=registry)

    assert excinfo.value.name == "FileLogging"
    assert registry.resolve("FileLogging").field_names == ("path",)
    assert "SyslogApp" not in registry


def test_two_classes_sharing_a_name_in_one_tree_are_rejected(registry: SchemaRegistry) -> None:
    with pytest.raises(DuplicateRecordError) as excinfo:
        build_schema(BothLoggers, registry=registry)

    assert excinfo.value.name == "FileLogging"
    assert len(registry) == 0


def test_build_schema_requires_a_dataclass(registry: SchemaRegistry) -> None:
    with pytest.raises(TypeError):
        build_schema(Duration, registry=registry)


def test_config_docs_requires_a_dataclass() -> None:
    with pytest.raises(TypeError):
        config_docs(Duration)


def test_decorator_metadata() -> None:
    assert meta_of(Server).export is True
    assert meta_of(TuningOptions).rename_all is RenamePolicy.CAMEL_CASE
    assert meta_of(TuningOptions).name == "Tuning"
    assert meta_of(Node).name == "Node"
    assert meta_of(Node).export is False
    assert {Rotation, Logging, Server, TuningOptions} <= set(decorated_classes())
    assert Node not in decorated_classes()


@parametrize(
    "hint, expected",
    [
        (str, "string"),
        (int, "integer"),
        (float, "float"),
        (bool, "bool"),
        (datetime, "datetime"),
        (Optional[int], "integer"),  # noqa: UP045
        (int | None, "integer"),
        (Annotated[str, "meta"], "string"),
        (Literal["a", "b"], "string"),
        (Literal[1, "a"], "literal"),
        (list[str], "array"),
        (tuple[int, ...], "array"),
        (frozenset[str], "array"),
        (dict[str, Any], "table"),
        (Path, "path"),
        (Color, "string"),
        (Duration, "Duration"),
    ],
)
def test_type_label(hint: Any, expected: str) -> None:
    assert type_label(hint) == expected
