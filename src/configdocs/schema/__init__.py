# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Schema model, registry, rename policies and dataclass reflection.

Most code only needs the names re-exported here:

- [`RecordSchema`][configdocs.schema.model.RecordSchema] /
  [`FieldDescriptor`][configdocs.schema.model.FieldDescriptor]: the immutable model;
- [`SchemaRegistry`][configdocs.schema.registry.SchemaRegistry] and
  [`validate_schema`][configdocs.schema.registry.validate_schema]: validated registration;
- [`config_docs`][configdocs.schema.builder.config_docs],
  [`doc_field`][configdocs.schema.builder.doc_field] and
  [`build_schema`][configdocs.schema.builder.build_schema]: schemas from dataclasses.
"""

from __future__ import annotations

from configdocs.schema.builder import build_schema, config_docs, decorated_classes, doc_field
from configdocs.schema.model import (
    FieldDescriptor,
    RecordSchema,
    doc_of,
    fields_of,
    validate_record,
)
from configdocs.schema.naming import RenamePolicy, apply_rename
from configdocs.schema.registry import SchemaRegistry, get_default_registry, validate_schema

__all__ = [
    "FieldDescriptor",
    "RecordSchema",
    "RenamePolicy",
    "SchemaRegistry",
    "apply_rename",
    "build_schema",
    "config_docs",
    "decorated_classes",
    "doc_field",
    "doc_of",
    "fields_of",
    "get_default_registry",
    "validate_record",
    "validate_schema",
]
