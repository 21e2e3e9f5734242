# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs package.

ConfigDocs renders Markdown reference documentation for configuration records:
field names, types, documentation and defaults, with examples in a
table-structured syntax (TOML by default). It exposes a small typed API and a
Click CLI.

```python
from dataclasses import dataclass

from configdocs import build_schema, config_docs, doc_field, render


@config_docs
@dataclass
class Logging:
    level: str = doc_field("info", doc="log level")


@config_docs(export=True)
@dataclass
class Server:
    address: str = doc_field("127.0.0.1", doc="bind address")
    logging: Logging = doc_field(default_factory=Logging)


print(render(build_schema(Server)))
```
"""

from __future__ import annotations

from configdocs.core.errors import (
    ConfigDocsError,
    CyclicSchemaError,
    DuplicateFieldError,
    DuplicateRecordError,
    SchemaError,
    UnknownFormatError,
    UnknownRecordError,
    UnsupportedTypeError,
)
from configdocs.export import doc_filename, export_classes, export_record, export_registered
from configdocs.formats import FormatStrategy, get_format, register_format, resolve_format
from configdocs.rendering import RenderOptions, render
from configdocs.schema import (
    FieldDescriptor,
    RecordSchema,
    RenamePolicy,
    SchemaRegistry,
    build_schema,
    config_docs,
    doc_field,
    doc_of,
    fields_of,
    get_default_registry,
    validate_schema,
)

__all__ = [
    "ConfigDocsError",
    "CyclicSchemaError",
    "DuplicateFieldError",
    "DuplicateRecordError",
    "FieldDescriptor",
    "FormatStrategy",
    "RecordSchema",
    "RenamePolicy",
    "RenderOptions",
    "SchemaError",
    "SchemaRegistry",
    "UnknownFormatError",
    "UnknownRecordError",
    "UnsupportedTypeError",
    "build_schema",
    "config_docs",
    "doc_field",
    "doc_filename",
    "doc_of",
    "export_classes",
    "export_record",
    "export_registered",
    "fields_of",
    "get_default_registry",
    "get_format",
    "register_format",
    "render",
    "resolve_format",
    "validate_schema",
]
