# topmark:header:start
#
#   project      : ConfigDocs
#   file         : errors.py
#   file_relpath : src/configdocs/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Exceptions raised by the ConfigDocs library.

Schema errors are raised when a record is registered (never during rendering);
`UnsupportedTypeError` is the only error `render()` can raise for a validated
schema. The CLI maps these onto Click exceptions with dedicated exit codes
(see [`configdocs.cli.errors`][]).
"""

from __future__ import annotations

from collections.abc import Sequence


class ConfigDocsError(Exception):
    """Base class for all ConfigDocs errors."""


class ConfigError(ConfigDocsError):
    """Error for malformed ConfigDocs settings (e.g. a broken `pyproject.toml`)."""


class SchemaError(ConfigDocsError):
    """Base class for errors detected while registering a record schema."""


class CyclicSchemaError(SchemaError):
    """A record nests itself, directly or transitively.

    Attributes:
        cycle (tuple[str, ...]): Record names along the cycle; the first and last
            entries are the same record.
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle: tuple[str, ...] = tuple(cycle)
        super().__init__(f"Cyclic record nesting: {' -> '.join(self.cycle)}")


class DuplicateFieldError(SchemaError):
    """A record declares the same serialized key more than once."""

    def __init__(self, record: str, field: str) -> None:
        self.record = record
        self.field = field
        super().__init__(f"Record '{record}' declares field '{field}' more than once")


class DuplicateRecordError(SchemaError):
    """A different record is already registered under the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A different record named '{name}' is already registered")


class UnknownRecordError(SchemaError):
    """A nested reference (or a lookup) names a record that is not registered."""

    def __init__(self, name: str, *, referenced_by: str | None = None) -> None:
        self.name = name
        self.referenced_by = referenced_by
        if referenced_by:
            msg = f"Record '{referenced_by}' references unknown record '{name}'"
        else:
            msg = f"Unknown record: '{name}'"
        super().__init__(msg)


class UnsupportedTypeError(ConfigDocsError):
    """A field's type has no placeholder in the active format and no default.

    Attributes:
        type_summary (str): The type label that could not be rendered.
        field (str | None): The serialized field name (None when raised by a
            format strategy outside of a render call).
        record (str | None): The owning record's name.
        path (tuple[str, ...]): Dotted field path from the rendered root.
    """

    def __init__(
        self,
        type_summary: str,
        *,
        field: str | None = None,
        record: str | None = None,
        path: Sequence[str] = (),
        format_name: str | None = None,
    ) -> None:
        self.type_summary = type_summary
        self.field = field
        self.record = record
        self.path: tuple[str, ...] = tuple(path)
        self.format_name = format_name
        where = f" for field '{'.'.join(self.path) or field}'" if field else ""
        fmt = f" in format '{format_name}'" if format_name else ""
        super().__init__(f"No placeholder for type '{type_summary}'{fmt}{where} and no default")


class UnknownFormatError(ConfigDocsError):
    """No format strategy is registered under the requested name."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available: tuple[str, ...] = tuple(available)
        super().__init__(
            f"Unknown format '{name}' (available: {', '.join(self.available) or 'none'})"
        )
