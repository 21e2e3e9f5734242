# topmark:header:start
#
#   project      : ConfigDocs
#   file         : model.py
#   file_relpath : src/configdocs/schema/model.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Immutable schema model describing the shape of configuration records.

A [`RecordSchema`][configdocs.schema.model.RecordSchema] is an ordered list of
[`FieldDescriptor`][configdocs.schema.model.FieldDescriptor] entries. Nesting is
modelled as a *tagged reference*: a field's ``nested`` attribute holds the name
of another record, resolved through a
[`SchemaRegistry`][configdocs.schema.registry.SchemaRegistry]. Records never own
their nested records, which keeps the graph acyclic-checkable in one pass at
registration time.

Both types are frozen dataclasses; sequences passed at construction are
converted to tuples so a record cannot change after it is built.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from configdocs.core.errors import DuplicateFieldError


@dataclass(frozen=True)
class FieldDescriptor:
    """One configuration field.

    Attributes:
        name (str): Final serialized key (after any rename policy).
        type_summary (str): Human-readable type label, e.g. ``"string"``,
            ``"u16"``, ``"bool"`` or a nested record's name.
        doc (str | None): Optional documentation; may span multiple lines.
        default_repr (str | None): Pre-rendered default value, if any.
        nested (str | None): Name of the nested record when the field's value is
            itself a documented record.
    """

    name: str
    type_summary: str = ""
    doc: str | None = None
    default_repr: str | None = None
    nested: str | None = None

    @property
    def is_nested(self) -> bool:
        """Return True when the field refers to a nested record."""
        return self.nested is not None

    @property
    def doc_lines(self) -> tuple[str, ...]:
        """Return the documentation split into lines (empty when undocumented)."""
        if not self.doc:
            return ()
        return tuple(self.doc.splitlines())


@dataclass(frozen=True)
class RecordSchema:
    """One configuration record type.

    Attributes:
        name (str): Record identifier, used for headings and exported file names.
        fields (tuple[FieldDescriptor, ...]): Fields in declaration order.
        doc (str | None): Optional top-level description of the record.
    """

    name: str
    fields: tuple[FieldDescriptor, ...] = field(default_factory=tuple)
    doc: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable (lists from hand-written schemas) but store a tuple.
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> tuple[str, ...]:
        """Return the serialized field names in declaration order."""
        return tuple(f.name for f in self.fields)

    @property
    def scalar_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return the non-nested fields in declaration order."""
        return tuple(f for f in self.fields if not f.is_nested)

    @property
    def nested_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return the nested-record fields in declaration order."""
        return tuple(f for f in self.fields if f.is_nested)

    @property
    def nested_names(self) -> tuple[str, ...]:
        """Return the names of directly nested records (may repeat)."""
        return tuple(f.nested for f in self.fields if f.nested is not None)


def fields_of(record: RecordSchema) -> tuple[FieldDescriptor, ...]:
    """Return the fields of ``record`` in declaration order."""
    return record.fields


def doc_of(record: RecordSchema) -> str | None:
    """Return the documentation of ``record``, if any."""
    return record.doc


def find_duplicate(names: Iterable[str]) -> str | None:
    """Return the first name that occurs twice in ``names``, else None."""
    seen: set[str] = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None


def validate_record(record: RecordSchema) -> None:
    """Run the record-local checks that do not need a registry.

    Args:
        record (RecordSchema): The record to check.

    Raises:
        DuplicateFieldError: If two fields share the same serialized name.
    """
    duplicate = find_duplicate(record.field_names)
    if duplicate is not None:
        raise DuplicateFieldError(record.name, duplicate)
