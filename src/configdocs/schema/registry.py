# topmark:header:start
#
#   project      : ConfigDocs
#   file         : registry.py
#   file_relpath : src/configdocs/schema/registry.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Registry of record schemas, indexed by record name.

The registry is the arena that [`FieldDescriptor.nested`][configdocs.schema.model.FieldDescriptor]
references resolve against. Registration is where the schema is validated:

* duplicate serialized field names within a record (`DuplicateFieldError`);
* nested references to records that are neither registered nor part of the
  same batch (`UnknownRecordError`);
* records nesting themselves directly or transitively (`CyclicSchemaError`);
* a *different* record registered under a name already in use
  (`DuplicateRecordError`). Registering an equal record again is a no-op.

A batch is validated as a whole before anything is stored, so a failing
registration leaves the registry unchanged. Records referencing each other can
therefore be registered together in any order.

Notes:
    * All public views are snapshots (`MappingProxyType` / tuples).
    * Mutation is guarded by an `RLock`; the process-wide default registry is
      append-only in practice and safe to read from concurrent render calls.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from configdocs.config.logging import get_logger
from configdocs.core.errors import (
    CyclicSchemaError,
    DuplicateRecordError,
    UnknownRecordError,
)
from configdocs.schema.model import validate_record

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.schema.model import RecordSchema

logger: ConfigDocsLogger = get_logger(__name__)


class SchemaRegistry:
    """Name-indexed, validated collection of `RecordSchema` instances."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._records: dict[str, RecordSchema] = {}
        self._exported: set[str] = set()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> tuple[str, ...]:
        """Return all registered record names (sorted)."""
        with self._lock:
            return tuple(sorted(self._records))

    def get(self, name: str) -> RecordSchema | None:
        """Return the record registered under ``name``, or None."""
        with self._lock:
            return self._records.get(name)

    def resolve(self, name: str) -> RecordSchema:
        """Return the record registered under ``name``.

        Raises:
            UnknownRecordError: If no record has that name.
        """
        record = self.get(name)
        if record is None:
            raise UnknownRecordError(name)
        return record

    def as_mapping(self) -> Mapping[str, RecordSchema]:
        """Return a read-only snapshot mapping of name -> record."""
        with self._lock:
            return MappingProxyType(dict(self._records))

    def register(self, *records: RecordSchema) -> None:
        """Validate and register ``records`` as one batch.

        Args:
            *records (RecordSchema): Records to add. They may reference each other
                and any record already registered.

        Raises:
            DuplicateFieldError: If a record repeats a serialized field name.
            DuplicateRecordError: If a different record already uses a name.
            UnknownRecordError: If a nested reference cannot be resolved.
            CyclicSchemaError: If a record nests itself directly or transitively.
        """
        with self._lock:
            batch: dict[str, RecordSchema] = {}
            for record in records:
                validate_record(record)
                existing = self._records.get(record.name) or batch.get(record.name)
                if existing is not None and existing != record:
                    raise DuplicateRecordError(record.name)
                batch[record.name] = record

            new = {name: rec for name, rec in batch.items() if name not in self._records}
            if not new:
                logger.trace("Nothing new to register: %s", ", ".join(batch))
                return

            combined: dict[str, RecordSchema] = {**self._records, **new}
            for record in new.values():
                for ref in record.nested_names:
                    if ref not in combined:
                        raise UnknownRecordError(ref, referenced_by=record.name)
            for name in new:
                _check_acyclic(name, combined)

            self._records.update(new)
            logger.debug("Registered record(s): %s", ", ".join(new))

    def unregister(self, name: str) -> bool:
        """Remove a record by name; intended for test scaffolding.

        Returns:
            bool: True if the record existed and was removed.
        """
        with self._lock:
            self._exported.discard(name)
            return self._records.pop(name, None) is not None

    def mark_exported(self, name: str) -> None:
        """Flag a registered record for file export.

        Raises:
            UnknownRecordError: If the record is not registered.
        """
        with self._lock:
            if name not in self._records:
                raise UnknownRecordError(name)
            self._exported.add(name)

    def exported_names(self) -> tuple[str, ...]:
        """Return the names of records flagged for export (sorted)."""
        with self._lock:
            return tuple(sorted(self._exported))

    def clear(self) -> None:
        """Drop every record and export flag."""
        with self._lock:
            self._records.clear()
            self._exported.clear()


def _check_acyclic(start: str, records: Mapping[str, RecordSchema]) -> None:
    """Depth-first walk from ``start`` raising on the first back edge."""
    done: set[str] = set()
    stack: list[str] = []

    def visit(name: str) -> None:
        if name in stack:
            raise CyclicSchemaError([*stack[stack.index(name) :], name])
        if name in done:
            return
        stack.append(name)
        for ref in records[name].nested_names:
            visit(ref)
        stack.pop()
        done.add(name)

    visit(start)


_default_registry = SchemaRegistry()


def get_default_registry() -> SchemaRegistry:
    """Return the process-wide schema registry."""
    return _default_registry


def validate_schema(*records: RecordSchema, registry: SchemaRegistry | None = None) -> None:
    """Validate and register ``records`` (the schema-validation entry point).

    Args:
        *records (RecordSchema): Records to validate and register together.
        registry (SchemaRegistry | None): Target registry; defaults to the
            process-wide registry.
    """
    if registry is None:
        registry = _default_registry
    registry.register(*records)
