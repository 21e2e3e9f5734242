# topmark:header:start
#
#   project      : ConfigDocs
#   file         : builder.py
#   file_relpath : src/configdocs/schema/builder.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Build record schemas from dataclasses by reflection.

Configuration records are declared as plain dataclasses. The
[`config_docs`][configdocs.schema.builder.config_docs] decorator opts a class in
(record name, rename policy, export flag) and
[`doc_field`][configdocs.schema.builder.doc_field] attaches per-field
documentation and renames:

```python
@config_docs(export=True)
@dataclass
class Server:
    address: str = doc_field("127.0.0.1", doc="bind address")
    logging: Logging = doc_field(default_factory=Logging)
```

[`build_schema`][configdocs.schema.builder.build_schema] walks the class and every
dataclass-typed field (nested records are built first), renders default values
as literals, and registers the resulting records in one validated batch.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from collections.abc import Mapping, Sequence, Set
from dataclasses import MISSING, dataclass
from datetime import date, datetime, time
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Final, Literal, Union, get_args, get_origin

from configdocs.config.logging import get_logger
from configdocs.core.errors import CyclicSchemaError, DuplicateRecordError
from configdocs.formats.literals import toml_literal
from configdocs.schema.model import FieldDescriptor, RecordSchema
from configdocs.schema.naming import RenamePolicy, apply_rename
from configdocs.schema.registry import get_default_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.schema.registry import SchemaRegistry

logger: ConfigDocsLogger = get_logger(__name__)

META_ATTR: Final[str] = "__configdocs__"

# Keys stored in `dataclasses.Field.metadata` by `doc_field()`.
DOC_KEY: Final[str] = "configdocs.doc"
RENAME_KEY: Final[str] = "configdocs.rename"
TYPE_KEY: Final[str] = "configdocs.type"
SKIP_KEY: Final[str] = "configdocs.skip"

_SCALAR_LABELS: Final[dict[type, str]] = {
    str: "string",
    int: "integer",
    float: "float",
    bool: "bool",
    datetime: "datetime",
    date: "date",
    time: "time",
}

_decorated: list[type] = []


@dataclass(frozen=True)
class ConfigDocsMeta:
    """Per-class options recorded by `config_docs`."""

    name: str
    export: bool = False
    rename_all: RenamePolicy | None = None


def config_docs(
    cls: type | None = None,
    *,
    export: bool = False,
    rename_all: RenamePolicy | str | None = None,
    name: str | None = None,
) -> Any:
    """Opt a dataclass in as a documented configuration record.

    Usable bare (``@config_docs``) or with options. Apply it *above*
    ``@dataclass``.

    Args:
        cls (type | None): The decorated class (bare usage).
        export (bool): Flag the record for file export.
        rename_all (RenamePolicy | str | None): Rename policy for field keys.
        name (str | None): Record name; defaults to the class name.

    Returns:
        Any: The class itself, or a decorator when called with options.

    Raises:
        TypeError: If the decorated class is not a dataclass.
        ValueError: If ``rename_all`` names no known policy.
    """
    policy = RenamePolicy.parse(rename_all) if rename_all is not None else None

    def wrap(target: type) -> type:
        if not dataclasses.is_dataclass(target):
            raise TypeError(f"@config_docs requires a dataclass, got {target.__name__}")
        setattr(target, META_ATTR, ConfigDocsMeta(name or target.__name__, export, policy))
        if target not in _decorated:
            _decorated.append(target)
        logger.trace("Decorated %s (export=%s)", target.__name__, export)
        return target

    if cls is None:
        return wrap
    return wrap(cls)


def decorated_classes() -> tuple[type, ...]:
    """Return every class seen by `config_docs`, in definition order."""
    return tuple(_decorated)


def meta_of(cls: type) -> ConfigDocsMeta:
    """Return the options of ``cls`` (defaults for undecorated dataclasses)."""
    meta = cls.__dict__.get(META_ATTR)
    if isinstance(meta, ConfigDocsMeta):
        return meta
    return ConfigDocsMeta(cls.__name__)


def doc_field(
    default: Any = MISSING,
    *,
    default_factory: Any = MISSING,
    doc: str | None = None,
    rename: str | None = None,
    type_label: str | None = None,
    skip: bool = False,
    **kwargs: Any,
) -> Any:
    """Return a `dataclasses.field` carrying documentation metadata.

    Args:
        default (Any): Default value.
        default_factory (Any): Zero-argument default factory.
        doc (str | None): Field documentation (may span lines).
        rename (str | None): Serialized key, overriding the rename policy.
        type_label (str | None): Type label overriding the reflected one.
        skip (bool): Leave the field out of the documentation.
        **kwargs (Any): Forwarded to `dataclasses.field`.

    Returns:
        Any: The dataclass field specification.
    """
    metadata: dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    if doc is not None:
        metadata[DOC_KEY] = inspect.cleandoc(doc)
    if rename is not None:
        metadata[RENAME_KEY] = rename
    if type_label is not None:
        metadata[TYPE_KEY] = type_label
    if skip:
        metadata[SKIP_KEY] = True
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def _unwrap(tp: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers from a type hint."""
    while True:
        origin = get_origin(tp)
        if origin is typing.Annotated:
            tp = get_args(tp)[0]
            continue
        if origin is Union or origin is types.UnionType:
            args = [a for a in get_args(tp) if a is not type(None)]
            if len(args) == 1:
                tp = args[0]
                continue
        return tp


def type_label(tp: Any) -> str:
    """Return the human-readable type label of a type hint.

    Args:
        tp (Any): A (possibly wrapped) type hint.

    Returns:
        str: ``"string"``, ``"integer"``, ``"array"``, ``"table"``, ... or the
            type's own name when no label applies.
    """
    tp = _unwrap(tp)
    origin = get_origin(tp)

    if origin is Literal:
        kinds = {type(a) for a in get_args(tp)}
        return type_label(kinds.pop()) if len(kinds) == 1 else "literal"
    if origin is not None:
        tp = origin

    if not isinstance(tp, type):
        return getattr(tp, "__name__", None) or str(tp)

    if tp in _SCALAR_LABELS:
        return _SCALAR_LABELS[tp]
    if issubclass(tp, Enum):
        kinds = {type(m.value) for m in tp}
        if kinds <= {str}:
            return "string"
        if kinds <= {int}:
            return "integer"
        return tp.__name__
    if issubclass(tp, PurePath):
        return "path"
    if issubclass(tp, Mapping):
        return "table"
    if issubclass(tp, (list, tuple, Set, Sequence)) and not issubclass(tp, (str, bytes)):
        return "array"
    return tp.__name__


def _class_doc(cls: type) -> str | None:
    """Return the class docstring, ignoring the one generated by `@dataclass`."""
    doc = cls.__doc__
    if not doc or doc.startswith(f"{cls.__name__}("):
        return None
    return inspect.cleandoc(doc)


def _default_repr(
    cls: type,
    f: dataclasses.Field[Any],
    literal: Callable[[object], str | None],
) -> str | None:
    if f.default is not MISSING:
        value: object = f.default
    elif f.default_factory is not MISSING:
        value = f.default_factory()
    else:
        return None
    try:
        return literal(value)
    except (TypeError, ValueError) as exc:
        logger.warning(
            "Default of %s.%s cannot be rendered as a literal (%s); quoting its string form",
            cls.__name__,
            f.name,
            exc,
        )
        return literal(str(value))


class _Builder:
    """Collects the records reachable from one root class."""

    def __init__(self, literal: Callable[[object], str | None]) -> None:
        self.literal = literal
        self.records: dict[type, RecordSchema] = {}
        self.owners: dict[str, type] = {}
        self.exported: list[str] = []
        self.stack: list[type] = []

    def build(self, cls: type) -> str:
        meta = meta_of(cls)
        owner = self.owners.setdefault(meta.name, cls)
        if owner is not cls:
            raise DuplicateRecordError(meta.name)
        if cls in self.stack:
            cycle = [meta_of(c).name for c in self.stack[self.stack.index(cls) :]]
            raise CyclicSchemaError([*cycle, meta.name])
        if cls in self.records:
            return meta.name

        self.stack.append(cls)
        hints = typing.get_type_hints(cls, include_extras=True)
        fields: list[FieldDescriptor] = []
        for f in dataclasses.fields(cls):
            if f.metadata.get(SKIP_KEY):
                continue
            target = _unwrap(hints.get(f.name, f.type))
            key: str = f.metadata.get(RENAME_KEY) or apply_rename(f.name, meta.rename_all)
            doc: str | None = f.metadata.get(DOC_KEY)
            if isinstance(target, type) and dataclasses.is_dataclass(target):
                child = self.build(target)
                fields.append(FieldDescriptor(key, type_summary=child, doc=doc, nested=child))
                continue
            fields.append(
                FieldDescriptor(
                    key,
                    type_summary=f.metadata.get(TYPE_KEY) or type_label(target),
                    doc=doc,
                    default_repr=_default_repr(cls, f, self.literal),
                )
            )
        self.stack.pop()

        self.records[cls] = RecordSchema(meta.name, tuple(fields), _class_doc(cls))
        if meta.export:
            self.exported.append(meta.name)
        logger.debug("Built record %s from %s", meta.name, cls.__qualname__)
        return meta.name


def build_schema(
    cls: type,
    *,
    registry: SchemaRegistry | None = None,
    literal: Callable[[object], str | None] = toml_literal,
) -> RecordSchema:
    """Build, validate and register the record schema of a dataclass.

    Nested dataclass-typed fields become nested records; they are built before
    their parent and registered in the same batch. Re-building a class that is
    already registered is a no-op; a different class under a registered record
    name is rejected.

    Args:
        cls (type): The dataclass to reflect.
        registry (SchemaRegistry | None): Target registry; defaults to the
            process-wide registry.
        literal (Callable[[object], str | None]): Renders default values; TOML
            literal syntax by default.

    Returns:
        RecordSchema: The registered root record.

    Raises:
        TypeError: If ``cls`` is not a dataclass.
        CyclicSchemaError: If the class nests itself directly or transitively.
        DuplicateFieldError: If two fields map to the same serialized key.
        DuplicateRecordError: If two different classes share a record name,
            within the tree or against the registry.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"build_schema() requires a dataclass type, got {cls!r}")
    if registry is None:
        registry = get_default_registry()
    builder = _Builder(literal)
    name = builder.build(cls)
    registry.register(*builder.records.values())
    for exported in builder.exported:
        registry.mark_exported(exported)
    return registry.resolve(name)
