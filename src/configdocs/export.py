# topmark:header:start
#
#   project      : ConfigDocs
#   file         : export.py
#   file_relpath : src/configdocs/export.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Write rendered documentation to files.

Records flagged for export (``@config_docs(export=True)``) are written to
``<output_dir>/<RecordName>.<extension>.md``; the format comes from the caller,
else from ``CONFIGDOCS_FORMAT``, else TOML. The output directory is created if
missing. A typical use is a test in the documented project:

```python
def test_export_config_docs() -> None:
    export_classes([Config], output_dir=Path(__file__).parents[1] / "docs")
```
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import TYPE_CHECKING

from configdocs.config.logging import get_logger
from configdocs.constants import DEFAULT_OUTPUT_DIR, DOC_SUFFIX
from configdocs.formats import resolve_format
from configdocs.rendering import RenderOptions, render
from configdocs.schema.builder import build_schema, meta_of
from configdocs.schema.registry import get_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.formats.base import FormatStrategy
    from configdocs.schema.model import RecordSchema
    from configdocs.schema.registry import SchemaRegistry

logger: ConfigDocsLogger = get_logger(__name__)


def doc_filename(record: RecordSchema, fmt: FormatStrategy) -> str:
    """Return the file name of ``record``'s documentation, e.g. ``Config.toml.md``."""
    return f"{record.name}.{fmt.extension}{DOC_SUFFIX}"


def export_record(
    record: RecordSchema,
    *,
    fmt: FormatStrategy | None = None,
    output_dir: Path | str | None = None,
    options: RenderOptions | None = None,
    registry: SchemaRegistry | None = None,
) -> Path:
    """Render ``record`` and write it below ``output_dir``.

    Args:
        record (RecordSchema): Record to document.
        fmt (FormatStrategy | None): Format; resolved from the environment when None.
        output_dir (Path | str | None): Target directory (default: ``docs``).
        options (RenderOptions | None): Rendering options (title, types).
        registry (SchemaRegistry | None): Registry resolving nested records.

    Returns:
        Path: The written file.
    """
    strategy = fmt or resolve_format()
    text = render(record, options, strategy, registry=registry)

    directory = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / doc_filename(record, strategy)
    path.write_text(text, encoding="utf-8")
    logger.info("Generated documentation: %s", path)
    return path


def export_registered(
    *,
    fmt: FormatStrategy | None = None,
    output_dir: Path | str | None = None,
    options: RenderOptions | None = None,
    registry: SchemaRegistry | None = None,
) -> list[Path]:
    """Export every record flagged for export, in record-name order.

    Returns:
        list[Path]: The written files.
    """
    if registry is None:
        registry = get_default_registry()
    strategy = fmt or resolve_format()
    return [
        export_record(
            registry.resolve(name),
            fmt=strategy,
            output_dir=output_dir,
            options=options,
            registry=registry,
        )
        for name in registry.exported_names()
    ]


def export_classes(
    classes: Iterable[type],
    *,
    fmt: FormatStrategy | None = None,
    output_dir: Path | str | None = None,
    options: RenderOptions | None = None,
    registry: SchemaRegistry | None = None,
    only_flagged: bool = False,
) -> list[Path]:
    """Build the schemas of ``classes`` and export each of them.

    Args:
        classes (Iterable[type]): Dataclasses to document.
        fmt (FormatStrategy | None): Format; resolved from the environment when None.
        output_dir (Path | str | None): Target directory (default: ``docs``).
        options (RenderOptions | None): Rendering options.
        registry (SchemaRegistry | None): Target registry.
        only_flagged (bool): Skip classes not decorated with ``export=True``.

    Returns:
        list[Path]: The written files, in input order.
    """
    strategy = fmt or resolve_format()
    written: list[Path] = []
    for cls in classes:
        if only_flagged and not meta_of(cls).export:
            continue
        record = build_schema(cls, registry=registry)
        written.append(
            export_record(
                record,
                fmt=strategy,
                output_dir=output_dir,
                options=options,
                registry=registry,
            )
        )
    return written


def load_target(target: str) -> object:
    """Import ``module:attribute`` (or a bare ``module``) and return it.

    Raises:
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """
    module_name, _, attr = target.partition(":")
    module = importlib.import_module(module_name)
    if not attr:
        return module
    obj: object = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj
