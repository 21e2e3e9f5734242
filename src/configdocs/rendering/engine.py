# topmark:header:start
#
#   project      : ConfigDocs
#   file         : engine.py
#   file_relpath : src/configdocs/rendering/engine.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Render a record schema as Markdown reference documentation.

The engine walks the record graph depth-first, pre-order:

1. a top-level heading (the title override or the root record's name),
   followed by the root record's documentation;
2. one fenced code block holding the root's scalar fields, without a table
   header;
3. for each nested field, in declaration order, a subsection titled with the
   humanized field name, the field (or nested record) documentation, and a code
   block opening with the table header of the field path; then recursion.

Every per-syntax decision is delegated to the active
[`FormatStrategy`][configdocs.formats.base.FormatStrategy]. Rendering is pure:
schemas are never mutated and nothing is cached between calls, so identical
inputs always produce identical text. On error no partial document is
returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from configdocs.config.logging import get_logger
from configdocs.core.errors import UnsupportedTypeError
from configdocs.rendering.markdown import code_block, heading, humanize, paragraph
from configdocs.rendering.options import RenderOptions
from configdocs.schema.registry import get_default_registry

if TYPE_CHECKING:
    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.formats.base import FormatStrategy
    from configdocs.schema.model import FieldDescriptor, RecordSchema
    from configdocs.schema.registry import SchemaRegistry

logger: ConfigDocsLogger = get_logger(__name__)


class _Renderer:
    """Per-call traversal state (format, options and registry)."""

    def __init__(
        self,
        fmt: FormatStrategy,
        options: RenderOptions,
        registry: SchemaRegistry,
    ) -> None:
        self.fmt = fmt
        self.options = options
        self.registry = registry

    def field_lines(
        self,
        record: RecordSchema,
        field: FieldDescriptor,
        path: tuple[str, ...],
    ) -> list[str]:
        """Return the comment lines and the assignment line of one scalar field."""
        fmt = self.fmt
        lines = [fmt.comment_line(line) for line in field.doc_lines]
        if field.default_repr is not None:
            lines.append(fmt.comment_line(f"Default: {field.default_repr}"))
        if self.options.show_types and field.type_summary:
            lines.append(fmt.comment_line(f"Type: {field.type_summary}"))
        try:
            value = fmt.value_repr(field.type_summary, field.default_repr)
        except UnsupportedTypeError as exc:
            raise UnsupportedTypeError(
                field.type_summary,
                field=field.name,
                record=record.name,
                path=(*path, field.name),
                format_name=fmt.name,
            ) from exc
        lines.append(fmt.key_value(field.name, value))
        logger.trace("Rendered field %s.%s", record.name, field.name)
        return lines

    def record_block(self, record: RecordSchema, path: tuple[str, ...]) -> str | None:
        """Return the code block of a record's scalar fields (None if it has none)."""
        scalars = record.scalar_fields
        if not scalars:
            return None
        lines: list[str] = []
        if path:
            header_path = path if self.fmt.nested_table_paths else path[-1:]
            lines.append(self.fmt.table_header(header_path))
        for i, field in enumerate(scalars):
            if i:
                lines.append("")
            lines.extend(self.field_lines(record, field, path))
        return code_block(lines, self.fmt.fence_language)

    def render_record(
        self,
        record: RecordSchema,
        path: tuple[str, ...],
        level: int,
        sections: list[str],
    ) -> None:
        """Append the sections of ``record`` and its nested records to ``sections``."""
        block = self.record_block(record, path)
        if block is not None:
            sections.append(block)

        for field in record.nested_fields:
            assert field.nested is not None
            child = self.registry.resolve(field.nested)
            sections.append(heading(humanize(field.name), level + 1))
            doc = field.doc or child.doc
            if doc:
                sections.append(paragraph(doc))
            logger.debug("Descending into %s via '%s'", child.name, ".".join((*path, field.name)))
            self.render_record(child, (*path, field.name), level + 1, sections)


def render(
    root: RecordSchema,
    options: RenderOptions | None = None,
    fmt: FormatStrategy | None = None,
    *,
    registry: SchemaRegistry | None = None,
) -> str:
    """Render ``root`` and its nested records as a Markdown document.

    Args:
        root (RecordSchema): The record to document.
        options (RenderOptions | None): Rendering options; defaults apply when None.
        fmt (FormatStrategy | None): Format strategy overriding ``options.format``.
        registry (SchemaRegistry | None): Registry resolving nested references;
            defaults to the process-wide registry.

    Returns:
        str: The complete document, ending with a single newline.

    Raises:
        UnsupportedTypeError: If a field has neither a default nor a placeholder
            in the active format.
        UnknownRecordError: If a nested reference is not registered.
    """
    options = options or RenderOptions()
    strategy = fmt or options.format
    if registry is None:
        registry = get_default_registry()
    renderer = _Renderer(strategy, options, registry)
    logger.debug("Rendering %s with format '%s'", root.name, strategy.name)

    title = options.title if options.title is not None else root.name
    sections: list[str] = [heading(title, 1)]
    if root.doc:
        sections.append(paragraph(root.doc))
    renderer.render_record(root, (), 1, sections)
    return "\n\n".join(sections) + "\n"
