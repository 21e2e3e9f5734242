# topmark:header:start
#
#   project      : ConfigDocs
#   file         : base.py
#   file_relpath : src/configdocs/formats/base.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Base class for format strategies.

A format strategy holds the rendering rules of one table-structured key/value
syntax. The rendering engine only talks to this interface, so adding a format
never touches traversal logic. Concrete strategies set the class attributes
and usually override [`table_header`][configdocs.formats.base.FormatStrategy.table_header]
and [`render_key`][configdocs.formats.base.FormatStrategy.render_key]; the
placeholder lookup and the default-or-placeholder rule are shared.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Final

from configdocs.config.logging import get_logger
from configdocs.core.errors import UnsupportedTypeError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from configdocs.config.logging import ConfigDocsLogger

logger: ConfigDocsLogger = get_logger(__name__)

_RE_OPTIONAL: Final[re.Pattern[str]] = re.compile(r"^(?:option|optional)\s*[<\[](.*)[>\]]$")
_RE_GENERIC: Final[re.Pattern[str]] = re.compile(r"^([\w.:]+)\s*[<\[]")
_RE_NONE_UNION: Final[re.Pattern[str]] = re.compile(r"^(.*?)\s*\|\s*none$|^none\s*\|\s*(.*)$")


def normalize_type_label(type_summary: str) -> str:
    """Reduce a type label to the lowercase key used for placeholder lookup.

    Optional wrappers are unwrapped (``Option<u16>``, ``Optional[int]``,
    ``int | None``), generic arguments are dropped (``Vec<String>`` -> ``vec``,
    ``list[int]`` -> ``list``), and qualified names keep their last segment
    (``std::string::String`` -> ``string``).

    Args:
        type_summary (str): Human-readable type label.

    Returns:
        str: The normalized label (may be empty).
    """
    label = type_summary.strip().lower()
    while True:
        m = _RE_OPTIONAL.match(label)
        if m:
            label = m.group(1).strip()
            continue
        m = _RE_NONE_UNION.match(label)
        if m:
            label = (m.group(1) or m.group(2) or "").strip()
            continue
        break
    m = _RE_GENERIC.match(label)
    if m:
        label = m.group(1)
    return re.split(r"::|\.", label)[-1]


class FormatStrategy:
    """Rendering rules for one serialization syntax.

    Attributes:
        name (str): Registry key, e.g. ``"toml"``.
        extension (str): File extension used for exported documents.
        fence_language (str): Info string of the Markdown code fence.
        line_prefix (str): Comment introducer including trailing space.
        nested_table_paths (bool): If True, headers of deeper tables carry the
            full dotted path (``[a.b]``); otherwise only the last segment.
        placeholders (Mapping[str, str]): Normalized type label -> example value.
    """

    name: ClassVar[str] = ""
    extension: ClassVar[str] = ""
    fence_language: ClassVar[str] = ""
    line_prefix: ClassVar[str] = "# "
    nested_table_paths: ClassVar[bool] = True
    placeholders: ClassVar[Mapping[str, str]] = MappingProxyType({})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def comment_line(self, text: str) -> str:
        """Render one line of human text as a comment.

        Blank input yields the bare comment introducer (no trailing space).
        """
        return f"{self.line_prefix}{text}".rstrip()

    def render_key(self, key: str) -> str:
        """Render a key or header segment; quoting rules are format specific."""
        return key

    def table_header(self, path: Sequence[str]) -> str:
        """Render a table/section header for a nested record.

        Args:
            path (Sequence[str]): Field names leading to the nested record.

        Returns:
            str: The header line, e.g. ``[logging]``.
        """
        return "[" + ".".join(self.render_key(p) for p in path) + "]"

    def key_value(self, key: str, value_repr: str) -> str:
        """Render one assignment line."""
        return f"{self.render_key(key)} = {value_repr}"

    def placeholder(self, type_summary: str) -> str | None:
        """Return the example value for a type label, or None if unknown."""
        return self.placeholders.get(normalize_type_label(type_summary))

    def value_repr(self, type_summary: str, default_repr: str | None) -> str:
        """Return the right-hand side of an assignment line.

        Args:
            type_summary (str): The field's type label.
            default_repr (str | None): Pre-rendered default; used verbatim if set.

        Returns:
            str: ``default_repr`` or the type placeholder.

        Raises:
            UnsupportedTypeError: If there is neither a default nor a placeholder.
        """
        if default_repr is not None:
            return default_repr
        placeholder = self.placeholder(type_summary)
        if placeholder is None:
            logger.debug("Format '%s' has no placeholder for '%s'", self.name, type_summary)
            raise UnsupportedTypeError(type_summary, format_name=self.name)
        return placeholder
