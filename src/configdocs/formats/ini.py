# topmark:header:start
#
#   project      : ConfigDocs
#   file         : ini.py
#   file_relpath : src/configdocs/formats/ini.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""INI format strategy.

INI sections are flat, so nested records are rendered with a simple
``[name]`` header (the last segment of the field path). Values are untyped
text: only scalar types have a placeholder, and a string's placeholder is the
empty value.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from configdocs.formats.base import FormatStrategy
from configdocs.formats.registry import register_format

if TYPE_CHECKING:
    from collections.abc import Sequence

INI_PLACEHOLDERS: Final = MappingProxyType(
    {
        **dict.fromkeys(("string", "str", "char", "path", "pathbuf"), ""),
        **dict.fromkeys(
            (
                "integer",
                "int",
                *(f"{sign}{bits}" for sign in "iu" for bits in ("8", "16", "32", "64", "128", "size")),
            ),
            "0",
        ),
        **dict.fromkeys(("float", "f32", "f64", "number", "double"), "0.0"),
        **dict.fromkeys(("bool", "boolean"), "false"),
    }
)


@register_format("ini")
class IniFormat(FormatStrategy):
    """Render examples as INI (``; comment``, ``[section]``, ``key = value``)."""

    name = "ini"
    extension = "ini"
    fence_language = "ini"
    line_prefix = "; "
    nested_table_paths = False
    placeholders = INI_PLACEHOLDERS

    def table_header(self, path: Sequence[str]) -> str:
        """Render a flat section header from the last path segment."""
        return f"[{path[-1]}]"

    def key_value(self, key: str, value_repr: str) -> str:
        """Render an assignment; an empty value keeps no trailing space."""
        return f"{key} = {value_repr}".rstrip()
