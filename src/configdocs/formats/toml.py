# topmark:header:start
#
#   project      : ConfigDocs
#   file         : toml.py
#   file_relpath : src/configdocs/formats/toml.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""TOML format strategy.

Keys and header segments are rendered through tomlkit, so names that are not
valid bare keys (``"log level"``, ``"a.b"``) are quoted. Placeholders are
tomlkit renderings of neutral values, which keeps every generated line valid
TOML even when a field has no default.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from types import MappingProxyType
from typing import Final

import tomlkit

from configdocs.formats.base import FormatStrategy
from configdocs.formats.registry import register_format


def _aliases(value: str, *labels: str) -> dict[str, str]:
    return dict.fromkeys(labels, value)


_STRING: Final[str] = tomlkit.item("").as_string()
_INTEGER: Final[str] = tomlkit.item(0).as_string()
_FLOAT: Final[str] = tomlkit.item(0.0).as_string()
_BOOL: Final[str] = tomlkit.item(False).as_string()

TOML_PLACEHOLDERS: Final = MappingProxyType(
    {
        **_aliases(_STRING, "string", "str", "char", "path", "pathbuf"),
        **_aliases(
            _INTEGER,
            "integer",
            "int",
            *(f"{sign}{bits}" for sign in "iu" for bits in ("8", "16", "32", "64", "128", "size")),
        ),
        **_aliases(_FLOAT, "float", "f32", "f64", "number", "double"),
        **_aliases(_BOOL, "bool", "boolean"),
        "datetime": tomlkit.item(datetime(1970, 1, 1, tzinfo=timezone.utc)).as_string(),
        "date": tomlkit.item(date(1970, 1, 1)).as_string(),
        "time": tomlkit.item(time(0, 0)).as_string(),
        **_aliases(tomlkit.array().as_string(), "array", "list", "vec", "tuple", "set"),
        **_aliases(
            tomlkit.inline_table().as_string(), "table", "dict", "map", "hashmap", "mapping"
        ),
    }
)


@register_format("toml")
class TomlFormat(FormatStrategy):
    """Render examples as TOML (``# comment``, ``[a.b]``, ``key = value``)."""

    name = "toml"
    extension = "toml"
    fence_language = "toml"
    line_prefix = "# "
    nested_table_paths = True
    placeholders = TOML_PLACEHOLDERS

    def render_key(self, key: str) -> str:
        """Render ``key`` as a bare key when possible, quoted otherwise."""
        return tomlkit.key(key).as_string()
