# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Format strategies: the pluggable rendering rules per serialization syntax.

Importing this package registers the built-in strategies (TOML, INI). New
formats subclass [`FormatStrategy`][configdocs.formats.base.FormatStrategy] and
register with [`register_format`][configdocs.formats.registry.register_format].
"""

from __future__ import annotations

from configdocs.formats.base import FormatStrategy, normalize_type_label
from configdocs.formats.ini import IniFormat
from configdocs.formats.literals import toml_literal
from configdocs.formats.registry import (
    format_names,
    get_format,
    register_format,
    resolve_format,
    unregister_format,
)
from configdocs.formats.toml import TomlFormat

__all__ = [
    "FormatStrategy",
    "IniFormat",
    "TomlFormat",
    "format_names",
    "get_format",
    "normalize_type_label",
    "register_format",
    "resolve_format",
    "toml_literal",
    "unregister_format",
]
