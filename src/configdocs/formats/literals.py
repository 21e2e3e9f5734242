# topmark:header:start
#
#   project      : ConfigDocs
#   file         : literals.py
#   file_relpath : src/configdocs/formats/literals.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Render Python values as TOML literals with tomlkit.

Used to pre-render default values (``FieldDescriptor.default_repr``) when a
schema is built by reflection. TOML has no ``null``: a ``None`` value renders
as ``None`` (no default), and ``None`` entries inside mappings and sequences
are dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, cast

import tomlkit
from tomlkit.items import Item

from configdocs.config.logging import get_logger

logger = get_logger(__name__)


def to_toml_item(value: object) -> Item:
    """Convert a Python value to a tomlkit item.

    Mappings become inline tables (never standard tables, so the result fits on
    the right-hand side of an assignment), sets are sorted for deterministic
    output, enums render by value and paths as strings.

    Args:
        value (object): The value to convert; must not be None.

    Returns:
        Item: The tomlkit item.

    Raises:
        tomlkit.exceptions.ConvertError: If tomlkit cannot represent the value.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, PurePath):
        value = value.as_posix()

    if isinstance(value, Mapping):
        table = tomlkit.inline_table()
        m = cast("Mapping[object, object]", value)
        for k, v in m.items():
            if v is None:
                logger.debug("Ignoring `None` entry in mapping for key %s", k)
                continue
            table.append(str(k), to_toml_item(v))
        return table

    if isinstance(value, (list, tuple, set, frozenset)):
        seq: list[object] = list(cast("Any", value))
        if isinstance(value, (set, frozenset)):
            seq.sort(key=repr)
        arr = tomlkit.array()
        for v in seq:
            if v is None:
                logger.debug("Ignoring `None` entry in sequence")
                continue
            arr.append(to_toml_item(v))
        return arr

    return tomlkit.item(value)


def toml_literal(value: object) -> str | None:
    """Return ``value`` rendered as a TOML literal, or None for ``None``.

    Examples:
        ```python
        toml_literal("info")   # '"info"'
        toml_literal(False)    # 'false'
        toml_literal([1, 2])   # '[1, 2]'
        ```
    """
    if value is None:
        return None
    return to_toml_item(value).as_string()
