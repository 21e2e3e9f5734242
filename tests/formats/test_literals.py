# topmark:header:start
#
#   project      : ConfigDocs
#   file         : test_literals.py
#   file_relpath : tests/formats/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Tests for TOML literal rendering of default values (`configdocs.formats.literals`)."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Any

import tomlkit

from configdocs.formats.literals import toml_literal
from tests.conftest import parametrize


class Mode(Enum):
    FAST = "fast"
    SAFE = 2


def _parse_value(literal: str | None) -> Any:
    assert literal is not None
    return tomlkit.parse(f"v = {literal}").unwrap()["v"]


def test_scalars() -> None:
    assert toml_literal("info") == '"info"'
    assert toml_literal(8080) == "8080"
    assert toml_literal(False) == "false"
    assert toml_literal(1.5) == "1.5"


def test_none_has_no_literal() -> None:
    assert toml_literal(None) is None


@parametrize(
    "value, expected",
    [
        (Mode.FAST, "fast"),
        (Mode.SAFE, 2),
        (PurePosixPath("/etc/app.toml"), "/etc/app.toml"),
        ({"cpu": 2, "name": "x"}, {"cpu": 2, "name": "x"}),
        ({"a": None, "b": 1}, {"b": 1}),
        ([1, None, 2], [1, 2]),
        (("a", "b"), ["a", "b"]),
        ({"nested": {"deep": [1, 2]}}, {"nested": {"deep": [1, 2]}}),
    ],
)
def test_literals_parse_back(value: object, expected: Any) -> None:
    """Rendered defaults are valid TOML right-hand sides."""
    assert _parse_value(toml_literal(value)) == expected


def test_mappings_render_inline() -> None:
    literal = toml_literal({"cpu": 2})

    assert literal is not None
    assert literal.startswith("{")
    assert "\n" not in literal


def test_sets_render_in_stable_order() -> None:
    assert toml_literal({"b", "c", "a"}) == toml_literal(frozenset({"c", "a", "b"}))
    assert _parse_value(toml_literal({"b", "c", "a"})) == ["a", "b", "c"]
