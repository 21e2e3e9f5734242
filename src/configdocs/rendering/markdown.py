# topmark:header:start
#
#   project      : ConfigDocs
#   file         : markdown.py
#   file_relpath : src/configdocs/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Markdown building blocks used by the rendering engine and the CLI listings."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

MAX_HEADING_LEVEL: Final[int] = 6

_RE_WORD_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[\s_.\-]+")


def humanize(name: str) -> str:
    """Turn a field name into a section title.

    Splits on word separators (underscore, hyphen, dot, whitespace), upper-cases
    the first letter of each segment and joins with spaces:
    ``log_rotation`` -> ``Log Rotation``, ``http-server`` -> ``Http Server``.
    The rest of each segment is kept as is (``tlsConfig`` -> ``TlsConfig``).
    """
    words = [w for w in _RE_WORD_SEPARATORS.split(name) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


def heading(text: str, level: int) -> str:
    """Return an ATX heading; levels beyond 6 are clamped."""
    level = max(1, min(level, MAX_HEADING_LEVEL))
    return f"{'#' * level} {text}"


def paragraph(text: str) -> str:
    """Return ``text`` as a paragraph with surrounding whitespace trimmed."""
    return text.strip()


def code_block(lines: Sequence[str], language: str = "") -> str:
    """Return ``lines`` wrapped in a fenced code block."""
    body = "\n".join(lines)
    return f"```{language}\n{body}\n```"


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: Row sequences, each as long as ``headers``.
        align: Optional mapping of column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style = (align or {}).get(i, "left").lower()
        w = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    def _row(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    lines = [_row(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_row(r) for r in rows)
    return "\n".join(lines) + "\n"
