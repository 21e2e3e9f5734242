# topmark:header:start
#
#   project      : ConfigDocs
#   file         : options.py
#   file_relpath : src/configdocs/rendering/options.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Options controlling one render call."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from configdocs.constants import DEFAULT_FORMAT_NAME
from configdocs.formats import FormatStrategy, get_format


def _default_format() -> FormatStrategy:
    return get_format(DEFAULT_FORMAT_NAME)


@dataclass(frozen=True)
class RenderOptions:
    """Immutable rendering options.

    Attributes:
        format (FormatStrategy): Active format strategy (TOML unless overridden).
        title (str | None): Top-level heading; defaults to the root record's name.
        show_types (bool): Also emit a ``Type: <label>`` comment for each field.
    """

    format: FormatStrategy = field(default_factory=_default_format)
    title: str | None = None
    show_types: bool = False

    def with_title(self, title: str | None) -> RenderOptions:
        """Return a copy with a different title override."""
        return replace(self, title=title)

    def with_format(self, fmt: FormatStrategy) -> RenderOptions:
        """Return a copy rendering with ``fmt``."""
        return replace(self, format=fmt)
