# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Rendering engine: schema model + options + format strategy -> Markdown."""

from __future__ import annotations

from configdocs.rendering.engine import render
from configdocs.rendering.options import RenderOptions

__all__ = ["RenderOptions", "render"]
