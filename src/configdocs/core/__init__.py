# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ConfigDocs.

The ``configdocs.core`` package holds building blocks that are safe to import
from anywhere in the codebase (schema, formats, rendering, CLI, tests):

- ``errors``
  The exception hierarchy raised by schema registration, format lookup and
  rendering.
"""

from __future__ import annotations
