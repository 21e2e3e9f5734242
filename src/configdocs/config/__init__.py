# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Ambient configuration for ConfigDocs: logging and project settings.

- ``logging``: TRACE-aware logger class and colored formatter.
- ``settings``: ``[tool.configdocs]`` settings from ``pyproject.toml`` with
  environment overrides.
"""

from __future__ import annotations
