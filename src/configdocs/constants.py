# topmark:header:start
#
#   project      : ConfigDocs
#   file         : constants.py
#   file_relpath : src/configdocs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""ConfigDocs Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Final

try:
    CONFIGDOCS_VERSION: str = get_version("configdocs")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    CONFIGDOCS_VERSION = "0.0.0"

# Environment variable selecting the export format (name as registered).
FORMAT_ENV: Final[str] = "CONFIGDOCS_FORMAT"

# Environment variable overriding the export directory.
OUTPUT_DIR_ENV: Final[str] = "CONFIGDOCS_OUTPUT_DIR"

DEFAULT_FORMAT_NAME: Final[str] = "toml"

DEFAULT_OUTPUT_DIR: Final[Path] = Path("docs")

# Exported files are named "<RecordName>.<extension><DOC_SUFFIX>".
DOC_SUFFIX: Final[str] = ".md"

PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Table inside pyproject.toml holding ConfigDocs settings.
PYPROJECT_TOOL_TABLE: Final[tuple[str, str]] = ("tool", "configdocs")
