# topmark:header:start
#
#   project      : ConfigDocs
#   file         : settings.py
#   file_relpath : src/configdocs/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Project settings for ConfigDocs exports.

Settings are layered, later layers winning:

1. built-in defaults ([`Settings`][configdocs.config.settings.Settings]);
2. the ``[tool.configdocs]`` table of the nearest ``pyproject.toml``:

   ```toml
   [tool.configdocs]
   format = "toml"
   output-dir = "docs/config"
   show-types = false
   ```

3. environment variables ``CONFIGDOCS_FORMAT`` and ``CONFIGDOCS_OUTPUT_DIR``;
4. CLI options (applied by the commands via `Settings.merged()`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from configdocs.config.logging import get_logger
from configdocs.constants import (
    DEFAULT_FORMAT_NAME,
    DEFAULT_OUTPUT_DIR,
    FORMAT_ENV,
    OUTPUT_DIR_ENV,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_TABLE,
)
from configdocs.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from configdocs.config.logging import ConfigDocsLogger

logger: ConfigDocsLogger = get_logger(__name__)

_KNOWN_KEYS = frozenset({"format", "output-dir", "show-types"})


@dataclass(frozen=True)
class Settings:
    """Resolved export settings.

    Attributes:
        format (str): Format name as registered (``toml``, ``ini``, ...).
        output_dir (Path): Directory exported documents are written to.
        show_types (bool): Emit ``Type:`` comment lines.
    """

    format: str = DEFAULT_FORMAT_NAME
    output_dir: Path = field(default_factory=lambda: DEFAULT_OUTPUT_DIR)
    show_types: bool = False

    def merged(
        self,
        *,
        format: str | None = None,
        output_dir: Path | str | None = None,
        show_types: bool | None = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        return replace(
            self,
            format=format or self.format,
            output_dir=Path(output_dir) if output_dir is not None else self.output_dir,
            show_types=self.show_types if show_types is None else show_types,
        )


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start`` (default: CWD)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file():
            return candidate
    return None


def _tool_table(path: Path) -> Mapping[str, Any]:
    """Return the ``[tool.configdocs]`` table of ``path`` (empty if absent).

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, TomlkitParseError) as exc:
        raise ConfigError(f"Cannot read settings from {path}: {exc}") from exc

    data: Any = doc.unwrap()
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(data, dict):
            return {}
        data = cast("dict[str, Any]", data).get(key, {})
    if not isinstance(data, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] in {path} must be a table")
    return cast("dict[str, Any]", data)


def _settings_from_table(table: Mapping[str, Any], base: Settings, origin: Path) -> Settings:
    for key in table:
        if key not in _KNOWN_KEYS:
            logger.warning("Ignoring unknown setting '%s' in %s", key, origin)

    fmt = table.get("format")
    if fmt is not None and not isinstance(fmt, str):
        raise ConfigError(f"'format' in {origin} must be a string")
    output_dir = table.get("output-dir")
    if output_dir is not None and not isinstance(output_dir, str):
        raise ConfigError(f"'output-dir' in {origin} must be a string")
    show_types = table.get("show-types")
    if show_types is not None and not isinstance(show_types, bool):
        raise ConfigError(f"'show-types' in {origin} must be a boolean")

    # Relative output directories are anchored at the pyproject.toml location.
    out_path = None if output_dir is None else origin.parent / output_dir
    return base.merged(format=fmt, output_dir=out_path, show_types=show_types)


def load_settings(
    pyproject: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from defaults, ``pyproject.toml`` and the environment.

    Args:
        pyproject (Path | None): Explicit ``pyproject.toml``; when None the
            nearest one above the current directory is used (if any).
        environ (Mapping[str, str] | None): Environment to read; defaults to
            ``os.environ``.

    Returns:
        Settings: The resolved settings.

    Raises:
        ConfigError: If the settings file is unreadable or malformed.
    """
    settings = Settings()
    path = pyproject or find_pyproject()
    if path is not None:
        logger.debug("Loading settings from %s", path)
        settings = _settings_from_table(_tool_table(path), settings, path)

    env = os.environ if environ is None else environ
    settings = settings.merged(
        format=env.get(FORMAT_ENV) or None,
        output_dir=env.get(OUTPUT_DIR_ENV) or None,
    )
    logger.trace("Resolved settings: %s", settings)
    return settings
