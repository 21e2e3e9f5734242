# topmark:header:start
#
#   project      : ConfigDocs
#   file         : registry.py
#   file_relpath : src/configdocs/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Registry of format strategies.

Strategies register themselves with the [`register_format`][configdocs.formats.registry.register_format]
class decorator; each class is instantiated once at registration time. Names
are matched case-insensitively.
"""

from __future__ import annotations

import os
from threading import RLock
from typing import TYPE_CHECKING

from configdocs.config.logging import get_logger
from configdocs.constants import DEFAULT_FORMAT_NAME, FORMAT_ENV
from configdocs.core.errors import UnknownFormatError

if TYPE_CHECKING:
    from collections.abc import Callable

    from configdocs.config.logging import ConfigDocsLogger
    from configdocs.formats.base import FormatStrategy

logger: ConfigDocsLogger = get_logger(__name__)

_lock = RLock()
_registry: dict[str, FormatStrategy] = {}


def register_format(
    name: str,
) -> Callable[[type[FormatStrategy]], type[FormatStrategy]]:
    """Class decorator registering a `FormatStrategy` under ``name``.

    Args:
        name (str): Registry key (stored lowercase).

    Returns:
        Callable[[type[FormatStrategy]], type[FormatStrategy]]: The decorator.

    Raises:
        ValueError: If ``name`` is empty or already registered.
    """
    key = name.strip().lower()
    if not key:
        raise ValueError("Format name is required.")

    def decorator(cls: type[FormatStrategy]) -> type[FormatStrategy]:
        with _lock:
            if key in _registry:
                raise ValueError(f"Format '{key}' is already registered.")
            logger.debug("Registering format strategy %s as '%s'", cls.__name__, key)
            _registry[key] = cls()
        return cls

    return decorator


def unregister_format(name: str) -> bool:
    """Remove a registered format; intended for test scaffolding.

    Returns:
        bool: True if the format existed and was removed.
    """
    with _lock:
        return _registry.pop(name.strip().lower(), None) is not None


def format_names() -> tuple[str, ...]:
    """Return all registered format names (sorted)."""
    with _lock:
        return tuple(sorted(_registry))


def get_format(name: str) -> FormatStrategy:
    """Return the strategy registered under ``name``.

    Raises:
        UnknownFormatError: If no strategy has that name.
    """
    with _lock:
        strategy = _registry.get(name.strip().lower())
        if strategy is None:
            raise UnknownFormatError(name, tuple(sorted(_registry)))
        return strategy


def resolve_format(name: str | None = None) -> FormatStrategy:
    """Return the format to export with.

    Resolution order: explicit ``name``, the ``CONFIGDOCS_FORMAT`` environment
    variable, then the default (``toml``).

    Raises:
        UnknownFormatError: If the resolved name is not registered.
    """
    if not name:
        name = os.environ.get(FORMAT_ENV) or DEFAULT_FORMAT_NAME
        logger.trace("Resolved export format from environment/default: %s", name)
    return get_format(name)
