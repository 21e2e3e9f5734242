# topmark:header:start
#
#   project      : ConfigDocs
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Pytest configuration for the ConfigDocs test suite.

Sets up TRACE logging for test runs, keeps developer environment variables
(``CONFIGDOCS_*``) from leaking into tests, and resets the process-wide schema
registry after every test.

Notes:
    Dataclasses reflected with `build_schema` must be defined at module level:
    their annotations are resolved against the module globals.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from configdocs.config import logging
from configdocs.constants import FORMAT_ENV, OUTPUT_DIR_ENV
from configdocs.schema.registry import SchemaRegistry, get_default_registry

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_configdocs_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot force a format, directory or log level.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (FORMAT_ENV, OUTPUT_DIR_ENV, logging.LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_registry() -> Iterator[None]:
    """Drop records registered in the process-wide registry by the test."""
    yield
    get_default_registry().clear()


@pytest.fixture
def registry() -> SchemaRegistry:
    """Return an empty, test-local schema registry."""
    return SchemaRegistry()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
