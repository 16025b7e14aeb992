# topmark:header:start
#
#   project      : AnsiOut
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AnsiOut test suite.

This file sets up global fixtures and the logging configuration for test runs.

Notes:
    AnsiOut keeps process-wide state in the default
    [`AnsiOutput`][ansiout.ansi.output.AnsiOutput] instance. The autouse
    fixtures below reset that instance and scrub the environment variables that
    influence output settings, so tests never leak mode changes into each other.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from ansiout.ansi.output import get_output
from ansiout.config import logging
from ansiout.constants import (
    ENV_ANSI_MODE,
    ENV_CONSOLE_AVAILABLE,
    ENV_FORCE_COLOR,
    ENV_LOG_LEVEL,
    ENV_NO_COLOR,
)
from ansiout.core.errors import ProbeFailure

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

ESC = "\033"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


class FakeProbe:
    """Console probe stand-in that records how often it was called.

    Args:
        result (bool): Value returned by each call.
        error (Exception | None): If set, raised by each call instead.
    """

    def __init__(self, result: bool = True, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


def failing_os_name() -> str:
    """OS name probe that always fails."""
    raise ProbeFailure("os name unavailable")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that influence AnsiOut settings and logging.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (
        ENV_LOG_LEVEL,
        ENV_ANSI_MODE,
        ENV_CONSOLE_AVAILABLE,
        ENV_NO_COLOR,
        ENV_FORCE_COLOR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_output() -> Iterator[None]:
    """Reset the process-wide `AnsiOutput` around each test.

    Yields:
        None: Control returns to the test with a pristine default output.
    """
    get_output().reset()
    logging.setup_logging(level=logging.TRACE_LEVEL)
    yield
    get_output().reset()


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory contains a ``.git`` marker so configuration discovery never
    walks above it into the developer's checkout.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / ".git").mkdir()
    monkeypatch.chdir(cwd)
    return cwd
