# topmark:header:start
#
#   project      : AnsiOut
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for AnsiOut logging helpers."""

from __future__ import annotations

import logging

import pytest

from ansiout.config.logging import (
    TRACE_LEVEL,
    AnsiOutLogger,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("10", 10),
        ("", None),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(value: str, expected: int | None) -> None:
    """Names (case-insensitive) and numbers are accepted."""
    assert resolve_env_log_level({"ANSIOUT_LOG_LEVEL": value}) == expected


def test_resolve_env_log_level_unset() -> None:
    """No variable means no level."""
    assert resolve_env_log_level({}) is None


def test_setup_logging_defaults_to_critical() -> None:
    """Without a level or environment variable only CRITICAL is shown."""
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


def test_setup_logging_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """``ANSIOUT_LOG_LEVEL`` is consulted when no level is given."""
    monkeypatch.setenv("ANSIOUT_LOG_LEVEL", "DEBUG")
    setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_trace_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers support the TRACE level below DEBUG."""
    logger = get_logger("ansiout.test")
    assert isinstance(logger, AnsiOutLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("fine detail %d", 7)
    assert "fine detail 7" in caplog.text
    assert caplog.records[-1].levelname == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    """Colorized records still contain the formatted message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    assert "careful now" in ChalkFormatter("%(message)s").format(record)
