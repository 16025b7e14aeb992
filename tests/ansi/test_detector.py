# topmark:header:start
#
#   project      : AnsiOut
#   file         : test_detector.py
#   file_relpath : tests/ansi/test_detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ANSI capability detection (`ansiout.ansi.detector`)."""

from __future__ import annotations

import logging

import pytest

from ansiout.ansi.detector import CapabilityDetector, detect_ansi_capable
from ansiout.ansi.mode import AnsiMode
from tests.conftest import FakeProbe, failing_os_name, parametrize


def _detector(probe: FakeProbe, os_name: str = "Linux") -> CapabilityDetector:
    return CapabilityDetector(console_probe=probe, os_name_probe=lambda: os_name)


@parametrize("override", [None, True, False])
def test_always_and_never_ignore_environment(override: bool | None) -> None:
    """Explicit modes never consult the probes."""
    probe = FakeProbe(result=False)
    detector = _detector(probe, "Windows 10")
    assert detector.is_enabled(AnsiMode.ALWAYS, override) is True
    assert detector.is_enabled(AnsiMode.NEVER, override) is False
    assert probe.calls == 0
    assert detector.cached is None


def test_override_false_disables_without_probing() -> None:
    """An explicit 'no console' wins; the probe is never called."""
    probe = FakeProbe(result=True)
    assert _detector(probe).is_enabled(AnsiMode.DETECT, False) is False
    assert probe.calls == 0


def test_override_true_skips_console_probe() -> None:
    """An explicit 'console available' skips the console probe."""
    probe = FakeProbe(result=False)
    assert _detector(probe, "Linux").is_enabled(AnsiMode.DETECT, True) is True
    assert probe.calls == 0


def test_no_console_disables() -> None:
    """Without override, a missing console disables ANSI."""
    probe = FakeProbe(result=False)
    assert _detector(probe).is_enabled(AnsiMode.DETECT, None) is False
    assert probe.calls == 1


@parametrize(
    ("os_name", "expected"),
    [
        ("Linux", True),
        ("linux", True),
        ("Mac OS X", True),
        ("FreeBSD", True),
        ("Windows 10", False),
        ("windows", False),
        ("WINDOWS SERVER", False),
        ("darwin", False),
    ],
)
def test_os_name_rule(os_name: str, expected: bool) -> None:
    """Any OS name containing 'win' (case-insensitive) disables ANSI."""
    assert _detector(FakeProbe(), os_name).is_enabled(AnsiMode.DETECT, None) is expected


def test_result_is_memoized() -> None:
    """Repeated DETECT queries call the probe at most once."""
    probe = FakeProbe(result=True)
    detector = _detector(probe)
    results = {detector.is_enabled(AnsiMode.DETECT, None) for _ in range(5)}
    assert results == {True}
    assert probe.calls == 1
    assert detector.cached is True


def test_invalidate_forces_recompute() -> None:
    """Dropping the memo re-runs the probes."""
    probe = FakeProbe(result=True)
    detector = _detector(probe)
    assert detector.is_enabled(AnsiMode.DETECT, None) is True

    probe.result = False
    assert detector.is_enabled(AnsiMode.DETECT, None) is True

    detector.invalidate()
    assert detector.cached is None
    assert detector.is_enabled(AnsiMode.DETECT, None) is False
    assert probe.calls == 2


def test_memo_follows_console_override() -> None:
    """A different override than the memoized one recomputes."""
    probe = FakeProbe(result=True)
    detector = _detector(probe)
    assert detector.is_enabled(AnsiMode.DETECT, None) is True
    assert detector.is_enabled(AnsiMode.DETECT, False) is False
    assert detector.is_enabled(AnsiMode.DETECT, None) is True
    assert probe.calls == 2


def test_probe_failure_is_not_capable(caplog: pytest.LogCaptureFixture) -> None:
    """A raising console probe yields False and is logged, never propagated."""
    probe = FakeProbe(error=RuntimeError("boom"))
    detector = _detector(probe)
    with caplog.at_level(logging.DEBUG):
        assert detector.is_enabled(AnsiMode.DETECT, None) is False
    assert "boom" in caplog.text
    assert detector.cached is False


def test_os_name_failure_is_not_capable() -> None:
    """A raising OS name probe yields False."""
    detector = CapabilityDetector(console_probe=FakeProbe(), os_name_probe=failing_os_name)
    assert detector.is_enabled(AnsiMode.DETECT, True) is False


def test_detect_ansi_capable_accepts_plain_os_name() -> None:
    """The uncached policy accepts a name or a callable."""
    probe = FakeProbe()
    assert detect_ansi_capable(None, "Linux", probe) is True
    assert detect_ansi_capable(None, "Windows 11", probe) is False
    assert detect_ansi_capable(None, lambda: "Linux", probe) is True
    assert detect_ansi_capable(False, "Linux", probe) is False
    assert probe.calls == 3
