# topmark:header:start
#
#   project      : AnsiOut
#   file         : probes.py
#   file_relpath : src/ansiout/ansi/probes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default environment probes used by the capability detector.

Both probes are plain callables so hosts and tests can substitute their own
(see [`CapabilityDetector`][ansiout.ansi.detector.CapabilityDetector]).
"""

from __future__ import annotations

import platform
import sys
from typing import Final

from ansiout.core.errors import ProbeFailure

# sys.platform prefixes mapped to the conventional OS names matched by the detector.
# "darwin" must not reach the detector verbatim: it contains "win".
_PLATFORM_NAMES: Final[tuple[tuple[str, str], ...]] = (
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("msys", "windows"),
    ("darwin", "mac os x"),
)


def has_console() -> bool:
    """Return whether an interactive console is attached to standard output.

    Returns:
        bool: ``True`` if ``sys.stdout`` is a TTY.

    Raises:
        ProbeFailure: If ``sys.stdout`` is missing or cannot be queried.
    """
    stream = sys.stdout
    if stream is None:
        raise ProbeFailure("sys.stdout is not available")
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError) as exc:
        raise ProbeFailure(f"Cannot query sys.stdout: {exc}") from exc


def operating_system_name() -> str:
    """Return the lowercase operating system name.

    Returns:
        str: E.g. ``"linux"``, ``"windows"``, ``"mac os x"``.
    """
    for prefix, name in _PLATFORM_NAMES:
        if sys.platform.startswith(prefix):
            return name
    return (platform.system() or sys.platform).lower()
