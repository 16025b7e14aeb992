# topmark:header:start
#
#   project      : AnsiOut
#   file         : detector.py
#   file_relpath : src/ansiout/ansi/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI capability detection.

Decision precedence:
    1. ``AnsiMode.ALWAYS`` → True; ``AnsiMode.NEVER`` → False.
    2. ``AnsiMode.DETECT``: the memoized result, if computed for the same
       console override. Otherwise:

       - override ``False`` → False (the console probe is not called);
       - override unset (``None``) → call the console probe; no console → False;
       - otherwise True unless the OS name contains ``"win"``.

Any exception raised while probing is treated as "not capable": the detector
logs it and returns False, it never propagates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ansiout.ansi.mode import AnsiMode
from ansiout.ansi.probes import has_console, operating_system_name
from ansiout.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from ansiout.config.logging import AnsiOutLogger

logger: AnsiOutLogger = get_logger(__name__)


def detect_ansi_capable(
    console_override: bool | None,
    os_name: str | Callable[[], str],
    probe: Callable[[], bool],
) -> bool:
    """Run the (uncached) ANSI capability policy.

    Args:
        console_override (bool | None): Known console availability, or ``None``
            to ask ``probe``. An explicit value always wins over probing.
        os_name (str | Callable[[], str]): The operating system name, or a
            callable returning it (evaluated inside the failure boundary).
        probe (Callable[[], bool]): Reports whether a console is attached.

    Returns:
        bool: True if ANSI escape sequences should be emitted.
    """
    try:
        if console_override is False:
            logger.trace("Console explicitly unavailable; ANSI disabled")
            return False
        if console_override is None and not probe():
            logger.trace("No console attached; ANSI disabled")
            return False
        name: str = os_name if isinstance(os_name, str) else os_name()
        capable: bool = "win" not in name.lower()
        logger.trace("Operating system %r; ANSI capable: %s", name, capable)
        return capable
    except Exception as exc:
        logger.debug("ANSI capability probe failed, assuming no support: %s", exc)
        return False


class CapabilityDetector:
    """Memoizing capability detector with injectable environment probes.

    The memo remembers the console override it was computed for; a call with a
    different override recomputes. `invalidate()` drops the memo explicitly.

    Args:
        console_probe (Callable[[], bool]): Reports whether a console is attached.
            Defaults to [`has_console`][ansiout.ansi.probes.has_console].
        os_name_probe (Callable[[], str]): Returns the OS name. Defaults to
            [`operating_system_name`][ansiout.ansi.probes.operating_system_name].
    """

    def __init__(
        self,
        *,
        console_probe: Callable[[], bool] = has_console,
        os_name_probe: Callable[[], str] = operating_system_name,
    ) -> None:
        self.console_probe = console_probe
        self.os_name_probe = os_name_probe
        self._memo: tuple[bool | None, bool] | None = None

    @property
    def cached(self) -> bool | None:
        """The memoized detection result, or ``None`` if nothing is cached."""
        return None if self._memo is None else self._memo[1]

    def invalidate(self) -> None:
        """Forget the memoized detection result."""
        self._memo = None

    def is_enabled(self, mode: AnsiMode, console_override: bool | None) -> bool:
        """Return whether ANSI output is enabled for ``mode``.

        Args:
            mode (AnsiMode): The configured output mode.
            console_override (bool | None): Explicit console availability, if known.

        Returns:
            bool: True if escape sequences should be emitted.
        """
        if mode is AnsiMode.ALWAYS:
            return True
        if mode is AnsiMode.NEVER:
            return False

        memo = self._memo
        if memo is not None and memo[0] == console_override:
            return memo[1]

        capable: bool = detect_ansi_capable(
            console_override,
            self.os_name_probe,
            self.console_probe,
        )
        self._memo = (console_override, capable)
        logger.debug(
            "Detected ANSI capability: %s (console override: %s)", capable, console_override
        )
        return capable
