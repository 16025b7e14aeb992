# topmark:header:start
#
#   project      : AnsiOut
#   file         : output.py
#   file_relpath : src/ansiout/ansi/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide ANSI output configuration and the public encode/format entry points.

`AnsiOutput` owns the three pieces of mutable state: the output mode, the
console availability override and the detection memo. All of it is guarded by
a single re-entrant lock, so the mode, the override and the memo are read
consistently within one `format` call.

A default instance backs the module-level functions. Hosts typically configure
it once at startup:

```python
from ansiout.ansi import output
from ansiout.ansi.elements import AnsiColor

output.set_mode("always")
print(output.format(AnsiColor.GREEN, "ok"))
```

Initial state: `AnsiMode.DETECT`, no console override, empty memo.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ansiout.ansi.detector import CapabilityDetector
from ansiout.ansi.encoder import encode_one, format_tokens
from ansiout.ansi.mode import AnsiMode
from ansiout.config.logging import get_logger

if TYPE_CHECKING:
    from ansiout.ansi.elements import AnsiElement
    from ansiout.config.logging import AnsiOutLogger
    from ansiout.config.settings import OutputSettings

logger: AnsiOutLogger = get_logger(__name__)


def _coerce_mode(mode: AnsiMode | str | None) -> AnsiMode:
    if mode is None:
        raise ValueError("Mode must not be None")
    if isinstance(mode, AnsiMode):
        return mode
    parsed: AnsiMode | None = AnsiMode.parse(mode)
    if parsed is None:
        choices: str = ", ".join(m.value for m in AnsiMode)
        raise ValueError(f"Invalid ANSI mode {mode!r}. Must be one of: {choices}")
    return parsed


class AnsiOutput:
    """ANSI output configuration plus the encode/format entry points.

    Args:
        detector (CapabilityDetector | None): Detector to use; a default one
            (real console and OS probes) is created when omitted.
    """

    def __init__(self, detector: CapabilityDetector | None = None) -> None:
        self._lock = threading.RLock()
        self._detector: CapabilityDetector = detector or CapabilityDetector()
        self._mode: AnsiMode = AnsiMode.DETECT
        self._console_available: bool | None = None

    @property
    def detector(self) -> CapabilityDetector:
        """The capability detector backing `AnsiMode.DETECT`."""
        return self._detector

    def set_mode(self, mode: AnsiMode | str) -> None:
        """Set the output mode.

        Args:
            mode (AnsiMode | str): The new mode, or a string accepted by `AnsiMode.parse`.

        Raises:
            ValueError: If ``mode`` is ``None`` or not a recognized mode.
        """
        resolved: AnsiMode = _coerce_mode(mode)
        with self._lock:
            self._mode = resolved
        logger.debug("ANSI output mode set to %s", resolved.value)

    def get_mode(self) -> AnsiMode:
        """Return the current output mode."""
        with self._lock:
            return self._mode

    def set_console_available(self, console_available: bool | None) -> None:
        """Declare whether a console is known to be available.

        An explicit value always wins over probing; ``None`` restores probing.
        The detection memo is invalidated.

        Args:
            console_available (bool | None): Known console availability, or ``None``.
        """
        with self._lock:
            self._console_available = console_available
            self._detector.invalidate()
        logger.debug("Console availability override set to %s", console_available)

    def get_console_available(self) -> bool | None:
        """Return the console availability override (``None`` if unset)."""
        with self._lock:
            return self._console_available

    def configure(self, settings: OutputSettings) -> None:
        """Apply a settings snapshot (mode and console override).

        Args:
            settings (OutputSettings): The settings to apply.
        """
        with self._lock:
            self.set_mode(settings.mode)
            self.set_console_available(settings.console_available)

    def reset(self) -> None:
        """Restore the initial state: detect mode, no override, empty memo."""
        with self._lock:
            self._mode = AnsiMode.DETECT
            self._console_available = None
            self._detector.invalidate()

    def is_enabled(self) -> bool:
        """Return whether ANSI output is currently enabled."""
        with self._lock:
            return self._detector.is_enabled(self._mode, self._console_available)

    def encode(self, element: AnsiElement) -> str:
        """Encode a single element if output is enabled.

        Args:
            element (AnsiElement): The element to encode.

        Returns:
            str: ``ESC[<param>m`` or the empty string. No reset is appended.
        """
        return encode_one(element, self.is_enabled())

    def format(self, *elements: object) -> str:
        """Render style elements and plain values into a string.

        Args:
            *elements (object): Style elements interleaved with plain values.

        Returns:
            str: The rendered text, with escape sequences only if output is enabled.
        """
        return format_tokens(elements, self.is_enabled())


_default_output: AnsiOutput = AnsiOutput()


def get_output() -> AnsiOutput:
    """Return the process-wide default `AnsiOutput`."""
    return _default_output


def set_mode(mode: AnsiMode | str) -> None:
    """Set the output mode of the default instance (see `AnsiOutput.set_mode`)."""
    _default_output.set_mode(mode)


def get_mode() -> AnsiMode:
    """Return the output mode of the default instance."""
    return _default_output.get_mode()


def set_console_available(console_available: bool | None) -> None:
    """Set the console override of the default instance."""
    _default_output.set_console_available(console_available)


def configure(settings: OutputSettings) -> None:
    """Apply ``settings`` to the default instance."""
    _default_output.configure(settings)


def is_enabled() -> bool:
    """Return whether the default instance currently emits ANSI."""
    return _default_output.is_enabled()


def encode(element: AnsiElement) -> str:
    """Encode a single element with the default instance."""
    return _default_output.encode(element)


def format(*elements: object) -> str:
    """Render ``elements`` with the default instance."""
    return _default_output.format(*elements)
