# topmark:header:start
#
#   project      : AnsiOut
#   file         : mode.py
#   file_relpath : src/ansiout/ansi/mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI output mode: detect, always or never."""

from __future__ import annotations

from ansiout.core.enum_mixins import KeyedStrEnum


class AnsiMode(KeyedStrEnum):
    """User intent for ANSI escape output.

    Attributes:
        DETECT: Emit escape sequences only when the capability detector says the
            output destination supports them (the default).
        ALWAYS: Always emit escape sequences.
        NEVER: Never emit escape sequences; style elements are dropped.

    Example:
        >>> AnsiMode.parse("auto") is AnsiMode.DETECT
        True
        >>> AnsiMode.parse("off") is AnsiMode.NEVER
        True
    """

    DETECT = ("detect", "Detect ANSI support", ("auto",))
    ALWAYS = ("always", "Always emit ANSI", ("on", "true", "yes", "force"))
    NEVER = ("never", "Never emit ANSI", ("off", "false", "no", "none"))
