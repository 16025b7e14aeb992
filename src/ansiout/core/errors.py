# topmark:header:start
#
#   project      : AnsiOut
#   file         : errors.py
#   file_relpath : src/ansiout/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for AnsiOut.

Only a handful of conditions can fail in AnsiOut:

- `OutOfRangeError`: an 8-bit palette index outside ``[0, 255]``. Raised at
  construction time and propagated to the caller.
- `UnknownElementError`: a styling element name that cannot be resolved.
- `ConfigError`: an invalid configuration *value* (TOML or environment).
- `ProbeFailure`: raised by environment probes. It never escapes the
  capability detector, which downgrades it to "not ANSI capable".

Formatting and encoding never raise for well-formed elements.
"""

from __future__ import annotations


class AnsiOutError(Exception):
    """Base class for all AnsiOut errors."""


class OutOfRangeError(AnsiOutError, ValueError):
    """Raised when an 8-bit palette index lies outside ``[0, 255]``.

    Attributes:
        index (int): The rejected index.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Code must be between 0 and 255 (got {index})")


class UnknownElementError(AnsiOutError, LookupError):
    """Raised when a styling element name cannot be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown ANSI element: {name!r}")


class ConfigError(AnsiOutError):
    """Raised for invalid configuration values.

    Attributes:
        source (str): Where the offending value came from (file path or env var).
        key (str): The offending key.
    """

    def __init__(self, message: str, *, source: str, key: str) -> None:
        self.source = source
        self.key = key
        super().__init__(f"{source}: {key}: {message}")


class ProbeFailure(AnsiOutError):
    """Raised by an environment probe that cannot answer its query."""
