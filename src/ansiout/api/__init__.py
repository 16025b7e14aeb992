# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AnsiOut API (stable surface).

This module exposes a **small, typed API** for applications that want styled
terminal output which degrades to plain text when the destination cannot
interpret ANSI escape sequences. Internal modules remain private.

Versioning policy
-----------------
- The signatures and element types in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Usage
-----
```python
from ansiout import api

api.configure(api.load_settings())   # optional: honor config files / env
print(api.format(api.AnsiColor.RED, "error", api.AnsiColor.DEFAULT, ": disk full"))
```
"""

from __future__ import annotations

from ansiout.ansi.elements import (
    RESET,
    Ansi8BitColor,
    AnsiBackground,
    AnsiCode,
    AnsiColor,
    AnsiElement,
    AnsiStyle,
    Plain,
    element_from_name,
)
from ansiout.ansi.mode import AnsiMode
from ansiout.ansi.output import (
    AnsiOutput,
    configure,
    encode,
    format,
    get_mode,
    get_output,
    is_enabled,
    set_console_available,
    set_mode,
)
from ansiout.config.settings import OutputSettings, load_settings
from ansiout.constants import ANSIOUT_VERSION
from ansiout.core.errors import AnsiOutError, OutOfRangeError, UnknownElementError


def version() -> str:
    """Return the installed AnsiOut version (PEP 440)."""
    return ANSIOUT_VERSION


__all__ = [
    "RESET",
    "Ansi8BitColor",
    "AnsiBackground",
    "AnsiCode",
    "AnsiColor",
    "AnsiElement",
    "AnsiMode",
    "AnsiOutError",
    "AnsiOutput",
    "AnsiStyle",
    "OutOfRangeError",
    "OutputSettings",
    "Plain",
    "UnknownElementError",
    "configure",
    "element_from_name",
    "encode",
    "format",
    "get_mode",
    "get_output",
    "is_enabled",
    "load_settings",
    "set_console_available",
    "set_mode",
    "version",
]
