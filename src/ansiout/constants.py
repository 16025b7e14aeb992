# topmark:header:start
#
#   project      : AnsiOut
#   file         : constants.py
#   file_relpath : src/ansiout/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

ANSIOUT_VERSION: str = get_version("ansiout")

# Escape sequence wire format: ESC "[" params (joined by ";") "m"
ENCODE_START: Final[str] = "\033["
ENCODE_JOIN: Final[str] = ";"
ENCODE_END: Final[str] = "m"

# 8-bit palette bounds (inclusive)
PALETTE_MIN: Final[int] = 0
PALETTE_MAX: Final[int] = 255

# Configuration file names and TOML sections
CONFIG_FILE_NAME: Final[str] = "ansiout.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "ansiout")

# Environment variables
ENV_LOG_LEVEL: Final[str] = "ANSIOUT_LOG_LEVEL"
ENV_ANSI_MODE: Final[str] = "ANSIOUT_ANSI"
ENV_CONSOLE_AVAILABLE: Final[str] = "ANSIOUT_CONSOLE_AVAILABLE"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
ENV_FORCE_COLOR: Final[str] = "FORCE_COLOR"

VALUE_NOT_SET: str = "<not set>"
