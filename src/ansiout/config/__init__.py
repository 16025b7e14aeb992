# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for AnsiOut: logging setup and output settings resolution."""

from __future__ import annotations

from ansiout.config.settings import OutputSettings, load_settings

__all__ = [
    "OutputSettings",
    "load_settings",
]
