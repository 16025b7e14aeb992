# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/ansi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI styling engine: element model, encoder, capability detection and output facade."""

from __future__ import annotations
