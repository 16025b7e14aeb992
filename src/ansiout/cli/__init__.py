# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for AnsiOut."""

from __future__ import annotations
