# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut CLI subcommands."""

from __future__ import annotations
