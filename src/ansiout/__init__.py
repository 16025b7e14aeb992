# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : src/ansiout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut package.

AnsiOut renders sequences of plain values interleaved with ANSI styling
elements, emitting escape sequences only when the output destination is known
(or detected) to understand them. The stable programmatic surface lives in
`ansiout.api`; a small Click CLI is available as ``ansiout``.
"""

from __future__ import annotations
