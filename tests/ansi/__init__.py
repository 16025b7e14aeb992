# topmark:header:start
#
#   project      : AnsiOut
#   file         : __init__.py
#   file_relpath : tests/ansi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
