# topmark:header:start
#
#   project      : AnsiOut
#   file         : __main__.py
#   file_relpath : src/ansiout/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AnsiOut via ``python -m ansiout``.

Delegates to :func:`ansiout.cli.main.cli`, the single authoritative CLI entry
point.

Examples:
    Render a colored greeting::

        python -m ansiout --color always render --fg green "hello"
"""

from __future__ import annotations

from ansiout.cli.main import cli

if __name__ == "__main__":
    cli()
