# topmark:header:start
#
#   project      : AnsiOut
#   file         : errors.py
#   file_relpath : src/ansiout/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AnsiOut CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ansiout.ansi.elements import AnsiColor
from ansiout.cli.exit_codes import ExitCode


class AnsiOutCliError(click.ClickException):
    """Base class for all AnsiOut CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), AnsiColor.BRIGHT_RED))
                return
        super().show(file)


class AnsiOutUsageError(AnsiOutCliError):
    """Invalid command-line usage (bad element names, palette indices, flags)."""

    exit_code = ExitCode.USAGE_ERROR


class AnsiOutConfigError(AnsiOutCliError):
    """Invalid configuration value in a TOML file or the environment."""

    exit_code = ExitCode.CONFIG_ERROR
