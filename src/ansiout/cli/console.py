# topmark:header:start
#
#   project      : AnsiOut
#   file         : console.py
#   file_relpath : src/ansiout/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Styling goes through an `AnsiOutput`, so the CLI honors the
same detect/always/never decision as library callers.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import click

from ansiout.ansi.elements import AnsiColor
from ansiout.ansi.output import get_output

if TYPE_CHECKING:
    from ansiout.ansi.elements import AnsiElement
    from ansiout.ansi.output import AnsiOutput


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, *elements: AnsiElement) -> str:
        """Return ``text`` styled with ``elements`` (plain if styling is disabled)."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        output (AnsiOutput | None): ANSI output used for styling; defaults to the
            process-wide instance.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    output: AnsiOutput
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        output: AnsiOutput | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.output = output or get_output()
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @property
    def enable_color(self) -> bool:
        """Whether ANSI escape sequences are emitted."""
        return self.output.is_enabled()

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.echo(
            self.styled(text, AnsiColor.YELLOW), nl=nl, file=self.err, color=self.enable_color
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, *elements: AnsiElement) -> str:
        """Return ``text`` preceded by ``elements`` and followed by a reset.

        Args:
            text (str): Text to style.
            *elements (AnsiElement): Style elements applied to the text.

        Returns:
            str: The styled text (or plain text if ANSI output is disabled).
        """
        return self.output.format(*elements, text)
