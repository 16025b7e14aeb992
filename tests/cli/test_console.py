# topmark:header:start
#
#   project      : AnsiOut
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `ClickConsole` and the CLI parameter types."""

from __future__ import annotations

import io

import click
import pytest

from ansiout.ansi.elements import Ansi8BitColor, AnsiColor
from ansiout.ansi.mode import AnsiMode
from ansiout.ansi.output import AnsiOutput
from ansiout.cli.cli_types import ElementParam, EnumChoiceParam, OutputFormat
from ansiout.cli.console import ClickConsole
from tests.conftest import ESC


def _console(mode: AnsiMode) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    output = AnsiOutput()
    output.set_mode(mode)
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(output=output, out=out, err=err), out, err


def test_console_styles_when_enabled() -> None:
    """Styled text and warnings carry escape sequences when output is enabled."""
    console, out, err = _console(AnsiMode.ALWAYS)
    assert console.enable_color is True
    console.print(console.styled("ok", AnsiColor.GREEN))
    console.warn("careful")
    assert out.getvalue() == f"{ESC}[32mok{ESC}[0;39m\n"
    assert err.getvalue() == f"{ESC}[33mcareful{ESC}[0;39m\n"


def test_console_plain_when_disabled() -> None:
    """Nothing is styled when output is disabled."""
    console, out, err = _console(AnsiMode.NEVER)
    console.print(console.styled("ok", AnsiColor.GREEN), nl=False)
    console.error("bad")
    assert out.getvalue() == "ok"
    assert err.getvalue() == "bad\n"


def test_enum_choice_param() -> None:
    """Keys and aliases convert; other values fail with the valid choices."""
    param = EnumChoiceParam(OutputFormat)
    assert param.convert("plain", None, None) is OutputFormat.TEXT
    assert param.convert(OutputFormat.JSON, None, None) is OutputFormat.JSON
    with pytest.raises(click.BadParameter, match="text, json"):
        param.convert("yaml", None, None)
    ctx = click.Context(click.Command("x"))
    items = param.shell_complete(ctx, click.Option(["--f"]), "j")
    assert [item.value for item in items] == ["json"]


def test_element_param() -> None:
    """Element names convert; bad names and indices fail."""
    param = ElementParam()
    assert param.convert("fg:12", None, None) == Ansi8BitColor.foreground(12)
    with pytest.raises(click.BadParameter):
        param.convert("purple", None, None)
    with pytest.raises(click.BadParameter):
        param.convert("bg:300", None, None)
