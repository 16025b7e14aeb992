# topmark:header:start
#
#   project      : AnsiOut
#   file         : test_palette.py
#   file_relpath : tests/cli/test_palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `palette` command."""

from __future__ import annotations

from ansiout.ansi.mode import AnsiMode
from ansiout.ansi.output import AnsiOutput
from ansiout.cli.commands.palette import COLUMNS, palette_rows
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import ESC, mark_cli


def test_palette_rows_plain() -> None:
    """Sixteen rows of sixteen right-aligned indices."""
    output = AnsiOutput()
    output.set_mode(AnsiMode.NEVER)
    rows = palette_rows(output)
    assert len(rows) == 256 // COLUMNS
    assert rows[0] == "".join(f"{i:>4}" for i in range(16))
    assert rows[-1].endswith(" 255")


def test_palette_rows_styled() -> None:
    """Each cell carries its own palette color and a reset."""
    output = AnsiOutput()
    output.set_mode(AnsiMode.ALWAYS)
    assert palette_rows(output)[0].startswith(f"{ESC}[38;5;0m   0{ESC}[0;39m")
    assert palette_rows(output, background=True)[15].endswith(f"{ESC}[48;5;255m 255{ESC}[0;39m")


@mark_cli
def test_palette_command() -> None:
    """The command prints one line per row."""
    result = run_cli(["--color", "never", "palette"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 16
    assert lines[1].split() == [str(i) for i in range(16, 32)]


@mark_cli
def test_palette_background_command() -> None:
    """``--background`` colors the cell backgrounds."""
    result = run_cli(["--color", "always", "palette", "--background"])
    assert_SUCCESS(result)
    assert f"{ESC}[48;5;42m" in result.output
    assert f"{ESC}[38;5;" not in result.output
