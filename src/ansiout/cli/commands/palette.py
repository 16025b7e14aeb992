# topmark:header:start
#
#   project      : AnsiOut
#   file         : palette.py
#   file_relpath : src/ansiout/cli/commands/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut `palette` command: print the 256-color palette."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ansiout.ansi.elements import Ansi8BitColor
from ansiout.constants import PALETTE_MAX, PALETTE_MIN

if TYPE_CHECKING:
    from ansiout.ansi.output import AnsiOutput
    from ansiout.cli.console import ClickConsole

COLUMNS = 16


def palette_rows(output: AnsiOutput, *, background: bool = False) -> list[str]:
    """Render the palette as rows of ``COLUMNS`` right-aligned indices.

    Args:
        output (AnsiOutput): Output used to style each cell.
        background (bool): Color the cell background instead of the text.

    Returns:
        list[str]: One string per row.
    """
    factory = Ansi8BitColor.background if background else Ansi8BitColor.foreground
    rows: list[str] = []
    for start in range(PALETTE_MIN, PALETTE_MAX + 1, COLUMNS):
        cells: list[str] = [
            output.format(factory(index), f"{index:>4}")
            for index in range(start, min(start + COLUMNS, PALETTE_MAX + 1))
        ]
        rows.append("".join(cells))
    return rows


@click.command(
    name="palette",
    help="Print the 256-color palette.",
)
@click.option("--background", is_flag=True, help="Color cell backgrounds instead of text.")
@click.pass_context
def palette_command(ctx: click.Context, background: bool) -> None:
    """Print the 256-color palette.

    Args:
        ctx (click.Context): Click context holding the console.
        background (bool): Color cell backgrounds instead of text.
    """
    console: ClickConsole = ctx.obj["console"]
    for row in palette_rows(console.output, background=background):
        console.print(row)
