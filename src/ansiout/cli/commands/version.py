# topmark:header:start
#
#   project      : AnsiOut
#   file         : version.py
#   file_relpath : src/ansiout/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut `version` command.

Prints the current AnsiOut version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ansiout.ansi.elements import AnsiStyle
from ansiout.cli.cli_types import EnumChoiceParam, OutputFormat
from ansiout.constants import ANSIOUT_VERSION

if TYPE_CHECKING:
    from ansiout.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of AnsiOut.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Show the current version of AnsiOut.

    Args:
        ctx (click.Context): Click context holding the console.
        output_format (OutputFormat | None): Output format; text by default.
    """
    console: ClickConsole = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": ANSIOUT_VERSION}))
    else:
        console.print(console.styled(ANSIOUT_VERSION, AnsiStyle.BOLD))
