# topmark:header:start
#
#   project      : AnsiOut
#   file         : render.py
#   file_relpath : src/ansiout/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut `render` command.

Renders plain text interleaved with styling elements. Arguments of the form
``@name`` are elements (see `element_from_name`); ``@@text`` is the literal
``@text``. Everything else is plain text, concatenated without separators:

```bash
ansiout --color always render @red @bold "error" @default ": disk full"
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ansiout.ansi.elements import Plain, element_from_name
from ansiout.cli.cli_types import ElementParam
from ansiout.cli.errors import AnsiOutUsageError
from ansiout.core.errors import OutOfRangeError, UnknownElementError

if TYPE_CHECKING:
    from ansiout.ansi.elements import AnsiElement, Token
    from ansiout.cli.console import ClickConsole

ELEMENT_PREFIX = "@"


def parse_render_args(args: tuple[str, ...] | list[str]) -> list[Token]:
    """Turn command-line arguments into tokens.

    Args:
        args (tuple[str, ...] | list[str]): Raw arguments.

    Returns:
        list[Token]: Style elements and plain values, in order.

    Raises:
        AnsiOutUsageError: If an ``@name`` argument is not a known element.
    """
    tokens: list[Token] = []
    for arg in args:
        if arg.startswith(ELEMENT_PREFIX * 2):
            tokens.append(Plain(arg[1:]))
        elif arg.startswith(ELEMENT_PREFIX) and len(arg) > 1:
            try:
                tokens.append(element_from_name(arg[1:]))
            except (UnknownElementError, OutOfRangeError) as exc:
                raise AnsiOutUsageError(str(exc)) from exc
        else:
            tokens.append(Plain(arg))
    return tokens


@click.command(
    name="render",
    help="Render TEXT with ANSI styling. Use @name arguments for inline elements.",
)
@click.argument("text", nargs=-1, required=True)
@click.option("--fg", "fg", type=ElementParam(), default=None, help="Leading foreground element.")
@click.option("--bg", "bg", type=ElementParam(), default=None, help="Leading background element.")
@click.option(
    "-s",
    "--style",
    "styles",
    type=ElementParam(),
    multiple=True,
    help="Leading element (repeatable), e.g. bold, underline, fg:208.",
)
@click.option("-n", "--no-newline", is_flag=True, help="Do not print a trailing newline.")
@click.pass_context
def render_command(
    ctx: click.Context,
    text: tuple[str, ...],
    fg: AnsiElement | None,
    bg: AnsiElement | None,
    styles: tuple[AnsiElement, ...],
    no_newline: bool,
) -> None:
    """Render TEXT with ANSI styling.

    Args:
        ctx (click.Context): Click context holding the console.
        text (tuple[str, ...]): Text pieces and inline ``@name`` elements.
        fg (AnsiElement | None): Leading foreground element.
        bg (AnsiElement | None): Leading background element.
        styles (tuple[AnsiElement, ...]): Additional leading elements.
        no_newline (bool): Suppress the trailing newline.
    """
    console: ClickConsole = ctx.obj["console"]

    leading: list[AnsiElement] = [e for e in (fg, bg) if e is not None]
    leading.extend(styles)

    rendered: str = console.output.format(*leading, *parse_render_args(text))
    console.print(rendered, nl=not no_newline)
