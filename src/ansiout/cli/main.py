# topmark:header:start
#
#   project      : AnsiOut
#   file         : main.py
#   file_relpath : src/ansiout/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut Click CLI: a group with shared output options plus subcommands.

Key ideas:
- Group-level options are resolved once (config file, environment, flags) and
  applied to the process-wide `AnsiOutput`.
- A `ClickConsole` bound to that output is placed into ``ctx.obj`` so every
  subcommand styles its output consistently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ansiout.ansi.output import get_output
from ansiout.cli.commands.detect import detect_command
from ansiout.cli.commands.palette import palette_command
from ansiout.cli.commands.render import render_command
from ansiout.cli.commands.version import version_command
from ansiout.cli.console import ClickConsole
from ansiout.cli.errors import AnsiOutConfigError
from ansiout.cli.options import (
    apply_output_overrides,
    common_output_options,
    common_verbose_options,
    resolve_verbosity,
)
from ansiout.config.logging import get_logger, resolve_env_log_level, setup_logging
from ansiout.config.settings import OutputSettings, load_settings
from ansiout.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from ansiout.ansi.mode import AnsiMode
    from ansiout.config.logging import AnsiOutLogger

logger: AnsiOutLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    ansi_mode: AnsiMode | None,
    no_color: bool,
    console_available: bool | None,
    config_path: Path | None,
) -> None:
    """Initialize logging and ANSI output state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        ansi_mode (AnsiMode | None): Explicit mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces ANSI off.
        console_available (bool | None): Console override from the command line.
        config_path (Path | None): Explicit configuration file.

    Raises:
        AnsiOutConfigError: If the configuration contains invalid values.
    """
    ctx.ensure_object(dict)

    level = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    try:
        settings: OutputSettings = load_settings(config_path)
    except ConfigError as exc:
        raise AnsiOutConfigError(str(exc)) from exc

    settings = apply_output_overrides(
        settings,
        ansi_mode=ansi_mode,
        no_color=no_color,
        console_available=console_available,
    )
    output = get_output()
    output.configure(settings)
    logger.debug("CLI output settings: %s", settings)

    ctx.obj["settings"] = settings
    ctx.obj["console"] = ClickConsole(output=output)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="AnsiOut CLI: render ANSI-styled text and inspect terminal capability detection.",
)
@common_verbose_options
@common_output_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    ansi_mode: AnsiMode | None,
    no_color: bool,
    console_available: bool | None,
    config_path: Path | None,
) -> None:
    """Entry point for the AnsiOut CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        ansi_mode=ansi_mode,
        no_color=no_color,
        console_available=console_available,
        config_path=config_path,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(detect_command)

cli.add_command(palette_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
