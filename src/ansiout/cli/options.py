# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/ansiout/cli/options.py
#   project      : AnsiOut
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the AnsiOut CLI.

This module centralizes reusable options (verbosity, ANSI output) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from ansiout.ansi.mode import AnsiMode
from ansiout.cli.cli_types import EnumChoiceParam
from ansiout.cli.errors import AnsiOutUsageError
from ansiout.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from ansiout.config.settings import OutputSettings

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or ``None`` when neither flag was given (the
        environment then decides).

    Raises:
        AnsiOutUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise AnsiOutUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["CRITICAL"]
    return None


def apply_output_overrides(
    settings: OutputSettings,
    *,
    ansi_mode: AnsiMode | None,
    no_color: bool,
    console_available: bool | None,
) -> OutputSettings:
    """Overlay command-line choices onto resolved settings.

    ``--no-color`` wins over ``--color``; both win over config files and the
    environment.

    Args:
        settings (OutputSettings): Settings resolved from files and environment.
        ansi_mode (AnsiMode | None): Value of ``--color`` (``None`` if not given).
        no_color (bool): Whether ``--no-color`` was given.
        console_available (bool | None): Value of ``--console-available`` /
            ``--no-console-available`` (``None`` if not given).

    Returns:
        OutputSettings: The effective settings.
    """
    if no_color:
        settings = replace(settings, mode=AnsiMode.NEVER)
    elif ansi_mode is not None:
        settings = replace(settings, mode=ansi_mode)
    if console_available is not None:
        settings = replace(settings, console_available=console_available)
    return settings


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Silence diagnostics.",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the ANSI output options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with output options added.

    Behavior:
        Adds --color with choices (detect, always, never; ``auto`` is accepted too).
        Adds --no-color flag that disables ANSI output.
        Adds --console-available/--no-console-available to skip console probing.
        Adds --config to select a configuration file explicitly.
    """
    f = click.option(
        "--color",
        "ansi_mode",
        type=EnumChoiceParam(AnsiMode),
        default=None,
        help="ANSI output: detect (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable ANSI output (equivalent to --color=never).",
    )(f)
    f = click.option(
        "--console-available/--no-console-available",
        "console_available",
        default=None,
        help="Declare whether a console is attached instead of probing the terminal.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (ansiout.toml or pyproject.toml). Discovered when omitted.",
    )(f)
    return f
