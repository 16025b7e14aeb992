# topmark:header:start
#
#   project      : AnsiOut
#   file         : detect.py
#   file_relpath : src/ansiout/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnsiOut `detect` command.

Reports the effective ANSI output decision and the inputs it was made from.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from ansiout.ansi.elements import AnsiColor, AnsiStyle
from ansiout.cli.cli_types import EnumChoiceParam, OutputFormat
from ansiout.config.logging import get_logger
from ansiout.constants import VALUE_NOT_SET

if TYPE_CHECKING:
    from ansiout.ansi.output import AnsiOutput
    from ansiout.cli.console import ClickConsole
    from ansiout.config.logging import AnsiOutLogger

logger: AnsiOutLogger = get_logger(__name__)


def collect_detection_report(output: AnsiOutput) -> dict[str, Any]:
    """Gather the detection inputs and the decision for ``output``.

    Args:
        output (AnsiOutput): The output whose state is reported.

    Returns:
        dict[str, Any]: ``mode``, ``console_available`` (override or ``None``),
        ``console_attached`` (probe result or ``None`` on probe failure),
        ``os_name`` and ``enabled``.
    """
    detector = output.detector
    try:
        console_attached: bool | None = bool(detector.console_probe())
    except Exception as exc:
        logger.debug("Console probe failed: %s", exc)
        console_attached = None
    try:
        os_name: str | None = detector.os_name_probe()
    except Exception as exc:
        logger.debug("OS name probe failed: %s", exc)
        os_name = None

    return {
        "mode": output.get_mode().value,
        "console_available": output.get_console_available(),
        "console_attached": console_attached,
        "os_name": os_name,
        "enabled": output.is_enabled(),
    }


def _show(value: object) -> str:
    return VALUE_NOT_SET if value is None else str(value).lower()


@click.command(
    name="detect",
    help="Show whether ANSI output is enabled and why.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def detect_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Show whether ANSI output is enabled and why.

    Args:
        ctx (click.Context): Click context holding the console.
        output_format (OutputFormat | None): Output format; text by default.
    """
    console: ClickConsole = ctx.obj["console"]
    report: dict[str, Any] = collect_detection_report(console.output)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(report))
        return

    width: int = max(len(key) for key in report)
    for key, value in report.items():
        label: str = key.replace("_", " ")
        if key == "enabled":
            color = AnsiColor.GREEN if value else AnsiColor.RED
            shown: str = console.styled(_show(value), color, AnsiStyle.BOLD)
        else:
            shown = _show(value)
        console.print(f"{label:<{width}} : {shown}")
