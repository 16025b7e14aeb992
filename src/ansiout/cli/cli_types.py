# topmark:header:start
#
#   project      : AnsiOut
#   file         : cli_types.py
#   file_relpath : src/ansiout/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for AnsiOut.

Custom Click parameter types converting command-line strings into AnsiOut
domain values: keyed enums (`AnsiMode`, `OutputFormat`) and styling elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from ansiout.ansi.elements import AnsiElement, element_from_name
from ansiout.core.enum_mixins import KeyedStrEnum
from ansiout.core.errors import OutOfRangeError, UnknownElementError

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

KS = TypeVar("KS", bound=KeyedStrEnum)


class OutputFormat(KeyedStrEnum):
    """Output format for informational commands."""

    TEXT = ("text", "Human-readable text", ("default", "plain"))
    JSON = ("json", "JSON document")


class EnumChoiceParam(ParamTypeBase, Generic[KS]):
    """A Click parameter type that converts a string to a member of a `KeyedStrEnum`.

    Keys, member names and aliases are accepted (case-insensitive).
    """

    enum_cls: type[KS]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[KS]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [e.value for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | KS | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KS | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: KS | None = self.enum_cls.parse(value)
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_ANSIOUT_COMPLETE=bash_source ansiout)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class ElementParam(ParamTypeBase):
    """A Click parameter type resolving element names (``red``, ``bg_blue``, ``fg:208``)."""

    name = "element"

    def convert(
        self,
        value: str | AnsiElement,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> AnsiElement:
        """Resolve ``value`` with `element_from_name`."""
        if isinstance(value, AnsiElement):
            return value
        try:
            return element_from_name(value)
        except (UnknownElementError, OutOfRangeError) as exc:
            raise click.BadParameter(str(exc), param=param, ctx=ctx) from exc
