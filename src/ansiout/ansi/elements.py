# topmark:header:start
#
#   project      : AnsiOut
#   file         : elements.py
#   file_relpath : src/ansiout/ansi/elements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI element model: the closed set of tokens that can appear in a styled sequence.

A styled sequence is an ordered list of *tokens*. Every token is either:

- a style element (`AnsiElement` subclass): `AnsiColor`, `AnsiBackground`,
  `AnsiStyle`, `AnsiCode` or `Ansi8BitColor`; or
- a `Plain` value wrapping any other object.

Style elements only know their *parameter text* (``"31"``, ``"38;5;200"``).
Bracketing (``ESC[`` ... ``m``), joining and the trailing reset are the job of
[`ansiout.ansi.encoder`][ansiout.ansi.encoder]; nothing else builds escape text.

All tokens are immutable value objects.

Example:
    ```python
    from ansiout.ansi.elements import Ansi8BitColor, AnsiColor, Plain

    AnsiColor.RED.render()                 # '31'
    Ansi8BitColor.foreground(208).render() # '38;5;208'
    Plain(42).render()                     # '42'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final, TypeAlias

from ansiout.constants import PALETTE_MAX, PALETTE_MIN
from ansiout.core.enum_mixins import enum_from_name, norm_token
from ansiout.core.errors import OutOfRangeError, UnknownElementError


class AnsiElement:
    """Base class for every style token.

    Subclasses implement `render()` to return the escape-sequence parameter text.
    ``str(element)`` is the same as ``element.render()``.
    """

    is_style: ClassVar[bool] = True

    def render(self) -> str:
        """Return the escape-sequence parameter text of this element."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Plain:
    """A non-styling value, rendered via its natural string form.

    ``None`` renders as the empty string.

    Attributes:
        value (object): The wrapped value.
    """

    is_style: ClassVar[bool] = False

    value: object

    def render(self) -> str:
        """Return ``str(value)`` (or ``""`` for ``None``)."""
        if self.value is None:
            return ""
        return str(self.value)

    def __str__(self) -> str:
        return self.render()


Token: TypeAlias = "AnsiElement | Plain"


class _NamedElement(AnsiElement, Enum):
    """Enum-backed element whose value is its ANSI parameter text."""

    def render(self) -> str:
        return str(self.value)


class AnsiColor(_NamedElement):
    """Foreground colors (SGR 30-37, 39 and the bright 90-97 range)."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    DEFAULT = "39"
    BRIGHT_BLACK = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"


class AnsiBackground(_NamedElement):
    """Background colors (SGR 40-47, 49 and the bright 100-107 range)."""

    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    MAGENTA = "45"
    CYAN = "46"
    WHITE = "47"
    DEFAULT = "49"
    BRIGHT_BLACK = "100"
    BRIGHT_RED = "101"
    BRIGHT_GREEN = "102"
    BRIGHT_YELLOW = "103"
    BRIGHT_BLUE = "104"
    BRIGHT_MAGENTA = "105"
    BRIGHT_CYAN = "106"
    BRIGHT_WHITE = "107"


class AnsiStyle(_NamedElement):
    """Text attributes."""

    NORMAL = "0"
    BOLD = "1"
    FAINT = "2"
    ITALIC = "3"
    UNDERLINE = "4"


@dataclass(frozen=True)
class AnsiCode(AnsiElement):
    """An element identified by an arbitrary numeric parameter string (e.g. ``"0;39"``).

    Attributes:
        code (str): The parameter text, emitted verbatim.
    """

    code: str

    def render(self) -> str:
        return self.code


class Channel(Enum):
    """Target of an 8-bit palette color; the value is the parameter prefix."""

    FOREGROUND = "38;5;"
    BACKGROUND = "48;5;"


@dataclass(frozen=True)
class Ansi8BitColor(AnsiElement):
    """A foreground or background color from the 256-color palette.

    Two instances are equal iff channel and index match.

    Attributes:
        channel (Channel): Foreground or background.
        index (int): Palette index in ``[0, 255]``.

    Raises:
        TypeError: If ``index`` is not an ``int`` (``bool`` included).
        OutOfRangeError: If ``index`` lies outside ``[0, 255]``.
    """

    channel: Channel
    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Palette index must be an int, got {type(self.index).__name__}")
        if not PALETTE_MIN <= self.index <= PALETTE_MAX:
            raise OutOfRangeError(self.index)

    @classmethod
    def foreground(cls, index: int) -> Ansi8BitColor:
        """Return the foreground palette color for ``index``."""
        return cls(Channel.FOREGROUND, index)

    @classmethod
    def background(cls, index: int) -> Ansi8BitColor:
        """Return the background palette color for ``index``."""
        return cls(Channel.BACKGROUND, index)

    def render(self) -> str:
        return f"{self.channel.value}{self.index}"


# Reset parameter: "0;" + the default foreground code
RESET: Final[AnsiCode] = AnsiCode(f"0;{AnsiColor.DEFAULT.render()}")


def coerce_token(value: object) -> Token:
    """Return ``value`` as a token, wrapping non-tokens in `Plain`.

    Args:
        value (object): An `AnsiElement`, a `Plain`, or any other object.

    Returns:
        Token: The token to feed to the encoder.
    """
    if isinstance(value, (AnsiElement, Plain)):
        return value
    return Plain(value)


_BACKGROUND_PREFIXES: Final[tuple[str, ...]] = ("bg_", "on_")


def _palette_index(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise UnknownElementError(name) from None


def element_from_name(name: str) -> AnsiElement:
    """Resolve a human-friendly element name.

    Accepted forms (case-insensitive, ``-`` and ``_`` interchangeable):

    - foreground colors: ``red``, ``bright-red``, ``default``
    - background colors: ``bg_red``, ``bg-bright-blue``, ``on_red``
    - attributes: ``bold``, ``faint``, ``italic``, ``underline``, ``normal``
    - ``reset``
    - palette colors: ``fg:208``, ``bg:17``

    Args:
        name (str): The element name.

    Returns:
        AnsiElement: The resolved element.

    Raises:
        UnknownElementError: If ``name`` does not denote a known element.
        OutOfRangeError: If a palette index lies outside ``[0, 255]``.
    """
    if ":" in name:
        head, _, raw = name.partition(":")
        prefix: str = norm_token(head)
        if prefix == "fg":
            return Ansi8BitColor.foreground(_palette_index(name, raw))
        if prefix == "bg":
            return Ansi8BitColor.background(_palette_index(name, raw))
        raise UnknownElementError(name)

    token: str = norm_token(name)
    if token == "reset":
        return RESET

    for prefix in _BACKGROUND_PREFIXES:
        if token.startswith(prefix):
            background = enum_from_name(
                AnsiBackground, token.removeprefix(prefix), case_insensitive=True
            )
            if background is None:
                raise UnknownElementError(name)
            return background

    color = enum_from_name(AnsiColor, token, case_insensitive=True)
    if color is not None:
        return color
    style = enum_from_name(AnsiStyle, token, case_insensitive=True)
    if style is not None:
        return style
    raise UnknownElementError(name)
