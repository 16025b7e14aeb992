# topmark:header:start
#
#   project      : AnsiOut
#   file         : encoder.py
#   file_relpath : src/ansiout/ansi/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn a sequence of tokens into a string, with or without ANSI escape sequences.

Both functions are pure: the caller decides whether styling is enabled (see
[`ansiout.ansi.detector`][ansiout.ansi.detector]) and passes the flag in.

Rules when styling is enabled:

- Adjacent style elements are joined into **one** escape sequence with ``;``
  (``RED, BOLD`` becomes ``ESC[31;1m``).
- A plain value closes any open sequence with ``m`` before its text.
- If any style element appeared, a reset (``0;39``) is appended: joined into the
  still-open sequence, or as a fresh ``ESC[0;39m``.
- Without style elements nothing is added; the output is the plain text.

When styling is disabled, every style element vanishes and only plain text remains.

Note:
    `encode_one` wraps a single element and never appends a reset, whereas
    `format_tokens` always resets after styled output. Callers that use
    `encode_one` are responsible for resetting themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ansiout.ansi.elements import RESET, coerce_token
from ansiout.constants import ENCODE_END, ENCODE_JOIN, ENCODE_START

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ansiout.ansi.elements import AnsiElement


def encode_one(element: AnsiElement, enabled: bool) -> str:
    """Encode a single element as a complete escape sequence.

    Args:
        element (AnsiElement): The element to encode.
        enabled (bool): Whether ANSI output is enabled.

    Returns:
        str: ``ESC[<param>m`` when enabled, ``""`` otherwise.
    """
    if not enabled:
        return ""
    return f"{ENCODE_START}{element.render()}{ENCODE_END}"


def format_tokens(tokens: Iterable[object], enabled: bool) -> str:
    """Render ``tokens`` into a single string.

    Args:
        tokens (Iterable[object]): Style elements and plain values, in output order.
            Values that are not tokens are treated as `Plain`.
        enabled (bool): Whether ANSI output is enabled.

    Returns:
        str: The rendered text.
    """
    if enabled:
        return _build_enabled(tokens)
    return _build_disabled(tokens)


def _build_enabled(tokens: Iterable[object]) -> str:
    parts: list[str] = []
    writing_ansi: bool = False
    contains_encoding: bool = False

    for value in tokens:
        token = coerce_token(value)
        if token.is_style:
            contains_encoding = True
            parts.append(ENCODE_JOIN if writing_ansi else ENCODE_START)
            writing_ansi = True
        elif writing_ansi:
            parts.append(ENCODE_END)
            writing_ansi = False
        parts.append(token.render())

    if contains_encoding:
        parts.append(ENCODE_JOIN if writing_ansi else ENCODE_START)
        parts.append(RESET.render())
        parts.append(ENCODE_END)

    return "".join(parts)


def _build_disabled(tokens: Iterable[object]) -> str:
    parts: list[str] = []
    for value in tokens:
        token = coerce_token(value)
        if not token.is_style:
            parts.append(token.render())
    return "".join(parts)
