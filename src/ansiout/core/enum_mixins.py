# topmark:header:start
#
#   project      : AnsiOut
#   file         : enum_mixins.py
#   file_relpath : src/ansiout/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for AnsiOut (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_name(enum_cls, name, *, case_insensitive=False)``:
        Typed lookup by ``name`` from ``__members__``. Returns ``None`` on miss.
    - ``KeyedStrEnum``:
        ``str`` Enum whose ``.value`` is a stable machine key, with a human
        label and parse aliases.

Example:
    ```python
    from ansiout.core.enum_mixins import KeyedStrEnum, enum_from_name

    class Switch(KeyedStrEnum):
        ON = ("on", "Switched on", ("yes", "true"))
        OFF = ("off", "Switched off", ("no", "false"))

    assert Switch.parse("YES") is Switch.ON
    assert enum_from_name(Switch, "off", case_insensitive=True) is Switch.OFF
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

_E = TypeVar("_E", bound=Enum)
_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like string to match member names and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member for ``key_name`` from ``enum_cls.__members__``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g., ``'RED'``). If ``None``, returns ``None``.
        case_insensitive (bool): If True, the name is normalized with `norm_token`
            and upper-cased before lookup, so ``"bright-red"`` finds ``BRIGHT_RED``.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    target: str = norm_token(key_name).upper() if case_insensitive else key_name
    member: Any | None = getattr(enum_cls, "__members__", {}).get(target)
    return cast("_E | None", member)


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key  # stable machine value
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self.value

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `norm_token()`.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)

        for m in cls:
            if token == norm_token(m.value):
                return m
            if token == norm_token(m.name):
                return m
            for a in m.aliases:
                if token == norm_token(a):
                    return m
        return None
