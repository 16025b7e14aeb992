# topmark:header:start
#
#   project      : AnsiOut
#   file         : io.py
#   file_relpath : src/ansiout/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads AnsiOut configuration from on-disk TOML files (``ansiout.toml`` /
``pyproject.toml``). Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ansiout.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from ansiout.config.logging import AnsiOutLogger

TomlTable = dict[str, Any]

logger: AnsiOutLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def get_table(data: TomlTable, *path: str) -> TomlTable | None:
    """Return the nested table at ``path``, or ``None`` if any step is missing.

    Args:
        data (TomlTable): The parsed document.
        *path (str): Table keys, outermost first (e.g. ``"tool", "ansiout"``).

    Returns:
        TomlTable | None: The nested table, or ``None``.
    """
    current: object = data
    for key in path:
        if not is_toml_table(current):
            return None
        current = current.get(key)
    return current if is_toml_table(current) else None


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``ansiout.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if is_toml_table(data_any) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
