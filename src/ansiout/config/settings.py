# topmark:header:start
#
#   project      : AnsiOut
#   file         : settings.py
#   file_relpath : src/ansiout/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve ANSI output settings from defaults, TOML files and the environment.

Layers, lowest to highest precedence:

1. Defaults: ``mode = detect``, console availability unset.
2. TOML: the ``[output]`` table of ``ansiout.toml``, or ``[tool.ansiout.output]``
   in ``pyproject.toml``:

   ```toml
   [tool.ansiout.output]
   ansi = "detect"            # detect | always | never
   console-available = true   # omit to probe the terminal
   ```

3. Environment: ``NO_COLOR`` (set and not empty) forces ``never`` and ``FORCE_COLOR``
   (set, not ``"0"``) forces ``always``; the explicit ``ANSIOUT_ANSI`` and
   ``ANSIOUT_CONSOLE_AVAILABLE`` variables win over both conventions.

Unreadable or malformed TOML files are logged and skipped. Invalid *values*
raise [`ConfigError`][ansiout.core.errors.ConfigError].
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ansiout.ansi.mode import AnsiMode
from ansiout.config.io import get_table, load_toml_dict
from ansiout.config.logging import get_logger
from ansiout.constants import (
    CONFIG_FILE_NAME,
    ENV_ANSI_MODE,
    ENV_CONSOLE_AVAILABLE,
    ENV_FORCE_COLOR,
    ENV_NO_COLOR,
    PYPROJECT_FILE_NAME,
    PYPROJECT_SECTION,
)
from ansiout.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ansiout.config.io import TomlTable
    from ansiout.config.logging import AnsiOutLogger

logger: AnsiOutLogger = get_logger(__name__)

SECTION_OUTPUT: Final[str] = "output"
KEY_ANSI: Final[str] = "ansi"
KEY_CONSOLE_AVAILABLE: Final[str] = "console-available"

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class OutputSettings:
    """Immutable snapshot of the ANSI output configuration.

    Attributes:
        mode (AnsiMode): The output mode.
        console_available (bool | None): Known console availability, or ``None``
            to let the detector probe.
    """

    mode: AnsiMode = AnsiMode.DETECT
    console_available: bool | None = None


def _parse_mode(raw: object, *, source: str, key: str) -> AnsiMode:
    if not isinstance(raw, str):
        raise ConfigError(f"expected a string, got {type(raw).__name__}", source=source, key=key)
    mode: AnsiMode | None = AnsiMode.parse(raw)
    if mode is None:
        choices: str = ", ".join(m.value for m in AnsiMode)
        raise ConfigError(f"invalid mode {raw!r} (expected {choices})", source=source, key=key)
    return mode


def _parse_env_bool(raw: str, *, source: str) -> bool | None:
    token: str = raw.strip().lower()
    if not token:
        return None
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ConfigError(f"invalid boolean {raw!r}", source=source, key=source)


def settings_from_mapping(
    table: Mapping[str, object],
    *,
    source: str = "<mapping>",
    base: OutputSettings | None = None,
) -> OutputSettings:
    """Overlay an ``[output]`` table onto ``base``.

    Args:
        table (Mapping[str, object]): The ``output`` table (keys ``ansi`` and
            ``console-available``; ``console_available`` is accepted too).
        source (str): Label used in error messages.
        base (OutputSettings | None): Settings to overlay; defaults when omitted.

    Returns:
        OutputSettings: The merged settings.

    Raises:
        ConfigError: If a value has the wrong type or an unknown mode.
    """
    result: OutputSettings = base or OutputSettings()

    if KEY_ANSI in table:
        result = replace(result, mode=_parse_mode(table[KEY_ANSI], source=source, key=KEY_ANSI))

    for key in (KEY_CONSOLE_AVAILABLE, "console_available"):
        if key not in table:
            continue
        value: object = table[key]
        if not isinstance(value, bool):
            raise ConfigError(
                f"expected a boolean, got {type(value).__name__}", source=source, key=key
            )
        result = replace(result, console_available=value)

    unknown: set[str] = set(table) - {KEY_ANSI, KEY_CONSOLE_AVAILABLE, "console_available"}
    if unknown:
        logger.warning("%s: ignoring unknown output keys: %s", source, ", ".join(sorted(unknown)))
    return result


def settings_from_env(
    env: Mapping[str, str] | None = None,
    base: OutputSettings | None = None,
) -> OutputSettings:
    """Overlay environment variables onto ``base``.

    Args:
        env (Mapping[str, str] | None): Environment mapping; defaults to ``os.environ``.
        base (OutputSettings | None): Settings to overlay; defaults when omitted.

    Returns:
        OutputSettings: The merged settings.

    Raises:
        ConfigError: If ``ANSIOUT_ANSI`` or ``ANSIOUT_CONSOLE_AVAILABLE`` is invalid.
    """
    source: Mapping[str, str] = os.environ if env is None else env
    result: OutputSettings = base or OutputSettings()

    if source.get(ENV_NO_COLOR):
        result = replace(result, mode=AnsiMode.NEVER)
    force_color: str | None = source.get(ENV_FORCE_COLOR)
    if force_color and force_color != "0":
        result = replace(result, mode=AnsiMode.ALWAYS)

    raw_mode: str | None = source.get(ENV_ANSI_MODE)
    if raw_mode:
        result = replace(result, mode=_parse_mode(raw_mode, source=ENV_ANSI_MODE, key="value"))

    raw_console: str | None = source.get(ENV_CONSOLE_AVAILABLE)
    if raw_console is not None:
        console: bool | None = _parse_env_bool(raw_console, source=ENV_CONSOLE_AVAILABLE)
        if console is not None:
            result = replace(result, console_available=console)

    return result


def _output_table_for(path: Path) -> TomlTable | None:
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        return get_table(data, *PYPROJECT_SECTION, SECTION_OUTPUT)
    return get_table(data, SECTION_OUTPUT)


def _declares_ansiout(pyproject: Path) -> bool:
    return get_table(load_toml_dict(pyproject), *PYPROJECT_SECTION) is not None


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest configuration file, walking up from ``start``.

    In each directory ``ansiout.toml`` is preferred; a ``pyproject.toml`` only
    counts if it has a ``[tool.ansiout]`` table. The walk stops at the first
    directory containing ``.git``.

    Args:
        start (Path | None): Directory to start from; defaults to the CWD.

    Returns:
        Path | None: The configuration file, or ``None`` if none was found.
    """
    current: Path = (start or Path.cwd()).resolve()
    while True:
        candidate: Path = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = current / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _declares_ansiout(pyproject):
            return pyproject
        if (current / ".git").exists() or current.parent == current:
            return None
        current = current.parent


def load_settings(
    path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    start: Path | None = None,
) -> OutputSettings:
    """Resolve settings from defaults, a TOML file and the environment.

    Args:
        path (Path | None): Explicit configuration file. When omitted, the file is
            discovered with `discover_config_file` starting at ``start``.
        env (Mapping[str, str] | None): Environment mapping; defaults to ``os.environ``.
        start (Path | None): Discovery start directory; defaults to the CWD.

    Returns:
        OutputSettings: The resolved settings.

    Raises:
        ConfigError: If a configured value is invalid.
    """
    settings = OutputSettings()

    config_path: Path | None = path if path is not None else discover_config_file(start)
    if config_path is not None:
        table: TomlTable | None = _output_table_for(config_path)
        if table is not None:
            logger.debug("Loading output settings from %s", config_path)
            settings = settings_from_mapping(table, source=str(config_path), base=settings)

    settings = settings_from_env(env, settings)
    logger.debug(
        "Resolved output settings: mode=%s console_available=%s",
        settings.mode.value,
        settings.console_available,
    )
    return settings
