"""
Langer options read from the ``[langer]`` table of a TOML settings file::

    [langer]
    preset = "en"
    state_file = "~/.myapp/state.json"
    preferences = ["en-US", "zh-TW"]

Every key is optional. Anything left out falls back to
:func:`~langer.langer.default_options`.
"""

from __future__ import annotations

__all__ = ["LangerConfig", "load_settings", "options_from_config"]

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from langer.langer import Options
from langer.paths import SETTING_PATH
from langer.recorder import StateFileRecorder

logger = logging.getLogger(__name__)


@dataclass
class LangerConfig:
    """Options that can be set from a settings file.

    Attributes:
        preset: Fixed language used when nothing is remembered.
        state_file: Path of the JSON file the chosen language is recorded in.
        preferences: Locale tags overriding the system preferences.
    """

    preset: str | None = None
    state_file: str | None = None
    preferences: list[str] | None = None

    @classmethod
    def from_dict(cls, section: dict[str, Any]) -> LangerConfig:
        preset = section.get("preset")
        if preset is not None and not isinstance(preset, str):
            raise ValueError(f"preset must be a string, got {type(preset)}")

        prefs = section.get("preferences")
        if prefs is not None and not isinstance(prefs, list):
            raise ValueError(f"preferences must be a list, got {type(prefs)}")

        state_file = section.get("state_file")
        return cls(
            preset=preset or None,
            state_file=str(state_file) if state_file else None,
            preferences=[str(p) for p in prefs] if prefs is not None else None,
        )


def load_settings(path: str | Path | None = None) -> LangerConfig:
    """Read the ``[langer]`` table of a TOML settings file.

    Args:
        path: Settings file to read. Defaults to ``settings.toml`` under the
            user config directory, which may be absent.

    Returns:
        LangerConfig: Parsed options; empty when the default file is missing
        or has no ``[langer]`` table.

    Raises:
        FileNotFoundError: If an explicit ``path`` does not exist.
        ValueError: If the file is not valid TOML or holds invalid values.
    """
    if path is None:
        target = SETTING_PATH
        if not target.is_file():
            logger.debug("No settings file at %s, using defaults", target)
            return LangerConfig()
    else:
        target = Path(path).expanduser()
        if not target.is_file():
            raise FileNotFoundError(f"Settings file not found: {target}")

    try:
        with target.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {target}: {e}") from e

    section = data.get("langer") or {}
    if not isinstance(section, dict):
        raise ValueError(f"[langer] must be a table in {target}")

    logger.debug("Loaded langer settings from %s", target)
    return LangerConfig.from_dict(section)


def options_from_config(config: LangerConfig) -> Options:
    """Build :class:`Options` holding only the entries ``config`` sets."""
    options: Options = {}
    if config.state_file:
        options["recorder"] = StateFileRecorder(config.state_file)
    if config.preset:
        options["preset"] = config.preset
    if config.preferences is not None:
        options["preferences"] = config.preferences
    return options
