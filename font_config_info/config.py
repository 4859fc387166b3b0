"""Configuration loading for font-config-info.

Settings come from a TOML file. The file is looked up in this order:

1. the path given on the command line (``--config``),
2. ``$FONT_CONFIG_INFO_CONFIG``,
3. ``$XDG_CONFIG_HOME/font-config-info/config.toml``
   (``~/.config/font-config-info/config.toml`` when unset).

A missing file is not an error; the defaults below are used.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from font_config_info.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FONT_CONFIG_INFO_CONFIG"

DEFAULT_XRESOURCES = [
    "Xft.antialias",
    "Xft.hinting",
    "Xft.hintstyle",
    "Xft.rgba",
    "Xft.dpi",
]


@dataclass
class Config:
    """Tunable names and commands used by the reporters."""

    schema: str = "org.gnome.desktop.interface"
    gsettings_keys: list[str] = field(
        default_factory=lambda: ["font-name", "text-scaling-factor"]
    )
    xresources: list[str] = field(default_factory=lambda: list(DEFAULT_XRESOURCES))
    helper_command: str = "dump_xsettings"
    helper_url: str = "https://github.com/derat/xsettingsd"
    helper_timeout: float = 10.0
    fc_match_command: str = "fc-match"
    fallback_dpi: float = 96.0

    @staticmethod
    def default_path() -> Path:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return Path(base) / "font-config-info" / "config.toml"

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from ``path`` or the default location."""
        config_path = path or cls.default_path()
        if not config_path.exists():
            if path is not None:
                raise ConfigError(
                    "Configuration file not found", {"path": str(config_path)}
                )
            logger.debug("No config file at %s, using defaults", config_path)
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Invalid TOML: {e}", {"path": str(config_path)}
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration: {e}", {"path": str(config_path)}
            ) from e

        logger.debug("Loaded config from %s", config_path)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        defaults = cls()
        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                raise ConfigError(f"Unknown configuration key: {key}")
            values[key] = _check_type(key, value, getattr(defaults, key))

        return cls(**values)


def _check_type(key: str, value: Any, default: Any) -> Any:
    if isinstance(default, list):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{key} must be a list of strings")
        return list(value)
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number")
        if value <= 0:
            raise ConfigError(f"{key} must be positive")
        return float(value)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key} must be a non-empty string")
    return value
