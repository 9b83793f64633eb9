"""
Configuration for bracketdom.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/bracketdom/config.toml) if exists
3. Environment variables (BRACKETDOM_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Parser limits."""
    max_depth: int = 0  # 0 = unlimited nesting


@dataclass
class PrinterConfig:
    """Tree printer settings."""
    indent: int = 4  # spaces per nesting level
    show_offsets: bool = True
    show_attributes: bool = True
    max_content: int = 60  # longer content is cut with "..."


@dataclass
class Config:
    """Root config with all settings."""
    parser: ParserConfig = field(default_factory=ParserConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bracketdom" / "config.toml"
    return Path.home() / ".config" / "bracketdom" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    # env var overrides
    config = _apply_env(config)

    return config


def _to_bool(value: object) -> bool:
    """TOML booleans pass through; strings "true", "1", "yes" -> True."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    raise ValueError(f"Expected a boolean, got {value!r}")


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "parser" in data:
        p = data["parser"]
        if "max_depth" in p:
            config.parser.max_depth = int(p["max_depth"])

    if "printer" in data:
        pr = data["printer"]
        if "indent" in pr:
            config.printer.indent = int(pr["indent"])
        if "show_offsets" in pr:
            config.printer.show_offsets = _to_bool(pr["show_offsets"])
        if "show_attributes" in pr:
            config.printer.show_attributes = _to_bool(pr["show_attributes"])
        if "max_content" in pr:
            config.printer.max_content = int(pr["max_content"])

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "BRACKETDOM_MAX_DEPTH": ("parser", "max_depth", int),
        "BRACKETDOM_INDENT": ("printer", "indent", int),
        "BRACKETDOM_SHOW_OFFSETS": ("printer", "show_offsets", bool),
        "BRACKETDOM_SHOW_ATTRIBUTES": ("printer", "show_attributes", bool),
        "BRACKETDOM_MAX_CONTENT": ("printer", "max_content", int),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                converted = _to_bool(val) if conv is bool else conv(val)
                setattr(getattr(config, section), attr, converted)

    return config


# Module-level config instance, loaded on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
