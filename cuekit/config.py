"""Configuration management for cuekit."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from cuekit.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from cuekit.utils.fileops import secure_atomic_write


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "cuekit" / "config.toml"


def _default_suffixes() -> list[str]:
    return [".cue"]


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        recursive: Whether ``cue check`` walks directory trees by default.
        suffixes: File suffixes treated as cue sheets when scanning
            directories (compared case-insensitively).
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    recursive: bool = False
    suffixes: list[str] = field(default_factory=_default_suffixes)
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        normalized = []
        for suffix in self.suffixes:
            if not suffix.startswith("."):
                warnings.append(f"check.suffixes entry '{suffix}' has no leading dot, added one")
                suffix = f".{suffix}"
            normalized.append(suffix.lower())
        self.suffixes = normalized

        if not self.suffixes:
            warnings.append("check.suffixes is empty; directory scans will find nothing")

        return warnings

    def to_dict(self) -> dict[str, Any]:
        """Return the TOML document representation of this config."""
        return {
            "display": {"colored_output": self.colored_output},
            "check": {"recursive": self.recursive, "suffixes": list(self.suffixes)},
        }

    def save(self, path: Path | None = None) -> Path:
        """Write this config as TOML.

        Args:
            path: Target file. Defaults to ``config_path`` or the default location.

        Returns:
            The path written.
        """
        target = path or self.config_path or get_default_config_path()
        target = target.expanduser()
        secure_atomic_write(target, tomli_w.dumps(self.to_dict()))
        self.config_path = target
        return target


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: cuekit init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    # Load from file
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [check] section
    check = data.get("check", {})
    if "recursive" in check:
        value = check["recursive"]
        if not isinstance(value, bool):
            raise ConfigValidationError("check.recursive", value, "must be a boolean")
        config.recursive = value

    if "suffixes" in check:
        value = check["suffixes"]
        if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
            raise ConfigValidationError("check.suffixes", value, "must be a list of strings")
        config.suffixes = list(value)

    return config
