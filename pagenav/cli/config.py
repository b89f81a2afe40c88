"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import msgspec
import yaml

from pagenav.core.exceptions import InvalidConfigurationError
from pagenav.core.navigators import NavigatorKind


class PagerSettings(msgspec.Struct, frozen=True, kw_only=True):
    """Validated pager settings."""

    page_length: int = 10
    navigator: NavigatorKind = NavigatorKind.RANDOM
    theme: str = "default"

    def __post_init__(self):
        if self.page_length <= 0:
            raise InvalidConfigurationError(
                "page_length", f"must be positive, got {self.page_length}"
            )


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "pagenav" / "config.yaml")

        # Project config
        paths.append(Path(".pagenav.yaml"))
        paths.append(Path("pagenav.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result

    @staticmethod
    def to_settings(config: dict[str, Any]) -> PagerSettings:
        """Validate a configuration dictionary into settings.

        Unknown keys are ignored.

        Raises:
            InvalidConfigurationError: If a value has the wrong type or range
        """
        try:
            return msgspec.convert(config, PagerSettings, strict=False)
        except msgspec.ValidationError as e:
            raise InvalidConfigurationError("config", str(e)) from e


def get_config_paths() -> list[Path]:
    """Get configuration paths in precedence order."""
    return Config.get_config_paths()


def load_config(extra: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    Args:
        extra: Explicit config file, applied last
    """
    config = {}

    # Load from all config paths (last one wins for conflicting keys)
    for path in get_config_paths():
        if path.exists():
            config = Config.merge_configs(config, Config.from_file(path))

    # Override with environment variables
    env_overrides: dict[str, Any] = {}
    if page_length := os.environ.get("PAGENAV_PAGE_LENGTH"):
        env_overrides["page_length"] = page_length
    if navigator := os.environ.get("PAGENAV_NAVIGATOR"):
        env_overrides["navigator"] = navigator
    if theme := os.environ.get("PAGENAV_THEME"):
        env_overrides["theme"] = theme
    config = Config.merge_configs(config, env_overrides)

    if extra is not None:
        config = Config.merge_configs(config, Config.from_file(extra))

    return config


def load_settings(extra: Path | None = None) -> PagerSettings:
    """Load and validate settings."""
    return Config.to_settings(load_config(extra))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
