"""Configuration management for the CLI."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, Any] = {
    "format": "table",
    "styles": [],
    "theme": "professional",
    "messages": {},
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "sitasi" / "config.yaml")

        # Project config
        paths.append(Path(".sitasi.yaml"))
        paths.append(Path("sitasi.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def get_config_paths() -> list[Path]:
    """Get configuration paths in precedence order."""
    return Config.get_config_paths()


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    An explicit ``path`` replaces the default search paths and its errors
    propagate; broken files found on the default paths are skipped.
    """
    config = dict(DEFAULTS)

    if path is not None:
        config = Config.merge_configs(config, Config.from_file(path))
    else:
        # Last one wins for conflicting keys
        for candidate in get_config_paths():
            if candidate.exists():
                try:
                    config = Config.merge_configs(config, Config.from_file(candidate))
                except ValueError as e:
                    logger.warning("Ignoring config file %s: %s", candidate, e)

    # Override with environment variables
    env_overrides = {}
    if output_format := os.environ.get("SITASI_FORMAT"):
        env_overrides["format"] = output_format
    if theme := os.environ.get("SITASI_THEME"):
        env_overrides["theme"] = theme

    return Config.merge_configs(config, env_overrides)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
