"""
Configuration file support for jsonic.

Provides:
- Config dataclasses for holding configuration values
- TOML config file loading (jsonic.toml)
- Precedence: CLI > config file > defaults
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError
from .logging_config import level_from_name

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "jsonic.toml"
APP_DIR_NAME = "jsonic"


@dataclass
class PathsConfig:
    """Path configuration."""

    documents: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: Optional[str] = None

    @property
    def level_value(self) -> int:
        return level_from_name(self.level)


@dataclass
class Config:
    """Complete configuration for jsonic."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config_path: Optional[Path] = None) -> "Config":
        """
        Create Config from a dictionary (parsed TOML).

        Raises:
            ConfigError: If the logging level is not a known level name.
        """
        paths_data = data.get("paths", {})
        logging_data = data.get("logging", {})

        level = str(logging_data.get("level", "WARNING"))
        try:
            level_from_name(level)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        return cls(
            paths=PathsConfig(
                documents=paths_data.get("documents"),
            ),
            logging=LoggingConfig(
                level=level.strip().upper(),
                log_file=logging_data.get("log_file"),
            ),
            config_path=config_path,
        )


def get_user_config_dir() -> Path:
    """Return the per-user config directory ($XDG_CONFIG_HOME/jsonic)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_DIR_NAME


def find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the configuration file.

    Search order:
    1. Explicit path if provided
    2. jsonic.toml in current directory
    3. jsonic.toml in the per-user config directory

    Args:
        config_path: Explicit path to config file.

    Returns:
        Path to config file, or None if not found.

    Raises:
        ConfigError: If an explicit path was given and does not exist.
    """
    if config_path is not None:
        if config_path.exists():
            return config_path
        raise ConfigError(f"Config file not found: {config_path}")

    cwd_config = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_config.exists():
        return cwd_config

    user_config = get_user_config_dir() / DEFAULT_CONFIG_NAME
    if user_config.exists():
        return user_config

    return None


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a TOML file.

    If no config file is found, returns default configuration.

    Args:
        config_path: Optional explicit path to config file.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If config file exists but cannot be parsed.
    """
    config_file = find_config_file(config_path)

    if config_file is None:
        logger.debug("No config file found, using defaults")
        return Config()

    logger.debug(f"Loading config from: {config_file}")

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}") from e

    config = Config.from_dict(data, config_path=config_file)
    logger.info(f"Loaded config from: {config_file}")
    return config
