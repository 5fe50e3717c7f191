"""Configuration loading and validation."""

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from payloadgen.config.schema import PayloadgenConfig

DEFAULT_CONFIG_PATH = Path.home() / ".payloadgen" / "payloadgen.yaml"


class ConfigError(Exception):
    """Configuration loading or validation error."""


def _resolve_path(path: Optional[Union[str, Path]]) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, "r") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> PayloadgenConfig:
    """Load and validate payloadgen configuration from YAML file.

    A missing or empty file yields the defaults, so payloadgen runs without
    any configuration.

    Args:
        path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If the file is unreadable, not YAML, not a mapping at
            the top level, or fails validation
    """
    path = _resolve_path(path)

    if not path.exists():
        return PayloadgenConfig()
    if path.is_dir():
        raise ConfigError(f"Config path {path} is a directory")

    config_data = _read_yaml(path)

    if config_data is None:
        return PayloadgenConfig()

    if not isinstance(config_data, dict):
        raise ConfigError(
            f"Config in {path} must be a mapping with 'payload' and 'logging' sections, "
            f"got {type(config_data).__name__}"
        )

    try:
        return PayloadgenConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e


def save_config(config: PayloadgenConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration object to save
        path: Destination path (string or Path object). If None, uses default location.
    """
    path = _resolve_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
