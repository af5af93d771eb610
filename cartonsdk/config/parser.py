"""YAML configuration parser for cartonsdk.

The configuration file is optional. It lives at ~/.carton/config.yaml unless
another path is given, and every key in it is optional:

    default_version: wasm-5.3.1-RELEASE
    release_api: https://api.github.com/repos/swiftwasm/swift/releases
    sdk_dir: ~/.carton/sdk
    swiftenv_dir: ~/.swiftenv/versions
    timeout: 30
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from cartonsdk.core.directory import get_config_file
from cartonsdk.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TOOLCHAIN_VERSION = "wasm-5.3.1-RELEASE"
DEFAULT_RELEASE_API = "https://api.github.com/repos/swiftwasm/swift/releases"
DEFAULT_TIMEOUT = 30.0


@dataclass
class CartonConfig:
    """Settings for toolchain resolution and installation."""

    default_version: str = DEFAULT_TOOLCHAIN_VERSION
    release_api: str = DEFAULT_RELEASE_API
    sdk_dir: Optional[Path] = None  # None means ~/.carton/sdk
    swiftenv_dir: Optional[Path] = None  # None means ~/.swiftenv/versions
    timeout: float = DEFAULT_TIMEOUT


def load_config(
    config_path: Optional[Path] = None, home: Optional[Path] = None
) -> CartonConfig:
    """
    Load configuration, falling back to defaults.

    An explicitly given file must exist. The default file is used only if it
    is present.

    Args:
        config_path: Explicit configuration file
        home: Home directory used to locate the default file

    Returns:
        Parsed configuration

    Raises:
        ConfigError: If the file is missing (explicit path only) or invalid
    """
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
        return parse_config(config_path)

    default_path = get_config_file(home)
    if not default_path.is_file():
        logger.debug(f"Config file not found (optional): {default_path}")
        return CartonConfig()

    return parse_config(default_path)


def parse_config(config_path: Path) -> CartonConfig:
    """
    Parse a configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    logger.debug(f"Loading configuration from {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}")

    if data is None:
        return CartonConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    return _parse_and_validate(data)


def _parse_and_validate(data: dict) -> CartonConfig:
    """Parse and validate configuration data."""
    known = {"default_version", "release_api", "sdk_dir", "swiftenv_dir", "timeout"}
    for key in data:
        if key not in known:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    config = CartonConfig()

    for key in ("default_version", "release_api"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{key} must be a non-empty string")
            setattr(config, key, value.strip())

    config.release_api = config.release_api.rstrip("/")

    for key in ("sdk_dir", "swiftenv_dir"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a path string")
            setattr(config, key, Path(value).expanduser())

    if "timeout" in data:
        timeout = data["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError("timeout must be a number")
        if timeout <= 0:
            raise ConfigError("timeout must be positive")
        config.timeout = float(timeout)

    return config
