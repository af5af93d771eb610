"""
Configuration for cartonsdk.
"""

from .parser import (
    CartonConfig,
    load_config,
    parse_config,
    DEFAULT_TOOLCHAIN_VERSION,
    DEFAULT_RELEASE_API,
    DEFAULT_TIMEOUT,
)

__all__ = [
    "CartonConfig",
    "load_config",
    "parse_config",
    "DEFAULT_TOOLCHAIN_VERSION",
    "DEFAULT_RELEASE_API",
    "DEFAULT_TIMEOUT",
]
