"""
Platform family detection for cartonsdk.

SwiftWasm publishes toolchains for two platform families only. Release assets
are told apart by substrings of their download URLs, listed per family in
PLATFORM_SUFFIXES. Supporting a new platform means adding an entry there.

Usage:
    from cartonsdk.core.platform import detect_platform_family, platform_suffixes

    family = detect_platform_family()
    print(platform_suffixes(family))
"""

import functools
import platform
from typing import Dict, Optional, Tuple

# Ordered URL substrings identifying release assets for each platform family.
PLATFORM_SUFFIXES: Dict[str, Tuple[str, ...]] = {
    "linux": ("linux", "ubuntu18.04"),
    "macos": ("osx", "catalina"),
}


@functools.lru_cache(maxsize=1)
def detect_platform_family() -> str:
    """
    Detect the platform family of the running system.

    This function is cached - it only runs detection once per process.

    Returns:
        Platform family: 'linux' or 'macos'

    Raises:
        RuntimeError: If the operating system has no SwiftWasm toolchains
    """
    system = platform.system().lower()

    if system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        raise RuntimeError(f"Unsupported operating system: {system}")


def platform_suffixes(family: Optional[str] = None) -> Tuple[str, ...]:
    """
    Get release asset URL substrings for a platform family.

    Args:
        family: Platform family (auto-detected if None)

    Returns:
        Tuple of URL substrings, in order of preference

    Raises:
        RuntimeError: If the family is unknown
    """
    family = family or detect_platform_family()
    try:
        return PLATFORM_SUFFIXES[family]
    except KeyError:
        raise RuntimeError(f"Unsupported platform family: {family}") from None


def clear_platform_cache():
    """Clear the cached platform family (useful for testing)."""
    detect_platform_family.cache_clear()
