"""
Directory layout for Swift toolchain installations.

Toolchains are searched for in an ordered list of installation roots:

    ~/.swiftenv/versions/   : versions managed by swiftenv (read-only)
    ~/.carton/sdk/          : SDKs installed by cartonsdk
        - <version>/        : unpacked toolchain
        - <version>.tar.gz  : archive, only present while installing

Every toolchain exposes its compiler at <root>/<version>/usr/bin/swift.
"""

from pathlib import Path
from typing import List, Optional

SWIFT_BINARY = "swift"

# Relative location of the swift executable inside an unpacked toolchain.
SWIFT_BINARY_COMPONENTS = ("usr", "bin", SWIFT_BINARY)


def get_home_dir(home: Optional[Path] = None) -> Path:
    """Return the home directory used to build installation roots."""
    return Path(home) if home is not None else Path.home()


def get_swiftenv_versions_dir(home: Optional[Path] = None) -> Path:
    """
    Get the swiftenv versions directory.

    Example:
        >>> get_swiftenv_versions_dir(Path("/home/user"))
        PosixPath('/home/user/.swiftenv/versions')
    """
    return get_home_dir(home) / ".swiftenv" / "versions"


def get_carton_sdk_dir(home: Optional[Path] = None) -> Path:
    """
    Get the directory SDKs are installed into.

    Example:
        >>> get_carton_sdk_dir(Path("/home/user"))
        PosixPath('/home/user/.carton/sdk')
    """
    return get_home_dir(home) / ".carton" / "sdk"


def get_config_file(home: Optional[Path] = None) -> Path:
    """Get the default location of the YAML configuration file."""
    return get_home_dir(home) / ".carton" / "config.yaml"


def installation_roots(
    home: Optional[Path] = None,
    swiftenv_dir: Optional[Path] = None,
    sdk_dir: Optional[Path] = None,
) -> List[Path]:
    """
    Get installation roots in search order.

    The swiftenv root comes first, the SDK root last. The SDK root is the
    only one that is ever written to.

    Args:
        home: Home directory (defaults to the current user's)
        swiftenv_dir: Override for the swiftenv versions directory
        sdk_dir: Override for the SDK directory

    Returns:
        Ordered list of installation roots
    """
    return [
        Path(swiftenv_dir) if swiftenv_dir else get_swiftenv_versions_dir(home),
        Path(sdk_dir) if sdk_dir else get_carton_sdk_dir(home),
    ]


def swift_executable_path(prefix: Path, version: str) -> Path:
    """Build the expected swift executable path for a version under a root."""
    return prefix.joinpath(version, *SWIFT_BINARY_COMPONENTS)
