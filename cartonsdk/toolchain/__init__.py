"""
Toolchain management module for cartonsdk.

This module provides functionality for:
- Swift version resolution from hints and .swift-version files
- Local installation lookup
- Release asset lookup
- SDK download and unpacking
"""

from cartonsdk.toolchain.version import (
    infer_swift_version,
    spec_url,
    read_version_file,
    DEFAULT_TOOLCHAIN_VERSION,
    VERSION_FILE,
)
from cartonsdk.toolchain.probe import check_and_log
from cartonsdk.toolchain.release import (
    Release,
    ReleaseAsset,
    release_url,
    fetch_release,
    select_asset_url,
    infer_download_url,
)
from cartonsdk.toolchain.installer import install_sdk
from cartonsdk.toolchain.manager import (
    ToolchainManager,
    infer_swift_path,
    fetch_all_swift_versions,
)

__all__ = [
    # Version resolution
    "infer_swift_version",
    "spec_url",
    "read_version_file",
    "DEFAULT_TOOLCHAIN_VERSION",
    "VERSION_FILE",
    # Lookup
    "check_and_log",
    # Releases
    "Release",
    "ReleaseAsset",
    "release_url",
    "fetch_release",
    "select_asset_url",
    "infer_download_url",
    # Installation
    "install_sdk",
    "ToolchainManager",
    "infer_swift_path",
    "fetch_all_swift_versions",
]
